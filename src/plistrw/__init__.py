import logging; logging.getLogger(__name__).addHandler(logging.NullHandler())  # NOQA
import sys

from pathlib import Path

from . import osinfo

if not osinfo.python_compatible():
    print('Python {ver} is required.'.format(ver=osinfo.MIN_PYTHON))
    sys.exit(1)

from . import configuration  # NOQA

CONF = configuration.load()
LOG = logging.getLogger(__name__)

BUNDLE_ID = CONF['MODULE']['bundle_id']
NAME = CONF['MODULE']['name']
LICENSE = CONF['MODULE']['license']
VERSION = CONF['MODULE']['version']
VERSION_STRING = '{name} {version} {eula}'.format(name=NAME, version=VERSION, eula=LICENSE)
DOCUMENTS_DIR = CONF['DOCUMENTS']['path']
BUNDLE_PACKAGE = CONF['BUNDLE']['package']
PLIST_EXTENSION = CONF['PLIST']['extension']
PLIST_FORMAT = CONF['PLIST']['format']
PLIST_SORT_KEYS = CONF['PLIST']['sort_keys']
LOG_FILE = CONF['LOGGING']['log_file']
USER_LOG_DIR = Path(CONF['LOGGING']['user_path']).expanduser()
SYSTEM_LOG_DIR = Path(CONF['LOGGING']['system_path'])

# Have to do other non-core module loading here to avoid circular imports
from .exceptions import (InvalidArgumentError, PlistError, PlistExistsError,  # NOQA
                         PlistNotFoundError, PlistNotWritableError)
from .store import (Location, copy_template, documents_dir, ensure, exists,  # NOQA
                    load, plist_path, save, writable)

LOG.debug('{versionstr}'.format(versionstr=VERSION_STRING))
LOG.debug('{pythonver}'.format(pythonver=osinfo.python_ver()))
