import logging
import os

from collections.abc import Mapping
from enum import Enum
from pathlib import Path

from . import plist
from . import resource
from . import BUNDLE_PACKAGE
from . import DOCUMENTS_DIR
from . import PLIST_EXTENSION
from . import PLIST_FORMAT
from . import PLIST_SORT_KEYS
from .exceptions import InvalidArgumentError, PlistExistsError, PlistNotFoundError, PlistNotWritableError

LOG = logging.getLogger(__name__)

ROOT_KINDS = (dict, list)

# Resolved on first use, then held for the life of the process
_documents_dir = None


class Location(Enum):
    """Where a property list name is resolved."""
    DOCUMENTS_DIR = 'documentsDir'
    MAIN_BUNDLE = 'mainBundle'
    PATH = 'none'


def _location(location):
    """Coerce a Location or its value, raises InvalidArgumentError for anything else."""
    try:
        result = Location(location)
    except ValueError as e:
        _valid = ', '.join(repr(_l.value) for _l in Location)
        raise InvalidArgumentError('location must be one of {valid} (was {loc!r})'.format(valid=_valid,
                                                                                        loc=location)) from e

    return result


def _filename(name):
    """Property list file name for a logical name."""
    result = '{name}.{ext}'.format(name=name, ext=PLIST_EXTENSION)

    return result


def _plain(value):
    """Copy mappings into dicts and tuples into lists at every level, plistlib only writes those."""
    if isinstance(value, Mapping):
        result = {_k: _plain(_v) for _k, _v in value.items()}
    elif isinstance(value, (list, tuple)):
        result = [_plain(_v) for _v in value]
    else:
        result = value

    return result


def _describe(name, location):
    """Human readable description of a file for error messages."""
    if location is Location.DOCUMENTS_DIR:
        result = '{f} in documents directory'.format(f=_filename(name))
    else:
        result = str(name)

    return result


def _resolve(name, location):
    """File system path for a name in a writable location."""
    if location is Location.DOCUMENTS_DIR:
        result = plist_path(name)
    else:
        result = Path(name)

    return result


def documents_dir():
    """The documents directory, resolved once per process."""
    global _documents_dir

    if _documents_dir is None:
        _documents_dir = Path(DOCUMENTS_DIR).expanduser()
        LOG.debug('Documents directory: {d}'.format(d=_documents_dir))

    return _documents_dir


def plist_path(name):
    """Path of the property list file 'name' in the documents directory.

    Example: plist_path('awesome') -> ~/Documents/awesome.plist
    """
    result = documents_dir() / _filename(name)

    return result


def exists(name, location=Location.DOCUMENTS_DIR, package=None):
    """Check if a property list file exists.

    For Location.DOCUMENTS_DIR, 'name' is the file name minus the extension.
    For Location.MAIN_BUNDLE, 'name' is looked up as a resource in 'package' (defaults to the
    configured bundle package). For Location.PATH, 'name' is the full file path.
    """
    location = _location(location)

    if location is Location.MAIN_BUNDLE:
        result = resource.path(_filename(name), package or BUNDLE_PACKAGE) is not None
    else:
        result = _resolve(name, location).is_file()

    return result


def writable(name, location=Location.DOCUMENTS_DIR):
    """Check if a property list file can be written to. The main bundle is never writable."""
    location = _location(location)

    if location is Location.MAIN_BUNDLE:
        raise InvalidArgumentError('location must be one of {docs!r} or {path!r} (was {loc!r})'.format(
            docs=Location.DOCUMENTS_DIR.value, path=Location.PATH.value, loc=location.value))

    result = os.access(_resolve(name, location), os.W_OK)

    return result


def _check_updatable(name, location):
    """Raise if the file for 'name' is missing or can't be written to."""
    if not exists(name, location):
        LOG.debug('Missing property list: {f}'.format(f=_describe(name, location)))
        raise PlistNotFoundError('Cannot find plist file: {f}'.format(f=_describe(name, location)))

    if not writable(name, location):
        LOG.debug('Read only property list: {f}'.format(f=_describe(name, location)))
        raise PlistNotWritableError('Cannot write to plist file: {f}'.format(f=_describe(name, location)))


def save(name, value, documents_path=True, fmt=None):
    """Replace the contents of an existing property list file with 'value'.

    'value' must be a mapping or a list. Saving only updates files, it never creates them,
    use copy_template() to create the first revision. The file is replaced atomically.

    Raises InvalidArgumentError, PlistNotFoundError, PlistNotWritableError.
    """
    if not isinstance(value, (Mapping, list)):
        raise InvalidArgumentError('Expected value to be a mapping or a list, was {t}'.format(t=type(value).__name__))

    location = Location.DOCUMENTS_DIR if documents_path else Location.PATH
    _check_updatable(name, location)

    try:
        data = plist.dumps(_plain(value), fmt=fmt or PLIST_FORMAT, sort_keys=PLIST_SORT_KEYS)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidArgumentError('Cannot serialize value as a property list: {e}'.format(e=e)) from e

    result = plist.write_bytes(data, _resolve(name, location))
    LOG.debug('Saved {f}'.format(f=_describe(name, location)))

    return result


def load(name, kind=dict, documents_path=True):
    """The object stored in a property list file, a dict or a list depending on 'kind'.

    Returns None when the root of the file is not a 'kind'.
    """
    location = Location.DOCUMENTS_DIR if documents_path else Location.PATH

    if not exists(name, location):
        LOG.debug('Missing property list: {f}'.format(f=_describe(name, location)))
        raise PlistNotFoundError('Cannot find plist file: {f}'.format(f=_describe(name, location)))

    if kind not in ROOT_KINDS:
        raise InvalidArgumentError('Expected kind to be dict or list, was {k!r}'.format(k=kind))

    result = plist.read(_resolve(name, location))

    if not isinstance(result, kind):
        LOG.warning('Root of {f} is {actual}, expected {kind}'.format(f=_describe(name, location),
                                                                     actual=type(result).__name__,
                                                                     kind=kind.__name__))
        result = None

    return result


def copy_template(name, package=None, overwrite=False):
    """Copy the template '<name>.plist' from the bundle package into the documents directory.

    Raises PlistNotFoundError if the bundle has no such template and PlistExistsError if the
    destination already exists (unless 'overwrite' is set). Returns the destination path.
    """
    package = package or BUNDLE_PACKAGE
    template = resource.read_bytes(_filename(name), package)

    if template is None:
        raise PlistNotFoundError('Cannot find plist template: {f} in bundle {pkg}'.format(f=_filename(name),
                                                                                          pkg=package))

    result = plist_path(name)

    if result.exists() and not overwrite:
        raise PlistExistsError('Plist file already exists: {f}'.format(f=_describe(name, Location.DOCUMENTS_DIR)))

    result.parent.mkdir(parents=True, exist_ok=True)
    plist.write_bytes(template, result)
    LOG.info('Copied {pkg}/{f} to {dest}'.format(pkg=package.replace('.', '/'), f=_filename(name), dest=result))

    return result


def ensure(name, package=None):
    """Copy the bundled template on first run, returns the documents directory path."""
    if not exists(name):
        copy_template(name, package=package)

    result = plist_path(name)

    return result
