import logging
import importlib.resources as resources

import yaml

LOG = logging.getLogger(__name__)


def read(resource, package='plistrw.resources'):
    """Load a YAML resource file (r)."""
    result = dict()

    with resources.files(package).joinpath(resource).open('r', encoding='utf-8') as f:
        result = yaml.safe_load(f)

    LOG.debug('Read resource file {}/{}'.format(package.replace('.', '/'), resource))

    return result


def path(resource, package):
    """Locate a resource in a package, returns None if it is not a file in that package."""
    result = None

    try:
        _p = resources.files(package).joinpath(resource)
    except ModuleNotFoundError:
        LOG.debug('Resource package {} not found'.format(package))
        return result

    if _p.is_file():
        result = _p

    LOG.debug('Resource lookup {}/{}: {}'.format(package.replace('.', '/'), resource, result))

    return result


def read_bytes(resource, package):
    """Read the raw bytes of a resource, returns None if it does not exist."""
    result = None
    _p = path(resource, package)

    if _p is not None:
        result = _p.read_bytes()

    return result
