import logging
import os
import plistlib
import shutil
import tempfile

from pathlib import Path

LOG = logging.getLogger(__name__)

FORMATS = {'xml': plistlib.FMT_XML,
           'binary': plistlib.FMT_BINARY}


def read(f):
    """Read Property List"""
    result = None

    with open(f, 'rb') as _f:
        result = plistlib.load(_f)

    return result


def dumps(d, fmt='xml', sort_keys=False):
    """Serialize an object to Property List bytes. Raises ValueError on an unknown format."""
    if fmt not in FORMATS:
        raise ValueError('Unknown property list format {} (expected one of {})'.format(fmt, ', '.join(FORMATS)))

    result = plistlib.dumps(d, fmt=FORMATS[fmt], sort_keys=sort_keys)

    return result


def write_bytes(b, f):
    """Atomically replace the file contents with b."""
    result = Path(f)
    fd, tmp = tempfile.mkstemp(prefix='.{name}.'.format(name=result.name), suffix='.tmp', dir=result.parent)
    tmp = Path(tmp)

    try:
        with os.fdopen(fd, 'wb') as _f:
            _f.write(b)
            _f.flush()
            os.fsync(_f.fileno())

        # mkstemp creates 0600 files, keep the permission bits of the file being replaced
        if result.exists():
            shutil.copymode(result, tmp)

        tmp.replace(result)
    finally:
        if tmp.exists():
            tmp.unlink()

    LOG.debug('Wrote {size} bytes to {f}'.format(size=len(b), f=result))

    return result
