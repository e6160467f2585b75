import sys

from os import geteuid

MIN_PYTHON = '3.9'


def isroot():
    """User is root."""
    result = geteuid() == 0

    return result


def python_ver():
    """Python version."""
    result = 'Python {version}'.format(version=' '.join(sys.version.splitlines()))

    return result


def python_compatible(required=MIN_PYTHON):
    """Check if python version is minimum required."""
    result = False
    req_ver = tuple(int(_p) for _p in required.split('.'))

    result = sys.version_info[:len(req_ver)] >= req_ver

    return result
