import logging

from . import resource

LOG = logging.getLogger(__name__)


def load(f='configuration.yaml'):
    """Load the module configuration."""
    result = resource.read(f)

    return result
