class PlistError(Exception):
    """Base class for property list store errors."""


class InvalidArgumentError(PlistError, ValueError):
    """Unknown location, root kind, or a value that can't be stored as a property list."""


class PlistNotFoundError(PlistError, FileNotFoundError):
    """The property list file (or bundled template) does not exist."""


class PlistNotWritableError(PlistError, PermissionError):
    """The property list file exists but can't be written to."""


class PlistExistsError(PlistError, FileExistsError):
    """The destination of a template copy already exists."""
