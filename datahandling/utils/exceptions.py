"""Custom exception classes."""

from typing import Optional


class DataHandlingError(Exception):
    """Base exception for all toolkit errors."""

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(self.message)


class PathNotFoundError(DataHandlingError):
    """Raised when a path cannot be resolved on the filesystem."""
    pass


class NotUnderRootError(DataHandlingError):
    """Raised when a path is not a descendant of the given root directory."""
    pass


class ValueOutOfRangeError(DataHandlingError):
    """Raised when a number falls outside its inclusive bounds."""
    pass


class InvalidOptionError(DataHandlingError):
    """Raised when a value is not one of the allowed options."""
    pass
