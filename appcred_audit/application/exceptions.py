"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class DirectoryAccessError(ApplicationError):
    """Raised when applications cannot be retrieved from the directory."""

