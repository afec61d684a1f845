"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidWarningWindowError(DomainError, ValueError):
    """Raised when the warning window is negative or not a whole number of days."""
