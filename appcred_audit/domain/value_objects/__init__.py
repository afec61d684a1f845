"""Domain value objects - Immutable objects defined by their attributes."""

from .app_type import AppType
from .credential_type import CredentialType
from .finding_level import FindingLevel
from .warning_window import DEFAULT_WARNING_DAYS, WarningWindow

__all__ = [
    "DEFAULT_WARNING_DAYS",
    "AppType",
    "CredentialType",
    "FindingLevel",
    "WarningWindow",
]
