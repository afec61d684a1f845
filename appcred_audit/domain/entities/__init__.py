"""Domain entities - Objects with identity and lifecycle."""

from .application import Application
from .audit_report import AuditReport
from .credential import Credential
from .finding import UNKNOWN_APPLICATION_NAME, Finding

__all__ = [
    "UNKNOWN_APPLICATION_NAME",
    "Application",
    "AuditReport",
    "Credential",
    "Finding",
]
