"""Application use cases."""

from .audit_app_credentials import AuditAppCredentials, CheckResult

__all__ = ["AuditAppCredentials", "CheckResult"]
