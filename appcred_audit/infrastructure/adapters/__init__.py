"""Infrastructure adapters - Implementations of application ports."""

from .entra_id import EntraIdApplicationDirectory, GraphClient
from .notifications import (
    GraphEmailReportSender,
    SmtpReportSender,
    WebhookReportSender,
)

__all__ = [
    "EntraIdApplicationDirectory",
    "GraphClient",
    "GraphEmailReportSender",
    "SmtpReportSender",
    "WebhookReportSender",
]
