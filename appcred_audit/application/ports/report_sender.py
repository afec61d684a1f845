"""Port for report sending - driven/secondary port."""

from typing import Protocol

from ...domain.entities import AuditReport


class ReportSender(Protocol):
    """
    Port for delivering an audit report.

    This is a driven (secondary) port that defines how the application
    hands findings to external notification channels.
    """

    async def send(self, report: AuditReport) -> bool:
        """
        Send a notification based on the audit report.

        Args:
            report: The audit report to notify about.

        Returns:
            True if notification was sent successfully.
        """
        ...

    def is_configured(self) -> bool:
        """
        Check if this sender is properly configured.

        Returns:
            True if the sender is ready to send notifications.
        """
        ...
