"""Report sender posting through Microsoft Graph ``sendMail``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .base import BaseReportSender, format_subject, parse_recipients
from .rendering import render_html_report

if TYPE_CHECKING:
    from ....domain.entities import AuditReport
    from ..entra_id.graph_client import GraphClient


@dataclass(frozen=True, slots=True)
class GraphEmailConfig:
    """Mailbox and recipients for Graph mail.

    Authentication comes from the shared ``GraphClient``; the identity
    needs the ``Mail.Send`` application permission.
    """

    enabled: bool = False
    from_address: str = ""
    to_addresses: str = ""  # Semicolon-separated
    save_to_sent_items: bool = False


class GraphEmailReportSender(BaseReportSender):
    """Mail the HTML report from a tenant mailbox."""

    def __init__(self, client: GraphClient, config: GraphEmailConfig) -> None:
        super().__init__()
        self._client = client
        self._config = config

    def is_configured(self) -> bool:
        return (
            self._config.enabled
            and bool(self._config.from_address)
            and bool(parse_recipients(self._config.to_addresses))
        )

    async def send(self, report: AuditReport) -> bool:
        if not self.is_configured():
            self._logger.warning("Graph email sender not configured")
            return False

        try:
            await self._client.send_mail(self._config.from_address, self.build_message(report))
        except Exception:
            self._logger.exception("Failed to send Graph email")
            return False

        self._logger.info("Graph email sent to %s", self._config.to_addresses)
        return True

    def build_message(self, report: AuditReport) -> dict[str, Any]:
        """Build the ``sendMail`` request body."""
        return {
            "message": {
                "subject": format_subject(report),
                "body": {"contentType": "HTML", "content": render_html_report(report)},
                "toRecipients": [
                    {"emailAddress": {"address": address}}
                    for address in parse_recipients(self._config.to_addresses)
                ],
            },
            "saveToSentItems": self._config.save_to_sent_items,
        }
