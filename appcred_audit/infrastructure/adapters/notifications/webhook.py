"""Generic JSON webhook report sender."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import httpx

from .base import BaseReportSender

if TYPE_CHECKING:
    from ....domain.entities import AuditReport

EVENT_TYPE = "app_credentials_audit"


@dataclass(frozen=True, slots=True)
class WebhookConfig:
    """Target URL for the JSON report."""

    enabled: bool = False
    url: str = ""
    timeout: float = 30.0


class WebhookReportSender(BaseReportSender):
    """POST the counts and the findings, sorted by expiry, as JSON."""

    def __init__(self, config: WebhookConfig, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        super().__init__()
        self._config = config
        self._transport = transport

    def is_configured(self) -> bool:
        return self._config.enabled and bool(self._config.url)

    async def send(self, report: AuditReport) -> bool:
        if not self.is_configured():
            self._logger.warning("Webhook sender not configured")
            return False

        try:
            async with httpx.AsyncClient(timeout=self._config.timeout, transport=self._transport) as http:
                response = await http.post(self._config.url, json=self.build_payload(report))
                response.raise_for_status()
        except httpx.HTTPError:
            self._logger.exception("Webhook POST to %s failed", self._config.url)
            return False

        self._logger.info("Webhook accepted report (%d findings)", report.total_count)
        return True

    def build_payload(self, report: AuditReport) -> dict[str, Any]:
        highest = report.highest_level
        counts = {f"{level.value}_count": n for level, n in report.count_by_level().items()}
        return {
            "event_type": EVENT_TYPE,
            "timestamp": datetime.now(UTC).isoformat(),
            "level": highest.value if highest else None,
            "summary": report.get_summary(),
            "warning_days": report.warning_days,
            "statistics": {
                "applications_scanned": report.applications_scanned,
                "applications_affected": report.affected_applications_count,
                "total_findings": report.total_count,
                **counts,
            },
            "findings": [finding.to_dict() for finding in report.findings_sorted_by_expiry()],
        }
