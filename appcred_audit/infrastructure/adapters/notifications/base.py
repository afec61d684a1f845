"""Base report sender with common functionality."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ....domain.entities import AuditReport, Finding


def parse_recipients(addresses: str) -> list[str]:
    """Split a semicolon-delimited recipient list, trimming blanks."""
    return [addr.strip() for addr in addresses.split(";") if addr.strip()]


def format_subject(report: AuditReport) -> str:
    """Format the notification subject line."""
    level = report.highest_level
    prefix = f"[{level.value.upper()}]" if level else "[INFO]"
    return f"{prefix} App Registration Credentials - {report.get_summary()}"


class BaseReportSender(ABC):
    """Abstract base class for report senders."""

    def __init__(self) -> None:
        """Initialize the report sender."""
        self._logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def send(self, report: AuditReport) -> bool:
        """Send notification for the given report."""
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the sender is properly configured."""
        ...

    def format_finding_list(
        self,
        findings: list[Finding],
        *,
        max_items: int = 25,
        include_url: bool = True,
    ) -> str:
        """Format a list of findings for plain text display."""
        lines: list[str] = []

        for finding in findings[:max_items]:
            expiry = finding.expiry_date.strftime("%Y-%m-%d")
            line = (
                f"- [{finding.level.display_name}] {finding.name} - "
                f"{finding.credential_type.display_name}: {finding.problem_text} ({expiry})"
            )
            if include_url and finding.azure_portal_url:
                line += f"\n  Manage: {finding.azure_portal_url}"
            lines.append(line)

        if len(findings) > max_items:
            lines.append(f"... and {len(findings) - max_items} more")

        return "\n".join(lines)
