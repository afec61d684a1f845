"""Report sender using SMTP."""

from __future__ import annotations

import asyncio
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import TYPE_CHECKING

from .base import BaseReportSender, format_subject, parse_recipients
from .rendering import render_html_report

if TYPE_CHECKING:
    from ....domain.entities import AuditReport


@dataclass(frozen=True, slots=True)
class SmtpConfig:
    """Relay, login and addressing for SMTP mail."""

    enabled: bool = False
    server: str = ""
    port: int = 587
    username: str = ""
    password: str = ""
    from_address: str = ""
    to_addresses: str = ""  # Semicolon-separated
    use_tls: bool = True


class SmtpReportSender(BaseReportSender):
    """Mail the report as text with an HTML alternative."""

    def __init__(self, config: SmtpConfig) -> None:
        super().__init__()
        self._config = config

    def is_configured(self) -> bool:
        cfg = self._config
        return cfg.enabled and bool(cfg.server and cfg.from_address and parse_recipients(cfg.to_addresses))

    async def send(self, report: AuditReport) -> bool:
        if not self.is_configured():
            self._logger.warning("SMTP sender not configured")
            return False

        recipients = parse_recipients(self._config.to_addresses)
        try:
            await asyncio.to_thread(self._deliver, self.build_message(report, recipients))
        except (smtplib.SMTPException, OSError):
            self._logger.exception("SMTP delivery via %s failed", self._config.server)
            return False

        self._logger.info("Report mailed to %s", ", ".join(recipients))
        return True

    def _deliver(self, message: EmailMessage) -> None:
        cfg = self._config
        with smtplib.SMTP(cfg.server, cfg.port, timeout=30) as smtp:
            if cfg.use_tls:
                smtp.starttls()
            if cfg.username and cfg.password:
                smtp.login(cfg.username, cfg.password)
            smtp.send_message(message)

    def build_message(self, report: AuditReport, recipients: list[str]) -> EmailMessage:
        """Text body first, HTML table as the preferred alternative."""
        message = EmailMessage()
        message["Subject"] = format_subject(report)
        message["From"] = self._config.from_address
        message["To"] = ", ".join(recipients)
        message.set_content(self._text_body(report))
        message.add_alternative(render_html_report(report), subtype="html")
        return message

    def _text_body(self, report: AuditReport) -> str:
        header = [
            "App Registration Credentials Report",
            report.get_summary(),
            "",
            f"Applications scanned:  {report.applications_scanned}",
            f"Applications affected: {report.affected_applications_count}",
            f"Warning window: {report.warning_days} days",
            f"Critical: {report.critical_count} / Warning: {report.warning_count}",
        ]
        if not report.findings:
            return "\n".join(header)
        findings = self.format_finding_list(report.findings_sorted_by_expiry())
        return "\n".join([*header, "", "Findings:", findings])
