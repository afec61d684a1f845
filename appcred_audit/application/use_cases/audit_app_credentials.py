"""Use case for auditing application credentials and reporting findings."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from ...domain.entities import AuditReport
from ...domain.services import ExpiryEvaluator
from ...domain.value_objects import WarningWindow
from ..ports import ApplicationDirectory, ReportSender

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of the credential audit use case."""

    report: AuditReport
    notifications_sent: int
    notifications_failed: int
    dry_run: bool

    @property
    def success(self) -> bool:
        """Check if the operation was successful."""
        return self.notifications_failed == 0


class AuditAppCredentials:
    """
    Use case for auditing app registration credentials and sending a report.

    Fetches applications through the directory port, evaluates them with
    the domain evaluator, and hands the report to every configured sender.
    """

    def __init__(
        self,
        directory: ApplicationDirectory,
        report_senders: list[ReportSender],
        window: WarningWindow,
        *,
        dry_run: bool = False,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Initialize the use case.

        Args:
            directory: Adapter for listing application registrations.
            report_senders: List of notification adapters.
            window: Warning window configuration.
            dry_run: If True, don't actually send notifications.
            clock: Source of the reference time for each run.
        """
        self._directory = directory
        self._senders = [s for s in report_senders if s.is_configured()]
        self._evaluator = ExpiryEvaluator(window)
        self._dry_run = dry_run
        self._clock = clock

    async def execute(self) -> CheckResult:
        """
        Execute the credential audit.

        Returns:
            CheckResult containing the report and notification status.

        Raises:
            DirectoryAccessError: If the directory cannot be read.
        """
        logger.info("Starting application credential audit...")

        applications = await self._directory.list_applications()
        report = self._evaluator.analyze(applications, now=self._clock())
        logger.info("Evaluated %d applications: %s", len(applications), report.get_summary())

        sent = failed = 0
        if not report.requires_notification:
            logger.info("Nothing to report")
        elif self._dry_run:
            self._log_findings(report)
        elif not self._senders:
            logger.warning("No report senders configured; %d findings not delivered", report.total_count)
        else:
            sent, failed = await self._deliver(report)

        return CheckResult(
            report=report,
            notifications_sent=sent,
            notifications_failed=failed,
            dry_run=self._dry_run,
        )

    async def _deliver(self, report: AuditReport) -> tuple[int, int]:
        """Send concurrently; an exception counts as a failed send."""
        outcomes = await asyncio.gather(
            *(sender.send(report) for sender in self._senders), return_exceptions=True
        )
        sent = 0
        for sender, outcome in zip(self._senders, outcomes, strict=True):
            name = type(sender).__name__
            if isinstance(outcome, BaseException):
                logger.error("%s raised while sending", name, exc_info=outcome)
            elif outcome:
                sent += 1
            else:
                logger.warning("%s did not deliver the report", name)
        return sent, len(outcomes) - sent

    def _log_findings(self, report: AuditReport) -> None:
        logger.info(
            "DRY RUN: %d findings across %d applications (window %d days), nothing sent",
            report.total_count,
            report.affected_applications_count,
            report.warning_days,
        )
        for finding in report.findings_sorted_by_expiry():
            logger.info(
                "  [%s] %s %s: %s",
                finding.level.display_name,
                finding.name,
                finding.credential_type.display_name,
                finding.problem_text,
            )
