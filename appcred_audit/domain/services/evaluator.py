"""Domain service for evaluating application credentials."""

from collections.abc import Iterator, Sequence
from datetime import UTC, datetime

from ..entities import Application, AuditReport, Finding
from ..value_objects import CredentialType, WarningWindow
from .credential_selector import select_latest
from .expiry_classifier import classify


def _findings_for(
    app: Application, now: datetime, warning_days: int
) -> Iterator[Finding]:
    """Yield the secret finding, then the certificate finding, of one app."""
    for kind in (CredentialType.SECRET, CredentialType.CERTIFICATE):
        finding = classify(app, kind, select_latest(app.credentials_of(kind)), now, warning_days)
        if finding is not None:
            yield finding


def evaluate(
    applications: Sequence[Application],
    now: datetime,
    warning_days: int,
) -> tuple[Finding, ...]:
    """
    Evaluate every application's latest secret and certificate.

    Args:
        applications: Applications to audit.
        now: Reference point in time.
        warning_days: Size of the warning window in days.

    Returns:
        Findings in application order, secrets before certificates.

    Raises:
        InvalidWarningWindowError: If warning_days is negative or not an int.
    """
    window = WarningWindow(warning_days)
    return tuple(
        finding
        for app in applications
        for finding in _findings_for(app, now, window.days)
    )


class ExpiryEvaluator:
    """Domain service producing audit reports for a fixed warning window."""

    def __init__(self, window: WarningWindow) -> None:
        """Initialize evaluator with the warning window."""
        self._window = window

    def analyze(
        self, applications: Sequence[Application], now: datetime | None = None
    ) -> AuditReport:
        """
        Evaluate applications and wrap the findings in a report.

        Args:
            applications: Applications to audit.
            now: Reference point in time, defaults to the current UTC time.

        Returns:
            AuditReport with the findings in application order.
        """
        reference = now or datetime.now(UTC)
        return AuditReport(
            findings=evaluate(applications, reference, self._window.days),
            warning_days=self._window.days,
            applications_scanned=len(applications),
            generated_at=reference,
        )
