"""Audit report aggregate root."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import UTC, datetime

from ..value_objects import CredentialType, FindingLevel
from .credential import as_utc
from .finding import Finding


@dataclass(frozen=True, slots=True)
class AuditReport:
    """Aggregate root representing the findings of one audit pass."""

    findings: tuple[Finding, ...]
    warning_days: int
    applications_scanned: int = 0
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def critical(self) -> list[Finding]:
        """Get all critical findings."""
        return [f for f in self.findings if f.level == FindingLevel.CRITICAL]

    @property
    def warning(self) -> list[Finding]:
        """Get all warning findings."""
        return [f for f in self.findings if f.level == FindingLevel.WARNING]

    @property
    def critical_count(self) -> int:
        """Count of critical findings."""
        return len(self.critical)

    @property
    def warning_count(self) -> int:
        """Count of warning findings."""
        return len(self.warning)

    @property
    def total_count(self) -> int:
        """Total finding count."""
        return len(self.findings)

    def count_by_level(self) -> dict[FindingLevel, int]:
        """Count findings per level, including levels with no findings."""
        counts = Counter(f.level for f in self.findings)
        return {level: counts.get(level, 0) for level in FindingLevel}

    def count_by_credential_type(self) -> dict[CredentialType, int]:
        """Count findings per credential type."""
        counts = Counter(f.credential_type for f in self.findings)
        return {kind: counts.get(kind, 0) for kind in CredentialType}

    @property
    def affected_applications_count(self) -> int:
        """Count of distinct applications with at least one finding."""
        return len({f.application_id or f.name for f in self.findings})

    @property
    def highest_level(self) -> FindingLevel | None:
        """The most severe level present, or None for a clean report."""
        if self.critical:
            return FindingLevel.CRITICAL
        if self.warning:
            return FindingLevel.WARNING
        return None

    @property
    def requires_notification(self) -> bool:
        """Check if this report warrants sending a notification."""
        return bool(self.findings)

    def get_summary(self) -> str:
        """Generate a human-readable summary of the report."""
        if not self.findings:
            return "All application credentials are healthy"

        parts: list[str] = []
        if self.critical_count:
            parts.append(f"{self.critical_count} critical")
        if self.warning_count:
            parts.append(f"{self.warning_count} warning")

        return f"{self.total_count} credentials requiring attention: {', '.join(parts)}"

    def findings_sorted_by_expiry(self) -> list[Finding]:
        """Findings ordered by expiry date, earliest first (stable)."""
        return sorted(self.findings, key=lambda f: as_utc(f.expiry_date))
