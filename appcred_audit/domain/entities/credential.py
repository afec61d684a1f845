"""Credential entity representing a secret or certificate."""

from dataclasses import dataclass
from datetime import UTC, datetime

from ..value_objects import CredentialType


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware datetime, assuming UTC when naive."""
    return value if value.tzinfo else value.replace(tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class Credential:
    """A credential (secret or certificate) belonging to an application."""

    credential_type: CredentialType
    expires_at: datetime | None
    key_id: str | None = None
    display_name: str | None = None

    @property
    def expires_at_utc(self) -> datetime | None:
        """Expiry as a timezone-aware datetime (naive values are UTC)."""
        if self.expires_at is None:
            return None
        return as_utc(self.expires_at)
