"""Selection of the most relevant credential of one kind."""

from collections.abc import Sequence

from ..entities import Credential


def select_latest(credentials: Sequence[Credential]) -> Credential | None:
    """
    Pick the credential whose expiry is furthest in the future.

    Credentials without an expiry cannot be ordered and are skipped. When
    several credentials share the latest expiry, the first one in input
    order is returned.

    Args:
        credentials: Credentials of a single kind from one application.

    Returns:
        The latest-expiring credential, or None if there is none with an expiry.
    """
    dated = [c for c in credentials if c.expires_at is not None]
    if not dated:
        return None
    return max(dated, key=lambda c: c.expires_at_utc)
