"""Port for the application directory - driven/secondary port."""

from typing import Protocol

from ...domain.entities import Application


class ApplicationDirectory(Protocol):
    """
    Port for listing application registrations from an identity directory.

    Implementations map each native record's display name and credential
    lists into domain entities. Credentials with a missing or unparsable
    expiry are kept with ``expires_at=None`` rather than dropped or raised.
    """

    async def list_applications(self) -> list[Application]:
        """
        Retrieve all application registrations.

        Returns:
            List of applications with their secrets and certificates.

        Raises:
            DirectoryAccessError: If retrieval fails.
        """
        ...
