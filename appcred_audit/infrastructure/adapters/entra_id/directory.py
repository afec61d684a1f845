"""Entra ID application directory implementation."""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime
from typing import Any

from ....application.exceptions import DirectoryAccessError
from ....domain.entities import UNKNOWN_APPLICATION_NAME, Application, Credential
from ....domain.value_objects import CredentialType
from .graph_client import GraphClient

logger = logging.getLogger(__name__)

# Graph emits 7 fractional digits, datetime accepts at most 6
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


class EntraIdApplicationDirectory:
    """
    Application directory implementation using Microsoft Graph API.

    Implements the ApplicationDirectory port for Entra ID app registrations.
    """

    def __init__(self, client: GraphClient) -> None:
        """Initialize the directory over a shared Graph client."""
        self._client = client

    async def list_applications(self) -> list[Application]:
        """
        Retrieve all app registrations with their secrets and certificates.

        Raises:
            DirectoryAccessError: If retrieval fails.
        """
        try:
            records = await self._client.get_applications()
        except Exception as e:
            msg = f"Failed to retrieve applications from Entra ID: {e}"
            logger.exception(msg)
            raise DirectoryAccessError(msg) from e

        applications = [self.map_application(record) for record in records]
        logger.info(
            "Mapped %d app registrations with %d credentials",
            len(applications),
            sum(len(a.secret_credentials) + len(a.certificate_credentials) for a in applications),
        )
        return applications

    @classmethod
    def map_application(cls, raw: dict[str, Any]) -> Application:
        """Map a raw Graph application record to a domain entity."""
        display_name = raw.get("displayName") or None
        return Application.create(
            display_name=display_name,
            secrets=[
                cls._map_credential(cred, CredentialType.SECRET, display_name)
                for cred in raw.get("passwordCredentials") or []
            ],
            certificates=[
                cls._map_credential(cred, CredentialType.CERTIFICATE, display_name)
                for cred in raw.get("keyCredentials") or []
            ],
            app_id=raw.get("appId") or None,
        )

    @classmethod
    def _map_credential(
        cls,
        raw: dict[str, Any],
        credential_type: CredentialType,
        app_name: str | None,
    ) -> Credential:
        """
        Map raw Graph API credential data to a domain entity.

        A missing or unparsable ``endDateTime`` yields a credential with no
        expiry, which the selector skips.
        """
        expiry_str = raw.get("endDateTime")
        expires_at = cls._parse_datetime(expiry_str) if expiry_str else None
        if expires_at is None:
            logger.warning(
                "%s %s in app registration %s has no usable expiry date",
                credential_type.display_name,
                raw.get("keyId", "unknown"),
                app_name or UNKNOWN_APPLICATION_NAME,
            )

        return Credential(
            credential_type=credential_type,
            expires_at=expires_at,
            key_id=raw.get("keyId"),
            display_name=raw.get("displayName"),
        )

    @staticmethod
    def _parse_datetime(dt_string: str) -> datetime | None:
        """Parse ISO datetime string to datetime object."""
        try:
            dt_string = _EXCESS_FRACTION.sub(r"\1", dt_string.replace("Z", "+00:00"))
            dt = datetime.fromisoformat(dt_string)
            return dt if dt.tzinfo else dt.replace(tzinfo=UTC)
        except (AttributeError, TypeError, ValueError):
            logger.warning("Failed to parse datetime: %s", dt_string)
            return None
