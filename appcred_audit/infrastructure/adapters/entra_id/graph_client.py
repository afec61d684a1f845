"""Microsoft Graph access shared by the directory and the mail sender."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, ClassVar

import httpx
import msal

logger = logging.getLogger(__name__)

# Tokens are renewed this long before Graph says they expire
TOKEN_RENEWAL_MARGIN = timedelta(minutes=5)


@dataclass(frozen=True, slots=True)
class GraphClientConfig:
    """Tenant credentials for Microsoft Graph.

    With ``use_managed_identity`` the secret is ignored and ``client_id``,
    when set, picks a user-assigned identity.
    """

    tenant_id: str = ""
    client_id: str = ""
    client_secret: str = ""
    use_managed_identity: bool = False
    timeout: float = 30.0


class GraphClient:
    """
    Authenticated Graph gateway.

    One instance owns the MSAL client and the cached bearer token, so the
    directory reads and ``sendMail`` run under the same identity.
    """

    BASE_URL: ClassVar[str] = "https://graph.microsoft.com/v1.0"
    RESOURCE: ClassVar[str] = "https://graph.microsoft.com"
    SCOPES: ClassVar[list[str]] = [f"{RESOURCE}/.default"]
    LOGIN_URL: ClassVar[str] = "https://login.microsoftonline.com"
    APPLICATION_FIELDS: ClassVar[str] = "id,appId,displayName,passwordCredentials,keyCredentials"

    def __init__(
        self,
        config: GraphClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        token_source: Any = None,
    ) -> None:
        """
        Args:
            config: Tenant credentials.
            transport: Replacement HTTP transport for Graph calls.
            token_source: Object with ``acquire_token_for_client`` used
                instead of building an MSAL client.
        """
        self._config = config
        self._transport = transport
        self._token_source = token_source
        self._identity_http: httpx.Client | None = None
        self._token: str | None = None
        self._token_valid_until: datetime | None = None

    @property
    def config(self) -> GraphClientConfig:
        return self._config

    def _build_token_source(self) -> msal.ConfidentialClientApplication | msal.ManagedIdentityClient:
        cfg = self._config
        if not cfg.use_managed_identity:
            return msal.ConfidentialClientApplication(
                client_id=cfg.client_id,
                client_credential=cfg.client_secret,
                authority=f"{self.LOGIN_URL}/{cfg.tenant_id}",
            )

        if cfg.client_id:
            identity = msal.UserAssignedManagedIdentity(client_id=cfg.client_id)
        else:
            identity = msal.SystemAssignedManagedIdentity()
        self._identity_http = httpx.Client(timeout=cfg.timeout)
        return msal.ManagedIdentityClient(identity, http_client=self._identity_http)

    def _fetch_token(self) -> dict[str, Any]:
        """Blocking MSAL call; run it off the event loop."""
        if self._token_source is None:
            self._token_source = self._build_token_source()
        if self._config.use_managed_identity:
            return self._token_source.acquire_token_for_client(resource=self.RESOURCE)
        return self._token_source.acquire_token_for_client(scopes=self.SCOPES)

    async def access_token(self) -> str:
        """Return a bearer token, reusing the cached one until near expiry."""
        now = datetime.now(UTC)
        if self._token and self._token_valid_until and now < self._token_valid_until:
            return self._token

        result = await asyncio.to_thread(self._fetch_token)
        if "access_token" not in result:
            reason = result.get("error_description") or result.get("error") or "no token returned"
            msg = f"Failed to acquire access token: {reason}"
            raise RuntimeError(msg)

        lifetime = timedelta(seconds=int(result.get("expires_in", 3600)))
        self._token = result["access_token"]
        self._token_valid_until = datetime.now(UTC) + lifetime - TOKEN_RENEWAL_MARGIN
        return self._token

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.BASE_URL,
            timeout=self._config.timeout,
            transport=self._transport,
        )

    async def get_applications(self) -> list[dict[str, Any]]:
        """Every app registration record, following ``@odata.nextLink``."""
        logger.info("Fetching application registrations from Entra ID...")
        records: list[dict[str, Any]] = []
        next_url: str | None = "/applications"
        params: dict[str, str] | None = {"$select": self.APPLICATION_FIELDS}

        async with self._http() as http:
            while next_url:
                token = await self.access_token()
                # next links are absolute and already carry the query
                response = await http.get(
                    next_url, params=params, headers={"Authorization": f"Bearer {token}"}
                )
                response.raise_for_status()
                page = response.json()
                records.extend(page.get("value", []))
                next_url = page.get("@odata.nextLink")
                params = None

        logger.info("Found %d application registrations", len(records))
        return records

    async def send_mail(self, mailbox: str, payload: dict[str, Any]) -> None:
        """Post a ``sendMail`` request on behalf of ``mailbox``."""
        token = await self.access_token()
        async with self._http() as http:
            response = await http.post(
                f"/users/{mailbox}/sendMail",
                json=payload,
                headers={"Authorization": f"Bearer {token}"},
            )
            response.raise_for_status()

    def close(self) -> None:
        """Release the managed identity HTTP session, if one was opened."""
        if self._identity_http is not None:
            self._identity_http.close()
            self._identity_http = None
