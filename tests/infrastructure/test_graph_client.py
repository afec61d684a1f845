"""Tests for the shared Microsoft Graph client."""

from __future__ import annotations

import asyncio
import json
import threading
from typing import Any

import httpx
import msal
import pytest

from appcred_audit.infrastructure.adapters.entra_id import GraphClient, GraphClientConfig

NEXT_LINK = "https://graph.microsoft.com/v1.0/applications?$skiptoken=page2"


class StubTokenSource:
    """Stands in for an MSAL client and records every token request."""

    def __init__(self, result: dict[str, Any] | None = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self._result = result or {"access_token": "token-1", "expires_in": 3600}

    def acquire_token_for_client(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        return self._result


class RecordingGraph:
    """Mock transport serving two pages of applications and accepting mail."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/sendMail"):
            return httpx.Response(202)
        if "skiptoken" in str(request.url):
            return httpx.Response(200, json={"value": [{"displayName": "Second"}]})
        return httpx.Response(
            200,
            json={"value": [{"displayName": "First"}], "@odata.nextLink": NEXT_LINK},
        )


def _client(
    graph: RecordingGraph, tokens: StubTokenSource, config: GraphClientConfig | None = None
) -> GraphClient:
    return GraphClient(
        config or GraphClientConfig(tenant_id="tenant", client_id="client", client_secret="secret"),
        transport=httpx.MockTransport(graph),
        token_source=tokens,
    )


class TestGetApplications:
    """Tests for GraphClient.get_applications."""

    def test_follows_next_link_across_pages(self) -> None:
        """Records from every page are returned in order."""
        graph = RecordingGraph()
        records = asyncio.run(_client(graph, StubTokenSource()).get_applications())

        assert [r["displayName"] for r in records] == ["First", "Second"]
        assert len(graph.requests) == 2

    def test_first_request_is_relative_with_select(self) -> None:
        """The first page is resolved against v1.0 and selects credential fields."""
        graph = RecordingGraph()
        asyncio.run(_client(graph, StubTokenSource()).get_applications())

        first = graph.requests[0]
        assert str(first.url).startswith("https://graph.microsoft.com/v1.0/applications")
        assert first.url.params["$select"] == GraphClient.APPLICATION_FIELDS
        assert first.headers["Authorization"] == "Bearer token-1"

    def test_next_link_is_used_verbatim(self) -> None:
        """Absolute next links are requested as given, without another $select."""
        graph = RecordingGraph()
        asyncio.run(_client(graph, StubTokenSource()).get_applications())

        second = graph.requests[1]
        assert second.url.params["$skiptoken"] == "page2"
        assert "$select" not in second.url.params

    def test_http_errors_propagate(self) -> None:
        """A failing page raises instead of returning a partial list."""
        client = GraphClient(
            GraphClientConfig(),
            transport=httpx.MockTransport(lambda request: httpx.Response(403)),
            token_source=StubTokenSource(),
        )
        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(client.get_applications())


class TestAccessToken:
    """Tests for token acquisition and caching."""

    def test_token_reused_across_pages_and_calls(self) -> None:
        """One token serves every request while it is valid."""
        tokens = StubTokenSource()
        client = _client(RecordingGraph(), tokens)

        async def run_twice() -> None:
            await client.get_applications()
            await client.get_applications()

        asyncio.run(run_twice())

        assert len(tokens.calls) == 1

    def test_short_lived_token_is_refreshed(self) -> None:
        """Tokens inside the renewal margin are fetched again."""
        tokens = StubTokenSource({"access_token": "short", "expires_in": 60})
        client = _client(RecordingGraph(), tokens)

        async def twice() -> None:
            await client.access_token()
            await client.access_token()

        asyncio.run(twice())

        assert len(tokens.calls) == 2

    def test_client_secret_mode_requests_scopes(self) -> None:
        """Confidential clients ask for the Graph default scope."""
        tokens = StubTokenSource()
        asyncio.run(_client(RecordingGraph(), tokens).access_token())
        assert tokens.calls == [{"scopes": ["https://graph.microsoft.com/.default"]}]

    def test_managed_identity_mode_requests_resource(self) -> None:
        """Managed identity asks for the Graph resource."""
        tokens = StubTokenSource()
        config = GraphClientConfig(use_managed_identity=True)
        asyncio.run(_client(RecordingGraph(), tokens, config).access_token())
        assert tokens.calls == [{"resource": "https://graph.microsoft.com"}]

    def test_token_fetched_off_the_event_loop_thread(self) -> None:
        """Blocking MSAL calls run in a worker thread."""
        threads: list[int] = []

        class ThreadRecordingSource(StubTokenSource):
            def acquire_token_for_client(self, **kwargs: Any) -> dict[str, Any]:
                threads.append(threading.get_ident())
                return super().acquire_token_for_client(**kwargs)

        asyncio.run(_client(RecordingGraph(), ThreadRecordingSource()).access_token())

        assert threads
        assert threads[0] != threading.get_ident()

    def test_failure_reports_msal_error(self) -> None:
        """MSAL error descriptions surface in the raised error."""
        tokens = StubTokenSource({"error": "invalid_client", "error_description": "bad secret"})
        with pytest.raises(RuntimeError, match="bad secret"):
            asyncio.run(_client(RecordingGraph(), tokens).access_token())


class FakeManagedIdentityClient:
    """Captures how the managed identity client is built."""

    def __init__(self, identity: Any, *, http_client: Any) -> None:
        self.identity = identity
        self.http_client = http_client

    def acquire_token_for_client(self, **kwargs: Any) -> dict[str, Any]:
        return {"access_token": "mi-token", "expires_in": 3600}


class TestManagedIdentity:
    """Tests for building the managed identity token source."""

    @pytest.fixture(autouse=True)
    def fake_msal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(msal, "ManagedIdentityClient", FakeManagedIdentityClient)

    def test_client_id_selects_user_assigned_identity(self) -> None:
        """A configured client id means a user-assigned identity."""
        client = GraphClient(GraphClientConfig(client_id="uami-id", use_managed_identity=True))
        source = client._build_token_source()

        assert isinstance(source.identity, msal.UserAssignedManagedIdentity)
        client.close()

    def test_no_client_id_selects_system_assigned_identity(self) -> None:
        """Without a client id the system-assigned identity is used."""
        client = GraphClient(GraphClientConfig(use_managed_identity=True))
        source = client._build_token_source()

        assert isinstance(source.identity, msal.SystemAssignedManagedIdentity)
        client.close()

    def test_close_releases_identity_http_client(self) -> None:
        """The HTTP session handed to MSAL is closed with the client."""
        client = GraphClient(GraphClientConfig(use_managed_identity=True))
        http_client = client._build_token_source().http_client

        client.close()

        assert http_client.is_closed


class TestSendMail:
    """Tests for GraphClient.send_mail."""

    def test_posts_to_mailbox_with_token(self) -> None:
        """The message goes to the sender mailbox's sendMail endpoint."""
        graph = RecordingGraph()
        payload = {"message": {"subject": "hi"}, "saveToSentItems": False}

        asyncio.run(_client(graph, StubTokenSource()).send_mail("alerts@example.com", payload))

        (request,) = graph.requests
        assert request.method == "POST"
        assert request.url.path == "/v1.0/users/alerts@example.com/sendMail"
        assert request.headers["Authorization"] == "Bearer token-1"
        assert json.loads(request.content) == payload
