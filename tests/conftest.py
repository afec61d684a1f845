"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from appcred_audit.domain.entities import Application, Credential
from appcred_audit.domain.value_objects import CredentialType, WarningWindow

NOW = datetime(2026, 3, 15, 9, 30, tzinfo=UTC)

CredentialFactory = Callable[[float], Credential]


@pytest.fixture
def now() -> datetime:
    """Fixed reference time so tests never depend on the wall clock."""
    return NOW


@pytest.fixture
def default_window() -> WarningWindow:
    """Default 28-day warning window."""
    return WarningWindow()


@pytest.fixture
def secret() -> CredentialFactory:
    """Build a secret expiring the given number of days after NOW."""

    def _make(days: float) -> Credential:
        return Credential(
            credential_type=CredentialType.SECRET,
            expires_at=NOW + timedelta(days=days),
        )

    return _make


@pytest.fixture
def certificate() -> CredentialFactory:
    """Build a certificate expiring the given number of days after NOW."""

    def _make(days: float) -> Credential:
        return Credential(
            credential_type=CredentialType.CERTIFICATE,
            expires_at=NOW + timedelta(days=days),
        )

    return _make


@pytest.fixture
def expired_app(certificate: CredentialFactory) -> Application:
    """An application whose only certificate expired 2 days ago."""
    return Application.create(
        display_name="Expired App",
        certificates=[certificate(-2)],
        app_id="11111111-1111-1111-1111-111111111111",
    )


@pytest.fixture
def expiring_app(secret: CredentialFactory) -> Application:
    """An application whose only secret expires in 10 days."""
    return Application.create(
        display_name="Expiring App",
        secrets=[secret(10)],
        app_id="22222222-2222-2222-2222-222222222222",
    )


@pytest.fixture
def healthy_app(secret: CredentialFactory, certificate: CredentialFactory) -> Application:
    """An application with a long-lived secret and certificate."""
    return Application.create(
        display_name="Healthy App",
        secrets=[secret(365)],
        certificates=[certificate(200)],
    )
