"""Tests for domain value objects."""

from __future__ import annotations

import pytest

from appcred_audit.domain.exceptions import DomainError, InvalidWarningWindowError
from appcred_audit.domain.value_objects import (
    AppType,
    CredentialType,
    FindingLevel,
    WarningWindow,
)


class TestWarningWindow:
    """Tests for WarningWindow value object."""

    def test_default_is_28_days(self) -> None:
        """Default warning window should be 28 days."""
        assert WarningWindow().days == 28

    def test_zero_is_allowed(self) -> None:
        """A zero-day window is valid."""
        assert WarningWindow(0).days == 0

    def test_negative_is_rejected(self) -> None:
        """Negative windows are invalid."""
        with pytest.raises(InvalidWarningWindowError, match=">= 0"):
            WarningWindow(-1)

    @pytest.mark.parametrize("bad", [7.0, "7", False])
    def test_non_integer_is_rejected(self, bad: object) -> None:
        """Only real integers are accepted."""
        with pytest.raises(InvalidWarningWindowError, match="integer"):
            WarningWindow(bad)  # type: ignore[arg-type]

    def test_error_hierarchy(self) -> None:
        """The error is both a domain error and a ValueError."""
        assert issubclass(InvalidWarningWindowError, DomainError)
        assert issubclass(InvalidWarningWindowError, ValueError)

    def test_window_is_frozen(self) -> None:
        """Window should be immutable."""
        window = WarningWindow()
        with pytest.raises(AttributeError):
            window.days = 10  # type: ignore[misc]


class TestEnums:
    """Tests for enum value objects."""

    def test_credential_type_display_names(self) -> None:
        """Display names are used in problem texts."""
        assert CredentialType.SECRET.display_name == "Secret"
        assert CredentialType.CERTIFICATE.display_name == "Certificate"

    def test_credential_type_string_representation(self) -> None:
        """Credential types render as lowercase values."""
        assert str(CredentialType.SECRET) == "secret"
        assert str(CredentialType.CERTIFICATE) == "certificate"

    def test_finding_level_values(self) -> None:
        """Finding level values should be lowercase strings."""
        assert FindingLevel.CRITICAL.value == "critical"
        assert FindingLevel.WARNING.value == "warning"
        assert FindingLevel.CRITICAL.display_name == "Critical"

    def test_finding_level_colors_differ(self) -> None:
        """Each level has its own colour and emoji."""
        assert FindingLevel.CRITICAL.color_hex != FindingLevel.WARNING.color_hex
        assert FindingLevel.CRITICAL.emoji != FindingLevel.WARNING.emoji

    def test_app_type_tag(self) -> None:
        """App registrations are tagged with a fixed string."""
        assert AppType.APP_REGISTRATION.value == "AppRegistration"
        assert AppType.APP_REGISTRATION.display_name == "App Registration"
