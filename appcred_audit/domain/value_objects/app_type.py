"""Application type value object."""

from enum import StrEnum


class AppType(StrEnum):
    """Category of directory principal a finding was raised for."""

    APP_REGISTRATION = "AppRegistration"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case AppType.APP_REGISTRATION:
                return "App Registration"
