"""Finding entity: one detected credential problem for one application."""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects import AppType, CredentialType, FindingLevel

UNKNOWN_APPLICATION_NAME = "<unknown>"


@dataclass(frozen=True, slots=True)
class Finding:
    """An expired or soon-to-expire credential of one kind on one application."""

    level: FindingLevel
    credential_type: CredentialType
    name: str
    problem_text: str
    expiry_date: datetime
    app_type: AppType = AppType.APP_REGISTRATION
    application_id: str | None = None

    @property
    def azure_portal_url(self) -> str | None:
        """URL to manage this app's credentials in Azure Portal."""
        if not self.application_id:
            return None
        return (
            f"https://portal.azure.com/#view/Microsoft_AAD_RegisteredApps"
            f"/ApplicationMenuBlade/~/Credentials/appId/{self.application_id}"
        )

    def to_dict(self) -> dict[str, str | None]:
        """Plain representation for JSON and table serializers."""
        return {
            "level": self.level.value,
            "app_type": self.app_type.value,
            "credential_type": self.credential_type.value,
            "name": self.name,
            "problem_text": self.problem_text,
            "expiry_date": self.expiry_date.isoformat(),
            "application_id": self.application_id,
        }
