"""Credential type value object."""

from enum import StrEnum, auto


class CredentialType(StrEnum):
    """Kind of credential attached to an application registration."""

    SECRET = auto()
    CERTIFICATE = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case CredentialType.SECRET:
                return "Secret"
            case CredentialType.CERTIFICATE:
                return "Certificate"
