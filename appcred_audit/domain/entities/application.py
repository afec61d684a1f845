"""Application entity representing an Entra ID app registration."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Self

from ..value_objects import CredentialType
from .credential import Credential


@dataclass(frozen=True, slots=True)
class Application:
    """An Entra ID application registration and its credentials."""

    display_name: str | None
    secret_credentials: tuple[Credential, ...] = field(default_factory=tuple)
    certificate_credentials: tuple[Credential, ...] = field(default_factory=tuple)
    app_id: str | None = None

    def credentials_of(self, kind: CredentialType) -> tuple[Credential, ...]:
        """Get the credentials of one kind, in directory order."""
        match kind:
            case CredentialType.SECRET:
                return self.secret_credentials
            case CredentialType.CERTIFICATE:
                return self.certificate_credentials

    @classmethod
    def create(
        cls,
        *,
        display_name: str | None,
        secrets: Iterable[Credential] = (),
        certificates: Iterable[Credential] = (),
        app_id: str | None = None,
    ) -> Self:
        """Factory method to create an Application from any iterables."""
        return cls(
            display_name=display_name,
            secret_credentials=tuple(secrets),
            certificate_credentials=tuple(certificates),
            app_id=app_id,
        )
