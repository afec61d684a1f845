"""Warning window value object."""

from dataclasses import dataclass

from ..exceptions import InvalidWarningWindowError

DEFAULT_WARNING_DAYS = 28


@dataclass(frozen=True, slots=True)
class WarningWindow:
    """Number of days before expiry at which a valid credential is flagged."""

    days: int = DEFAULT_WARNING_DAYS

    def __post_init__(self) -> None:
        """Validate the window is a non-negative whole number of days."""
        if isinstance(self.days, bool) or not isinstance(self.days, int):
            msg = f"Warning window must be an integer number of days, got {self.days!r}"
            raise InvalidWarningWindowError(msg)
        if self.days < 0:
            msg = f"Warning window must be >= 0 days, got {self.days}"
            raise InvalidWarningWindowError(msg)
