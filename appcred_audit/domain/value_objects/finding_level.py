"""Finding level value object."""

from enum import StrEnum, auto


class FindingLevel(StrEnum):
    """Severity of a credential finding."""

    CRITICAL = auto()
    WARNING = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        return self.value.capitalize()

    @property
    def emoji(self) -> str:
        """Get emoji representation for this level."""
        match self:
            case FindingLevel.CRITICAL:
                return "🔴"
            case FindingLevel.WARNING:
                return "🟡"

    @property
    def color_hex(self) -> str:
        """Get hex color code for this level."""
        match self:
            case FindingLevel.CRITICAL:
                return "#dc3545"
            case FindingLevel.WARNING:
                return "#ffc107"
