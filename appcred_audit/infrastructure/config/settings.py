"""Settings read from the process environment."""

import os
from dataclasses import dataclass, field

from ...domain.value_objects import DEFAULT_WARNING_DAYS, WarningWindow
from ..adapters.entra_id.graph_client import GraphClientConfig
from ..adapters.notifications.email import SmtpConfig
from ..adapters.notifications.graph_email import GraphEmailConfig
from ..adapters.notifications.webhook import WebhookConfig

_TRUTHY = frozenset({"true", "1", "yes"})


def _text(name: str, default: str = "") -> str:
    return os.environ.get(name, default)


def _flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    return default if raw is None else raw.strip().lower() in _TRUTHY


def _number(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from None


def _graph_from_env() -> GraphClientConfig:
    return GraphClientConfig(
        tenant_id=_text("AZURE_TENANT_ID"),
        client_id=_text("AZURE_CLIENT_ID"),
        client_secret=_text("AZURE_CLIENT_SECRET"),
        use_managed_identity=_flag("USE_MANAGED_IDENTITY"),
    )


def _graph_email_from_env() -> GraphEmailConfig:
    return GraphEmailConfig(
        enabled=_flag("GRAPH_EMAIL_ENABLED"),
        from_address=_text("GRAPH_EMAIL_FROM"),
        to_addresses=_text("GRAPH_EMAIL_TO"),
        save_to_sent_items=_flag("GRAPH_EMAIL_SAVE_TO_SENT"),
    )


def _smtp_from_env() -> SmtpConfig:
    return SmtpConfig(
        enabled=_flag("SMTP_ENABLED"),
        server=_text("SMTP_SERVER"),
        port=_number("SMTP_PORT", 587),
        username=_text("SMTP_USERNAME"),
        password=_text("SMTP_PASSWORD"),
        from_address=_text("SMTP_FROM"),
        to_addresses=_text("SMTP_TO"),
        use_tls=_flag("SMTP_USE_TLS", default=True),
    )


def _webhook_from_env() -> WebhookConfig:
    return WebhookConfig(enabled=_flag("WEBHOOK_ENABLED"), url=_text("WEBHOOK_URL"))


@dataclass
class Settings:
    """Everything the entry point needs, grouped per adapter."""

    graph: GraphClientConfig = field(default_factory=_graph_from_env)
    graph_email: GraphEmailConfig = field(default_factory=_graph_email_from_env)
    smtp: SmtpConfig = field(default_factory=_smtp_from_env)
    webhook: WebhookConfig = field(default_factory=_webhook_from_env)

    warning_days: int = field(default_factory=lambda: _number("WARNING_DAYS", DEFAULT_WARNING_DAYS))
    dry_run: bool = field(default_factory=lambda: _flag("DRY_RUN"))
    run_mode: str = field(default_factory=lambda: _text("RUN_MODE", "once"))
    cron_schedule: str = field(default_factory=lambda: _text("CRON_SCHEDULE", "0 8 * * *"))
    log_level: str = field(default_factory=lambda: _text("LOG_LEVEL", "INFO"))

    api_enabled: bool = field(default_factory=lambda: _flag("API_ENABLED"))
    api_host: str = field(default_factory=lambda: _text("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _number("API_PORT", 8080))

    @property
    def warning_window(self) -> WarningWindow:
        return WarningWindow(self.warning_days)

    def validate(self) -> None:
        """
        Check the settings before anything connects.

        Raises:
            ValueError: When directory credentials are missing.
            InvalidWarningWindowError: When ``WARNING_DAYS`` is negative.
        """
        if not self.graph.use_managed_identity:
            required = {
                "AZURE_TENANT_ID": self.graph.tenant_id,
                "AZURE_CLIENT_ID": self.graph.client_id,
                "AZURE_CLIENT_SECRET": self.graph.client_secret,
            }
            missing = [name for name, value in required.items() if not value]
            if missing:
                msg = f"Missing required environment variables: {', '.join(missing)}"
                raise ValueError(msg)

        self.warning_window  # noqa: B018


def load_settings() -> Settings:
    """Read and validate settings from the environment."""
    settings = Settings()
    settings.validate()
    return settings
