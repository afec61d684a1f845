#!/usr/bin/env python3
"""
App Registration Credential Audit

Entry point: builds the adapters from settings and runs the audit once,
on a cron schedule, or behind the HTTP API.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from croniter import croniter

from . import __version__
from .application.use_cases import AuditAppCredentials
from .infrastructure.adapters import (
    EntraIdApplicationDirectory,
    GraphClient,
    GraphEmailReportSender,
    SmtpReportSender,
    WebhookReportSender,
)
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import ReportSender
    from .application.use_cases import CheckResult

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def build_use_case(settings: Settings, graph: GraphClient) -> AuditAppCredentials:
    """Wire the directory and every sender around one Graph client."""
    senders: list[ReportSender] = [
        GraphEmailReportSender(graph, settings.graph_email),
        SmtpReportSender(settings.smtp),
        WebhookReportSender(settings.webhook),
    ]
    active = [type(s).__name__ for s in senders if s.is_configured()]
    logger.info("Active report senders: %s", ", ".join(active) or "none")

    return AuditAppCredentials(
        directory=EntraIdApplicationDirectory(graph),
        report_senders=senders,
        window=settings.warning_window,
        dry_run=settings.dry_run,
    )


class Application:
    """Runs the audit in the configured mode."""

    def __init__(self, settings: Settings, graph: GraphClient | None = None) -> None:
        self._settings = settings
        self._graph = graph or GraphClient(settings.graph)
        self._use_case = build_use_case(settings, self._graph)

    async def audit(self) -> CheckResult:
        return await self._use_case.execute()

    async def _scheduled(self) -> None:
        schedule = self._settings.cron_schedule
        logger.info("Scheduled mode (%s); auditing once at startup", schedule)
        await self.audit()

        ticks = croniter(schedule, datetime.now(UTC))
        while True:
            due = ticks.get_next(datetime)
            if due.tzinfo is None:
                due = due.replace(tzinfo=UTC)
            logger.info("Next audit at %s", due.isoformat())
            await asyncio.sleep(max(0.0, (due - datetime.now(UTC)).total_seconds()))

            try:
                await self.audit()
            except Exception:
                logger.exception("Scheduled audit failed; waiting for the next tick")

    async def _serve_api(self) -> None:
        import uvicorn

        from .infrastructure.adapters.api import create_app

        host, port = self._settings.api_host, self._settings.api_port
        logger.info("Serving API on %s:%d", host, port)
        config = uvicorn.Config(
            create_app(self.audit, version=__version__),
            host=host,
            port=port,
            log_level=self._settings.log_level.lower(),
        )
        await uvicorn.Server(config).serve()

    async def run(self) -> int:
        """Run the configured mode and return the process exit code."""
        try:
            if self._settings.api_enabled:
                await self._serve_api()
                return 0

            match self._settings.run_mode.lower():
                case "once":
                    result = await self.audit()
                    return 0 if result.success else 1
                case "scheduled":
                    await self._scheduled()
                    return 0
                case other:
                    logger.error("Unknown RUN_MODE %r (expected 'once' or 'scheduled')", other)
                    return 1
        finally:
            self._graph.close()


async def async_main() -> int:
    """Load settings and run; configuration problems exit with 1."""
    logger.info("App Registration Credential Audit %s", __version__)
    try:
        settings = load_settings()
    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1

    logging.getLogger().setLevel(settings.log_level.upper())
    try:
        return await Application(settings).run()
    except Exception:
        logger.exception("Audit run aborted")
        return 1


def main() -> None:
    """Console script entry point."""
    try:
        sys.exit(asyncio.run(async_main()))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        sys.exit(0)


if __name__ == "__main__":
    main()
