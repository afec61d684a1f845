"""FastAPI surface over the credential audit."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import FastAPI, HTTPException, Request, status

from ....domain.value_objects import CredentialType, FindingLevel
from .models import CheckResponse, ErrorResponse, HealthResponse, ReportResponse, StatisticsResponse

if TYPE_CHECKING:
    from ....application.use_cases import CheckResult
    from ....domain.entities import AuditReport

logger = logging.getLogger(__name__)

AuditRunner = Callable[[], Awaitable["CheckResult"]]


def report_to_response(report: AuditReport) -> ReportResponse:
    """Counts and window only; findings never leave through the API."""
    levels = report.count_by_level()
    kinds = report.count_by_credential_type()
    highest = report.highest_level
    return ReportResponse(
        generated_at=report.generated_at,
        level=highest.value if highest else None,
        summary=report.get_summary(),
        warning_days=report.warning_days,
        statistics=StatisticsResponse(
            applications_scanned=report.applications_scanned,
            applications_affected=report.affected_applications_count,
            total_findings=report.total_count,
            critical_count=levels[FindingLevel.CRITICAL],
            warning_count=levels[FindingLevel.WARNING],
            secret_findings=kinds[CredentialType.SECRET],
            certificate_findings=kinds[CredentialType.CERTIFICATE],
        ),
        requires_notification=report.requires_notification,
    )


def create_app(run_audit: AuditRunner, version: str) -> FastAPI:
    """
    Build the API.

    ``POST /api/v1/check`` runs ``run_audit`` and keeps its report so
    ``GET /api/v1/report`` can serve it until the next check.
    """
    app = FastAPI(
        title="App Registration Credential Audit",
        version=version,
        responses={500: {"model": ErrorResponse}},
    )
    app.state.last_report = None

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="healthy", version=version, timestamp=datetime.now(UTC))

    @app.get(
        "/api/v1/report",
        response_model=ReportResponse,
        tags=["Audit"],
        responses={404: {"model": ErrorResponse}},
    )
    async def latest_report(request: Request) -> ReportResponse:
        report = request.app.state.last_report
        if report is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="No audit has run yet; POST /api/v1/check first",
            )
        return report_to_response(report)

    @app.post("/api/v1/check", response_model=CheckResponse, tags=["Audit"])
    async def run_check(request: Request) -> CheckResponse:
        try:
            result = await run_audit()
        except Exception as e:
            logger.exception("API-triggered audit failed")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Credential audit failed: {e}",
            ) from e

        request.app.state.last_report = result.report
        return CheckResponse(
            success=result.success,
            message="Audit completed" if result.success else "Audit completed with sender failures",
            report=report_to_response(result.report),
            notifications_sent=result.notifications_sent,
            notifications_failed=result.notifications_failed,
            dry_run=result.dry_run,
        )

    return app
