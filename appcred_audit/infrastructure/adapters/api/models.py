"""API response models (no credential details exposed)."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class StatisticsResponse(BaseModel):
    """Finding statistics (no details)."""

    applications_scanned: int = Field(description="Applications evaluated in the last audit")
    applications_affected: int = Field(description="Applications with at least one finding")
    total_findings: int = Field(description="Total findings")
    critical_count: int = Field(description="Latest credential already expired")
    warning_count: int = Field(description="Latest credential expiring within the warning window")
    secret_findings: int = Field(description="Findings raised for client secrets")
    certificate_findings: int = Field(description="Findings raised for certificates")


class ReportResponse(BaseModel):
    """Audit report summary (no credential details)."""

    generated_at: datetime
    level: str | None = Field(description="Highest finding level: critical, warning, or null")
    summary: str = Field(description="Human-readable summary")
    warning_days: int = Field(description="Configured warning window in days")
    statistics: StatisticsResponse
    requires_notification: bool


class CheckResponse(BaseModel):
    """Response from triggering an audit."""

    success: bool
    message: str
    report: ReportResponse | None = None
    notifications_sent: int = 0
    notifications_failed: int = 0
    dry_run: bool = False


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
