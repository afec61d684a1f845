"""HTML rendering of audit reports for email senders."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ....domain.entities import AuditReport, Finding

NEUTRAL_COLOR = "#17a2b8"


def _render_row(finding: Finding) -> str:
    expiry = finding.expiry_date.strftime("%Y-%m-%d")
    if finding.azure_portal_url:
        action = f'<a href="{escape(finding.azure_portal_url)}" target="_blank">Manage</a>'
    else:
        action = ""
    return (
        f'<tr><td style="color: {finding.level.color_hex};">{finding.level.display_name}</td>'
        f"<td>{finding.app_type.display_name}</td>"
        f"<td>{finding.credential_type.display_name}</td>"
        f"<td>{escape(finding.name)}</td>"
        f"<td>{escape(finding.problem_text)}</td>"
        f"<td>{expiry}</td><td>{action}</td></tr>\n"
    )


_PAGE = """<!DOCTYPE html>
<html><body style="font-family: Segoe UI, Arial, sans-serif; margin: 16px;">
<h1 style="background: {color}; color: #fff; padding: 12px;">App Registration Credentials Report</h1>
<h2>{summary}</h2>
<p>Applications scanned: {scanned} | Applications affected: {affected}</p>
<p>Critical: {critical} | Warning: {warning}</p>
<p>Credentials expiring within {window} days or already expired are listed below.</p>
<table style="border-collapse: collapse; width: 100%;" border="1" cellpadding="6">
<tr><th>Level</th><th>Type</th><th>Credential</th><th>Application</th><th>Problem</th><th>Expiry</th><th>Action</th></tr>
{rows}</table>
<p style="font-size: 12px; color: #6c757d;">Generated {generated}</p>
</body></html>"""


def render_html_report(report: AuditReport, *, max_rows: int = 50) -> str:
    """
    Render the report as a standalone HTML document.

    Findings are listed by expiry date, earliest first.
    """
    level = report.highest_level
    findings = report.findings_sorted_by_expiry()

    rows = "".join(_render_row(f) for f in findings[:max_rows])
    if len(findings) > max_rows:
        rows += f'<tr><td colspan="7">... and {len(findings) - max_rows} more</td></tr>\n'

    return _PAGE.format(
        color=level.color_hex if level else NEUTRAL_COLOR,
        summary=escape(report.get_summary()),
        scanned=report.applications_scanned,
        affected=report.affected_applications_count,
        critical=report.critical_count,
        warning=report.warning_count,
        window=report.warning_days,
        rows=rows,
        generated=report.generated_at.strftime("%Y-%m-%d %H:%M %Z"),
    )
