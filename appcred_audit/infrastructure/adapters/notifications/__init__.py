"""Report sender adapter implementations."""

from .base import BaseReportSender, format_subject, parse_recipients
from .email import SmtpConfig, SmtpReportSender
from .graph_email import GraphEmailConfig, GraphEmailReportSender
from .rendering import render_html_report
from .webhook import WebhookConfig, WebhookReportSender

__all__ = [
    "BaseReportSender",
    "GraphEmailConfig",
    "GraphEmailReportSender",
    "SmtpConfig",
    "SmtpReportSender",
    "WebhookConfig",
    "WebhookReportSender",
    "format_subject",
    "parse_recipients",
    "render_html_report",
]
