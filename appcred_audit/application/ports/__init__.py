"""Application ports - Interfaces for external adapters."""

from .application_directory import ApplicationDirectory
from .report_sender import ReportSender

__all__ = [
    "ApplicationDirectory",
    "ReportSender",
]
