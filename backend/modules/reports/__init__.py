"""
Reports module.

Lets users flag surveys for moderation and admins review the flags.

Public API:
- IReportService: Interface for report operations
- Report, CreateReportRequest: Models
- ReportNotFoundError
"""

from .interfaces import IReportService
from .models import Report, CreateReportRequest
from .exceptions import ReportNotFoundError

__all__ = [
    "IReportService",
    "Report",
    "CreateReportRequest",
    "ReportNotFoundError",
]
