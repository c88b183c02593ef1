"""
Reports module interface.

The surveys module depends on IReportService to clean up reports when a
survey is deleted.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from .models import Report, CreateReportRequest


@runtime_checkable
class ISurveyLookup(Protocol):
    """Existence check for the survey a report is filed against."""

    def exists(self, survey_id: str) -> bool:
        ...


@runtime_checkable
class IReportService(Protocol):
    """Interface for survey report operations."""

    async def create_report(
        self,
        user: AuthenticatedUser,
        request: CreateReportRequest,
    ) -> Report:
        """
        File a report against a survey as the caller.

        Raises:
            InvalidIdentifierError: If survey_id is malformed
            SurveyNotFoundError: If no such survey exists
        """
        ...

    async def list_reports(self) -> list[Report]:
        """List every report, newest first."""
        ...

    async def delete_report(self, report_id: str) -> None:
        """
        Delete a report.

        Raises:
            ReportNotFoundError: If nothing was deleted
        """
        ...

    async def delete_for_survey(self, survey_id: str) -> int:
        """Delete every report filed against a survey. Returns the count removed."""
        ...
