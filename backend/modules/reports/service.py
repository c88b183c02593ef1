"""
Report service implementation.
"""

import logging

from shared.models import AuthenticatedUser
from modules.surveys.exceptions import SurveyNotFoundError
from .interfaces import IReportService, ISurveyLookup
from .models import Report, CreateReportRequest
from .repository import ReportRepository
from .exceptions import ReportNotFoundError

logger = logging.getLogger(__name__)


class ReportService(IReportService):
    """Survey reports over MongoDB."""

    def __init__(self, repository: ReportRepository, surveys: ISurveyLookup):
        self._repository = repository
        self._surveys = surveys

    async def create_report(
        self,
        user: AuthenticatedUser,
        request: CreateReportRequest,
    ) -> Report:
        if not self._surveys.exists(request.survey_id):
            raise SurveyNotFoundError(request.survey_id)

        report = self._repository.create(request.survey_id, user.email, request.reason)
        logger.info(
            "Survey reported",
            extra={"survey_id": request.survey_id, "user_email": user.email},
        )
        return report

    async def list_reports(self) -> list[Report]:
        return self._repository.list_reports()

    async def delete_report(self, report_id: str) -> None:
        if not self._repository.delete(report_id):
            raise ReportNotFoundError(report_id)
        logger.info("Deleted report %s", report_id)

    async def delete_for_survey(self, survey_id: str) -> int:
        return self._repository.delete_for_survey(survey_id)
