"""
Survey service implementation.

Applies the survey mutation rules on top of SurveyRepository:
guarded appends for participation and likes, owner-or-admin checks for
status changes and deletion, and best-effort cleanup of dependent records.
"""

import logging
from typing import Optional

from pymongo.errors import PyMongoError

from shared.models import AuthenticatedUser, UserRole
from modules.auth.interfaces import IAuthService
from modules.auth.exceptions import ImpersonationError
from modules.reports.interfaces import IReportService

from .interfaces import ISurveyService
from .models import (
    Comment,
    CreateSurveyRequest,
    ParticipationEntry,
    ParticipationResult,
    StatusUpdateRequest,
    Survey,
    SurveyStatus,
    VoteKind,
    VoteResult,
)
from .repository import SurveyRepository, CommentRepository
from .exceptions import (
    ConcurrentUpdateError,
    DuplicateParticipationError,
    DuplicateVoteError,
    InvalidChoiceError,
    SurveyNotFoundError,
)

logger = logging.getLogger(__name__)


class SurveyService(ISurveyService):
    """
    Survey service over MongoDB.

    Implements ISurveyService. The auth service is injected for the
    owner-or-admin checks; the report service for delete cleanup.
    """

    def __init__(
        self,
        repository: SurveyRepository,
        comments: CommentRepository,
        auth: IAuthService,
        reports: Optional[IReportService] = None,
    ):
        self._repository = repository
        self._comments = comments
        self._auth = auth
        self._reports = reports

    async def create_survey(
        self,
        user: AuthenticatedUser,
        request: CreateSurveyRequest,
    ) -> Survey:
        data = {
            **request.model_dump(),
            "owner": user.email,
            "featured": False,
            "status": SurveyStatus.PUBLISHED.value,
            "admin_feedback": None,
        }
        survey = self._repository.create(data)
        logger.info("Created survey %s", survey.id, extra={"user_email": user.email})
        return survey

    async def get_survey(self, survey_id: str) -> Survey:
        survey = self._repository.get_by_id(survey_id)
        if survey is None:
            raise SurveyNotFoundError(survey_id)
        return survey

    async def list_surveys(
        self,
        status: Optional[SurveyStatus] = None,
        featured: Optional[bool] = None,
        owner: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[Survey]:
        return self._repository.list_surveys(
            status=status,
            featured=featured,
            owner=owner,
            category=category,
        )

    async def participate(
        self,
        survey_id: str,
        user: AuthenticatedUser,
        entry: ParticipationEntry,
    ) -> Survey:
        if entry.user != user.email:
            raise ImpersonationError(user.email, entry.user)

        survey = self._repository.append_participation(survey_id, entry)
        if survey is not None:
            logger.info("Recorded participation", extra={"survey_id": survey_id, "user_email": user.email})
            return survey

        # Guarded update matched nothing; work out which guard failed
        current = await self.get_survey(survey_id)
        if any(p.user == entry.user for p in current.participants):
            raise DuplicateParticipationError(survey_id, entry.user)
        if entry.choice not in current.options:
            raise InvalidChoiceError(survey_id, entry.choice)
        raise ConcurrentUpdateError(survey_id)

    async def vote(
        self,
        survey_id: str,
        user: AuthenticatedUser,
        kind: VoteKind,
    ) -> Survey:
        survey = self._repository.append_vote(survey_id, user.email, kind)
        if survey is not None:
            logger.info(
                "Recorded %s", kind.value,
                extra={"survey_id": survey_id, "user_email": user.email},
            )
            return survey

        current = await self.get_survey(survey_id)
        if user.email in current.liked_by or user.email in current.disliked_by:
            raise DuplicateVoteError(survey_id, user.email)
        raise ConcurrentUpdateError(survey_id)

    async def get_participation(self, survey_id: str, email: str) -> ParticipationResult:
        survey = await self.get_survey(survey_id)
        for entry in survey.participants:
            if entry.user == email:
                return ParticipationResult(participate=True, vote_data=entry)
        return ParticipationResult(participate=False)

    async def get_vote(self, survey_id: str, email: str) -> VoteResult:
        survey = await self.get_survey(survey_id)
        if email in survey.liked_by:
            return VoteResult(voted=True, vote=VoteKind.LIKE)
        if email in survey.disliked_by:
            return VoteResult(voted=True, vote=VoteKind.DISLIKE)
        return VoteResult(voted=False)

    async def update_status(
        self,
        survey_id: str,
        user: AuthenticatedUser,
        request: StatusUpdateRequest,
    ) -> Survey:
        await self._require_owner_or_admin(survey_id, user)

        survey = self._repository.patch_fields(
            survey_id,
            {"status": request.status.value, "admin_feedback": request.admin_feedback},
        )
        if survey is None:
            raise SurveyNotFoundError(survey_id)
        logger.info("Survey status set to %s", request.status.value, extra={"survey_id": survey_id})
        return survey

    async def set_featured(self, survey_id: str, featured: bool) -> Survey:
        survey = self._repository.patch_fields(survey_id, {"featured": featured})
        if survey is None:
            raise SurveyNotFoundError(survey_id)
        return survey

    async def delete_survey(self, survey_id: str, user: AuthenticatedUser) -> None:
        await self._require_owner_or_admin(survey_id, user)

        if not self._repository.delete(survey_id):
            raise SurveyNotFoundError(survey_id)
        logger.info("Deleted survey", extra={"survey_id": survey_id, "user_email": user.email})

        # Dependent records are cleaned up separately; no rollback if this fails
        try:
            self._comments.delete_for_survey(survey_id)
            if self._reports is not None:
                await self._reports.delete_for_survey(survey_id)
        except PyMongoError:
            logger.error(
                "Cleanup after survey delete failed",
                exc_info=True,
                extra={"survey_id": survey_id},
            )

    async def add_comment(
        self,
        survey_id: str,
        user: AuthenticatedUser,
        body: str,
    ) -> Comment:
        if not self._repository.exists(survey_id):
            raise SurveyNotFoundError(survey_id)
        return self._comments.create(survey_id, user.email, body)

    async def list_comments(self, survey_id: str) -> list[Comment]:
        if not self._repository.exists(survey_id):
            raise SurveyNotFoundError(survey_id)
        return self._comments.list_for_survey(survey_id)

    async def _require_owner_or_admin(self, survey_id: str, user: AuthenticatedUser) -> Survey:
        survey = await self.get_survey(survey_id)
        if survey.owner != user.email:
            await self._auth.authorize(user, UserRole.ADMIN)
        return survey
