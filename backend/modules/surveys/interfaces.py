"""
Surveys module interface.

The API layer depends on ISurveyService for all survey operations.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
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


@runtime_checkable
class ISurveyService(Protocol):
    """
    Interface for survey operations.

    Every mutation reports SurveyNotFoundError when the survey is absent
    and InvalidIdentifierError when the ID is malformed.
    """

    async def create_survey(
        self,
        user: AuthenticatedUser,
        request: CreateSurveyRequest,
    ) -> Survey:
        """Create a survey owned by the caller. Each call creates a new record."""
        ...

    async def get_survey(self, survey_id: str) -> Survey:
        """
        Get a survey by ID.

        Raises:
            SurveyNotFoundError: If the survey doesn't exist
        """
        ...

    async def list_surveys(
        self,
        status: Optional[SurveyStatus] = None,
        featured: Optional[bool] = None,
        owner: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[Survey]:
        """List surveys, newest first, optionally filtered."""
        ...

    async def participate(
        self,
        survey_id: str,
        user: AuthenticatedUser,
        entry: ParticipationEntry,
    ) -> Survey:
        """
        Append the caller's participation entry.

        Raises:
            ImpersonationError: If entry.user is not the caller
            InvalidChoiceError: If the choice is not an option
            DuplicateParticipationError: If the caller already participated
        """
        ...

    async def vote(
        self,
        survey_id: str,
        user: AuthenticatedUser,
        kind: VoteKind,
    ) -> Survey:
        """
        Like or dislike a survey as the caller.

        Raises:
            DuplicateVoteError: If the caller already liked or disliked it
        """
        ...

    async def get_participation(self, survey_id: str, email: str) -> ParticipationResult:
        """Find a subject's participation entry, or the not-participating sentinel."""
        ...

    async def get_vote(self, survey_id: str, email: str) -> VoteResult:
        """Find a subject's like/dislike, or the not-voted sentinel."""
        ...

    async def update_status(
        self,
        survey_id: str,
        user: AuthenticatedUser,
        request: StatusUpdateRequest,
    ) -> Survey:
        """
        Overwrite status and admin feedback. Owner or admin only.

        Raises:
            AuthorizationError: If the caller is neither owner nor admin
        """
        ...

    async def set_featured(self, survey_id: str, featured: bool) -> Survey:
        """Overwrite the featured flag. The route gates this to admins."""
        ...

    async def delete_survey(self, survey_id: str, user: AuthenticatedUser) -> None:
        """
        Delete a survey and, best effort, its comments and reports.
        Owner or admin only.
        """
        ...

    async def add_comment(
        self,
        survey_id: str,
        user: AuthenticatedUser,
        body: str,
    ) -> Comment:
        """Comment on an existing survey."""
        ...

    async def list_comments(self, survey_id: str) -> list[Comment]:
        """List comments on an existing survey, oldest first."""
        ...
