"""
Survey API endpoints.

CRUD for surveys plus participation, likes/dislikes, moderation flags
and comments.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import EmailStr

from api.dependencies import get_survey_service
from api.middleware.auth import get_current_user, require_role
from shared.models import AuthenticatedUser, DeleteResponse, UserRole

from .interfaces import ISurveyService
from .models import (
    Comment,
    CreateCommentRequest,
    CreateSurveyRequest,
    FeaturedUpdateRequest,
    ParticipateRequest,
    ParticipationResult,
    StatusUpdateRequest,
    Survey,
    SurveyStatus,
    VoteKind,
    VoteRequest,
    VoteResult,
)

router = APIRouter()


@router.get("", response_model=list[Survey])
async def list_surveys(
    status: Optional[SurveyStatus] = Query(default=None, description="Filter by status"),
    featured: Optional[bool] = Query(default=None, description="Filter by featured flag"),
    owner: Optional[EmailStr] = Query(default=None, description="Filter by owner email"),
    category: Optional[str] = Query(default=None, description="Filter by category"),
    service: ISurveyService = Depends(get_survey_service),
) -> list[Survey]:
    """List surveys, newest first."""
    return await service.list_surveys(status, featured, owner, category)


@router.post("", response_model=Survey)
async def create_survey(
    request: CreateSurveyRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISurveyService = Depends(get_survey_service),
) -> Survey:
    """Create a survey owned by the caller."""
    return await service.create_survey(user, request)


@router.get("/{survey_id}", response_model=Survey)
async def get_survey(
    survey_id: str,
    service: ISurveyService = Depends(get_survey_service),
) -> Survey:
    """Get a survey by ID."""
    return await service.get_survey(survey_id)


@router.delete("/{survey_id}", response_model=DeleteResponse)
async def delete_survey(
    survey_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISurveyService = Depends(get_survey_service),
) -> DeleteResponse:
    """Delete a survey. Owner or admin only."""
    await service.delete_survey(survey_id, user)
    return DeleteResponse(id=survey_id)


@router.patch("/{survey_id}/participate", response_model=Survey)
async def participate(
    survey_id: str,
    request: ParticipateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISurveyService = Depends(get_survey_service),
) -> Survey:
    """Record the caller's choice on a survey."""
    return await service.participate(survey_id, user, request.participate_user)


@router.get(
    "/{survey_id}/participation",
    response_model=ParticipationResult,
    response_model_exclude_none=True,
)
async def get_participation(
    survey_id: str,
    email: EmailStr = Query(..., description="Subject to look up"),
    _user: AuthenticatedUser = Depends(get_current_user),
    service: ISurveyService = Depends(get_survey_service),
) -> ParticipationResult:
    """Whether a subject participated in a survey, and with which choice."""
    return await service.get_participation(survey_id, email)


@router.patch("/{survey_id}/vote", response_model=Survey)
async def vote(
    survey_id: str,
    request: VoteRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISurveyService = Depends(get_survey_service),
) -> Survey:
    """Like (``liked: true``) or dislike a survey as the caller."""
    kind = VoteKind.LIKE if request.liked else VoteKind.DISLIKE
    return await service.vote(survey_id, user, kind)


@router.get(
    "/{survey_id}/vote",
    response_model=VoteResult,
    response_model_exclude_none=True,
)
async def get_vote(
    survey_id: str,
    email: EmailStr = Query(..., description="Subject to look up"),
    _user: AuthenticatedUser = Depends(get_current_user),
    service: ISurveyService = Depends(get_survey_service),
) -> VoteResult:
    """Whether a subject liked or disliked a survey."""
    return await service.get_vote(survey_id, email)


@router.patch("/{survey_id}/status", response_model=Survey)
async def update_status(
    survey_id: str,
    request: StatusUpdateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISurveyService = Depends(get_survey_service),
) -> Survey:
    """Publish or unpublish a survey. Owner or admin only."""
    return await service.update_status(survey_id, user, request)


@router.patch("/{survey_id}/featured", response_model=Survey)
async def set_featured(
    survey_id: str,
    request: FeaturedUpdateRequest,
    _admin: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    service: ISurveyService = Depends(get_survey_service),
) -> Survey:
    """Feature or un-feature a survey. Admin only."""
    return await service.set_featured(survey_id, request.featured)


@router.get("/{survey_id}/comments", response_model=list[Comment])
async def list_comments(
    survey_id: str,
    service: ISurveyService = Depends(get_survey_service),
) -> list[Comment]:
    """List comments on a survey, oldest first."""
    return await service.list_comments(survey_id)


@router.post("/{survey_id}/comments", response_model=Comment)
async def add_comment(
    survey_id: str,
    request: CreateCommentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISurveyService = Depends(get_survey_service),
) -> Comment:
    """Comment on a survey as the caller."""
    return await service.add_comment(survey_id, user, request.body)
