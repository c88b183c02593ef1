"""
Surveys module data models.

Surveys, their participation entries and likes/dislikes, comments, and
the request/response shapes of the survey endpoints.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class SurveyStatus(str, Enum):
    """Survey lifecycle status."""

    PUBLISHED = "published"
    UNPUBLISHED = "unpublished"


class VoteKind(str, Enum):
    """Which side of the like/dislike toggle a subject is on."""

    LIKE = "like"
    DISLIKE = "dislike"


class ParticipationEntry(BaseModel):
    """A subject's chosen option on a survey."""

    user: EmailStr
    choice: str = Field(..., min_length=1, max_length=500)

    @field_validator("choice")
    @classmethod
    def choice_stripped(cls, choice: str) -> str:
        # Options are stored stripped; compare like with like
        choice = choice.strip()
        if not choice:
            raise ValueError("choice must not be blank")
        return choice


class Survey(BaseModel):
    """A survey with its participation and vote state."""

    id: str
    owner: EmailStr
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    question: str
    options: list[str]
    deadline: Optional[datetime] = None

    participants: list[ParticipationEntry] = Field(default_factory=list)
    total_votes: int = 0
    liked_by: list[str] = Field(default_factory=list)
    disliked_by: list[str] = Field(default_factory=list)
    likes: int = 0
    dislikes: int = 0

    featured: bool = False
    status: SurveyStatus = SurveyStatus.PUBLISHED
    admin_feedback: Optional[str] = None

    created_at: datetime
    updated_at: datetime


class CreateSurveyRequest(BaseModel):
    """Request to create a new survey."""

    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    category: Optional[str] = Field(None, max_length=100)
    question: str = Field(..., min_length=1, max_length=1000)
    options: list[str] = Field(..., min_length=2, max_length=20)
    deadline: Optional[datetime] = None

    @field_validator("options")
    @classmethod
    def options_distinct_and_non_blank(cls, options: list[str]) -> list[str]:
        cleaned = [option.strip() for option in options]
        if any(not option for option in cleaned):
            raise ValueError("options must not be blank")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("options must be distinct")
        return cleaned


class ParticipateRequest(BaseModel):
    """Request to record a participation entry."""

    participate_user: ParticipationEntry


class VoteRequest(BaseModel):
    """
    Like or dislike a survey.

    ``liked: true`` selects the liked side; anything else the disliked side.
    """

    liked: bool = False


class StatusUpdateRequest(BaseModel):
    """Request to change a survey's lifecycle status."""

    status: SurveyStatus
    admin_feedback: Optional[str] = Field(None, max_length=2000)


class FeaturedUpdateRequest(BaseModel):
    """Request to set the featured flag."""

    featured: bool


class ParticipationResult(BaseModel):
    """Whether a subject participated, and with which entry."""

    participate: bool
    vote_data: Optional[ParticipationEntry] = None


class VoteResult(BaseModel):
    """Whether a subject liked/disliked, and which."""

    voted: bool
    vote: Optional[VoteKind] = None


class Comment(BaseModel):
    """A comment on a survey."""

    id: str
    survey_id: str
    author: EmailStr
    body: str
    created_at: datetime


class CreateCommentRequest(BaseModel):
    """Request to comment on a survey."""

    body: str = Field(..., min_length=1, max_length=2000)
