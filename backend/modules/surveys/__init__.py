"""
Surveys module.

Handles survey creation and reads, participation, likes/dislikes,
moderation flags and comments.

Public API:
- ISurveyService: Interface for survey operations
- Survey, ParticipationEntry, Comment: Core models
- Survey exceptions: SurveyNotFoundError, DuplicateVoteError, etc.
"""

from .interfaces import ISurveyService
from .models import (
    Survey,
    SurveyStatus,
    ParticipationEntry,
    ParticipationResult,
    VoteKind,
    VoteResult,
    Comment,
    CreateSurveyRequest,
    ParticipateRequest,
    VoteRequest,
    StatusUpdateRequest,
    FeaturedUpdateRequest,
    CreateCommentRequest,
)
from .exceptions import (
    SurveyNotFoundError,
    InvalidChoiceError,
    DuplicateParticipationError,
    DuplicateVoteError,
    ConcurrentUpdateError,
)

__all__ = [
    # Interface
    "ISurveyService",
    # Models
    "Survey",
    "SurveyStatus",
    "ParticipationEntry",
    "ParticipationResult",
    "VoteKind",
    "VoteResult",
    "Comment",
    "CreateSurveyRequest",
    "ParticipateRequest",
    "VoteRequest",
    "StatusUpdateRequest",
    "FeaturedUpdateRequest",
    "CreateCommentRequest",
    # Exceptions
    "SurveyNotFoundError",
    "InvalidChoiceError",
    "DuplicateParticipationError",
    "DuplicateVoteError",
    "ConcurrentUpdateError",
]
