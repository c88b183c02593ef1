"""
Surveys module exceptions.
"""

from shared.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
)


class SurveyNotFoundError(NotFoundError):
    """Raised when a survey is not found."""

    def __init__(self, survey_id: str):
        super().__init__(
            f"Survey not found: {survey_id}",
            code="SURVEY_NOT_FOUND",
            details={"survey_id": survey_id},
        )


class InvalidChoiceError(ValidationError):
    """Raised when a participation choice is not one of the survey's options."""

    def __init__(self, survey_id: str, choice: str):
        super().__init__(
            f"'{choice}' is not an option of survey {survey_id}",
            code="INVALID_CHOICE",
            details={"survey_id": survey_id, "choice": choice},
        )


class DuplicateParticipationError(ConflictError):
    """Raised when a subject participates in the same survey twice."""

    def __init__(self, survey_id: str, user: str):
        super().__init__(
            f"{user} already participated in survey {survey_id}",
            code="DUPLICATE_PARTICIPATION",
            details={"survey_id": survey_id, "user": user},
        )


class DuplicateVoteError(ConflictError):
    """Raised when a subject already liked or disliked a survey."""

    def __init__(self, survey_id: str, user: str):
        super().__init__(
            f"{user} already voted on survey {survey_id}",
            code="DUPLICATE_VOTE",
            details={"survey_id": survey_id, "user": user},
        )


class ConcurrentUpdateError(ConflictError):
    """Raised when a guarded update lost a race with another writer."""

    def __init__(self, survey_id: str):
        super().__init__(
            f"Survey {survey_id} changed during the update, retry",
            code="CONCURRENT_UPDATE",
            details={"survey_id": survey_id},
        )
