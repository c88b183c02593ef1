"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a user record does not exist."""

    def __init__(self, user_ref: str):
        super().__init__(
            f"User not found: {user_ref}",
            code="USER_NOT_FOUND",
            details={"user": user_ref},
        )
