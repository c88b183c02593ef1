"""
Base exception classes for the SurveyWallet backend.

Each module should define its own exceptions that inherit from these bases.
The API error handlers map each base class to an HTTP status code.
"""

from typing import Optional, Any


class SurveyWalletError(Exception):
    """
    Base exception for all SurveyWallet errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(SurveyWalletError):
    """Resource not found."""

    pass


class ValidationError(SurveyWalletError):
    """Input validation failed."""

    pass


class InvalidIdentifierError(ValidationError):
    """Raised when a record identifier is not a valid ObjectId."""

    def __init__(self, identifier: str):
        super().__init__(
            f"Invalid identifier: {identifier}",
            code="INVALID_IDENTIFIER",
            details={"identifier": identifier},
        )


class ConflictError(SurveyWalletError):
    """The request conflicts with the current state of the resource."""

    pass


class AuthenticationError(SurveyWalletError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(SurveyWalletError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(SurveyWalletError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
