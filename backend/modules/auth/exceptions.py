"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return 401 (authentication) or 403 (authorization).
"""

from shared.exceptions import AuthenticationError, AuthorizationError


class InvalidTokenError(AuthenticationError):
    """Raised when a session token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a session token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no session token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class RevokedTokenError(AuthenticationError):
    """Raised when a session token was revoked at logout."""

    def __init__(self, message: str = "Authentication token has been revoked"):
        super().__init__(message, code="TOKEN_REVOKED")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when no signing secret is configured on the server."""

    def __init__(self):
        super().__init__(
            "Server authentication not configured",
            code="AUTH_NOT_CONFIGURED",
        )


class UserNotRegisteredError(AuthorizationError):
    """Raised when the authenticated subject has no user record."""

    def __init__(self, email: str):
        super().__init__(
            f"No user record for {email}",
            code="USER_NOT_REGISTERED",
            details={"email": email},
        )


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            f"Insufficient permissions. Required: {required_role}, has: {user_role}",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )


class ImpersonationError(AuthorizationError):
    """Raised when a caller tries to act under another subject's identity."""

    def __init__(self, caller: str, subject: str):
        super().__init__(
            "Cannot act on behalf of another user",
            code="IMPERSONATION_DENIED",
            details={"caller": caller, "subject": subject},
        )
