"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser, UserRole
from modules.users.models import UserRecord
from .models import IssuedToken, LoginRequest


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for session authentication and role authorization.

    This protocol defines the contract that the auth module exposes
    to the API layer and other modules.
    """

    def issue_token(self, claims: LoginRequest) -> IssuedToken:
        """
        Sign a session token for already-verified identity claims.

        Args:
            claims: Claims supplied by the external identity provider

        Returns:
            IssuedToken valid for the configured session window

        Raises:
            AuthNotConfiguredError: If no signing secret is configured
        """
        ...

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a session token and return the authenticated caller.

        No user lookup happens here; the identity comes from the claims.

        Args:
            token: Session token from the cookie or Authorization header

        Returns:
            AuthenticatedUser built from the token claims

        Raises:
            AuthenticationError: If the token is missing, invalid, expired
                or revoked
        """
        ...

    async def revoke_token(self, token: Optional[str]) -> bool:
        """
        Revoke a session token until its natural expiry.

        Args:
            token: Session token presented at logout

        Returns:
            True if a live token was revoked, False if there was nothing
            to revoke (no token, invalid token, or revocation disabled)
        """
        ...

    async def authorize(
        self,
        user: AuthenticatedUser,
        required_role: UserRole,
    ) -> UserRecord:
        """
        Check an authenticated caller's directory role.

        Args:
            user: Caller returned by validate_token
            required_role: Minimum role the operation needs

        Returns:
            The caller's UserRecord

        Raises:
            UserNotRegisteredError: If the caller has no user record
            InsufficientPermissionsError: If the role is too low
        """
        ...
