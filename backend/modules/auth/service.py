"""
Authentication service implementation.

Issues and validates HS256 session tokens and authorizes callers against
the user directory.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings
from shared.models import AuthenticatedUser, UserRole
from shared.exceptions import AuthenticationError
from modules.users.interfaces import IUserDirectory
from modules.users.models import UserRecord

from .interfaces import IAuthService
from .models import IssuedToken, LoginRequest, SessionClaims
from .repository import RevokedTokenRepository
from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InsufficientPermissionsError,
    InvalidTokenError,
    MissingTokenError,
    RevokedTokenError,
    UserNotRegisteredError,
)

logger = logging.getLogger(__name__)

_REQUIRED_CLAIMS = ["sub", "iat", "exp", "jti"]


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Tokens are stateless apart from the optional revocation set consulted
    during validation. Roles are never read from the token.
    """

    def __init__(
        self,
        settings: Settings,
        users: IUserDirectory,
        revocations: Optional[RevokedTokenRepository] = None,
    ):
        self._settings = settings
        self._users = users
        self._revocations = revocations

    @property
    def _revocation_enabled(self) -> bool:
        return self._settings.session_revocation_enabled and self._revocations is not None

    def _secret(self) -> str:
        if not self._settings.jwt_secret:
            raise AuthNotConfiguredError()
        return self._settings.jwt_secret

    def issue_token(self, claims: LoginRequest) -> IssuedToken:
        secret = self._secret()
        issued_at = datetime.now(timezone.utc).replace(microsecond=0)
        expires_at = issued_at + timedelta(hours=self._settings.session_ttl_hours)
        token_id = uuid.uuid4().hex

        payload = {
            "sub": claims.email,
            "name": claims.name,
            "email_verified": claims.email_verified,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": token_id,
        }
        token = jwt.encode(payload, secret, algorithm=self._settings.jwt_algorithm)
        return IssuedToken(token=token, token_id=token_id, expires_at=expires_at)

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        if not token:
            raise MissingTokenError()

        secret = self._secret()

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._settings.jwt_algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
            claims = SessionClaims(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")
        except PydanticValidationError:
            raise InvalidTokenError("Invalid token: malformed claims")

        if self._revocation_enabled and self._revocations.is_revoked(claims.jti):
            raise RevokedTokenError()

        return AuthenticatedUser(
            email=claims.sub,
            name=claims.name,
            email_verified=claims.email_verified,
            token_id=claims.jti,
            issued_at=datetime.fromtimestamp(claims.iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(claims.exp, tz=timezone.utc),
        )

    async def revoke_token(self, token: Optional[str]) -> bool:
        if not self._revocation_enabled:
            return False

        try:
            user = await self.validate_token(token)
        except AuthenticationError as e:
            logger.debug("Nothing to revoke at logout: %s", e.code)
            return False

        self._revocations.revoke(user.token_id, user.expires_at)
        logger.info("Revoked session token", extra={"user_email": user.email})
        return True

    async def authorize(
        self,
        user: AuthenticatedUser,
        required_role: UserRole,
    ) -> UserRecord:
        record = await self._users.get_user_by_email(user.email)
        if record is None:
            logger.warning(
                "Authorization denied: no user record",
                extra={"user_email": user.email},
            )
            raise UserNotRegisteredError(user.email)

        if not record.role.satisfies(required_role):
            logger.warning(
                "Authorization denied: role %s below %s",
                record.role.value,
                required_role.value,
                extra={"user_email": user.email},
            )
            raise InsufficientPermissionsError(required_role.value, record.role.value)

        return record
