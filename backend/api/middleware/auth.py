"""
Session authentication and role authorization dependencies.

The session token is read from the session cookie and from an
``Authorization: Bearer`` header. The cookie is tried first; the header is
used when there is no cookie or the cookie does not validate. Failures raise
module exceptions that the API error handlers turn into 401/403 responses
before the route body runs.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.config import get_settings
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser, UserRole
from modules.auth.interfaces import IAuthService
from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def extract_tokens(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> list[str]:
    """
    Collect the candidate session tokens, cookie first.

    The same token sent both ways is listed once.
    """
    tokens = []
    cookie = request.cookies.get(get_settings().session_cookie_name)
    if cookie:
        tokens.append(cookie)
    if credentials is not None and credentials.credentials not in tokens:
        tokens.append(credentials.credentials)
    return tokens


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. When every
    candidate token fails, the error for the last one is raised.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"email": user.email}
    """
    tokens = extract_tokens(request, credentials)
    if not tokens:
        return await auth.validate_token(None)

    for token in tokens[:-1]:
        try:
            return await auth.validate_token(token)
        except AuthenticationError:
            continue
    return await auth.validate_token(tokens[-1])


def require_role(role: UserRole):
    """
    Build a dependency that authenticates, then authorizes against ``role``.

    Usage:
        @router.get("/admin-only")
        async def admin_route(user: AuthenticatedUser = Depends(require_role(UserRole.ADMIN))):
            ...
    """

    async def dependency(
        user: AuthenticatedUser = Depends(get_current_user),
        auth: IAuthService = Depends(get_auth_service),
    ) -> AuthenticatedUser:
        await auth.authorize(user, role)
        return user

    return dependency
