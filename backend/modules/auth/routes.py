"""
Session endpoints.

Login issues the session cookie for identity-provider claims and records
the caller in the user directory. Logout revokes the presented token and
clears the cookie.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.security import HTTPAuthorizationCredentials

from api.dependencies import get_auth_service, get_user_service
from api.middleware.auth import bearer_scheme, extract_tokens
from api.middleware.request_info import get_client_origin
from shared.config import get_settings
from modules.users.interfaces import IUserService
from modules.users.models import ProfileUpdateRequest

from .interfaces import IAuthService
from .models import LoginRequest, LoginResponse, LogoutResponse

router = APIRouter()


@router.post("/jwt", response_model=LoginResponse)
async def login(
    claims: LoginRequest,
    request: Request,
    response: Response,
    auth: IAuthService = Depends(get_auth_service),
    users: IUserService = Depends(get_user_service),
) -> LoginResponse:
    """
    Issue a session token for verified identity claims.

    The token is returned in an HTTP-only cookie valid for the session
    window. First contact also creates the user record.
    """
    settings = get_settings()
    issued = auth.issue_token(claims)

    await users.upsert_profile(
        claims.email,
        ProfileUpdateRequest(
            name=claims.name,
            image=claims.image,
            email_verified=claims.email_verified,
        ),
        origin=get_client_origin(request),
    )

    response.set_cookie(
        key=settings.session_cookie_name,
        value=issued.token,
        max_age=settings.session_ttl_hours * 3600,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=settings.session_cookie_samesite,
    )
    return LoginResponse(email=claims.email, expires_at=issued.expires_at)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    request: Request,
    response: Response,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> LogoutResponse:
    """
    Revoke the presented session token and clear the cookie.

    Always succeeds; a missing or already invalid token is not an error.
    """
    settings = get_settings()
    revoked = False
    for token in extract_tokens(request, credentials):
        revoked = await auth.revoke_token(token) or revoked

    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=settings.session_cookie_samesite,
    )
    return LogoutResponse(revoked=revoked)
