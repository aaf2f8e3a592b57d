"""
Authentication Handler

Handles signup, login, token verification and Google sign-in.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Domain errors
raised by services are turned into HTTP responses by the global
exception handlers.
"""

from fastapi import APIRouter, Depends

from socialhub.shared.schemas.user import (
    AuthTokenResponse,
    GoogleAuthRequest,
    LoginRequest,
    SessionClaimsResponse,
    SignupRequest,
)
from socialhub.shared.services.auth_service import AuthService
from socialhub.api.dependencies.auth import CurrentUser
from socialhub.api.dependencies.services import get_auth_service


router = APIRouter()


@router.post("/signup", response_model=AuthTokenResponse)
async def signup(
    user_data: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Creates a new user account and returns a session token.

    Raises:
        400: Missing field, malformed email or weak password
        409: Username or email already registered
    """
    token = await auth_service.signup(
        username=user_data.username,
        password=user_data.password,
        name=user_data.name,
        email=user_data.email,
    )
    return AuthTokenResponse(auth_token=token)


@router.post("/login", response_model=AuthTokenResponse)
async def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Login with username or email.

    Raises:
        401: Unknown user or wrong password
    """
    token = await auth_service.login(
        login_name=credentials.login_name,
        password=credentials.password,
    )
    return AuthTokenResponse(auth_token=token)


@router.get("/verify", response_model=SessionClaimsResponse)
async def verify(current_user: CurrentUser):
    """
    Return the decoded session token.

    Raises:
        401: Missing, expired or invalid token
    """
    return SessionClaimsResponse(**current_user)


@router.post("/google-auth", response_model=AuthTokenResponse)
async def google_auth(
    profile: GoogleAuthRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Sign in with a Google profile, creating the account on first use.
    """
    token = await auth_service.google_auth(
        email=profile.email,
        username=profile.username,
        name=profile.name,
        password=profile.password,
        image_url=profile.image_url,
    )
    return AuthTokenResponse(auth_token=token)
