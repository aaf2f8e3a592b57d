"""
Authentication Dependencies

FastAPI dependencies for user authentication.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate JWT from header
           │
           ▼
    get_current_user()        ← Check the identity claims are present
           │
           ▼
    get_current_user_id()     ← Requestor id as a UUID (for services)

Type Aliases:
=============
    CurrentUser     - Decoded session claims {id, username, email, name, exp, iat}
    CurrentUserId   - Requestor id

Usage:
======
    from socialhub.api.dependencies.auth import CurrentUser, CurrentUserId

    @router.get("/auth/verify")
    async def verify(current_user: CurrentUser):
        return current_user

    @router.put("/post-like/{post_id}")
    async def like(post_id: UUID, current_user_id: CurrentUserId):
        ...
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from ...config.settings import settings
from ...shared.core.exceptions import AuthenticationError
from ...shared.core.logging import log_context
from ...shared.utils.security import SESSION_CLAIMS, SecurityUtils


# Security scheme for Bearer tokens. A missing header is reported by
# get_current_user_token as a 401 in the standard error body.
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded token payload

    Raises:
        AuthenticationError: If token is missing
        InvalidTokenError: If token is expired or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    return SecurityUtils.decode_access_token(
        credentials.credentials,
        settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
) -> dict:
    """
    Get current authenticated user from token.

    Returns:
        The session claims

    Raises:
        AuthenticationError: If an identity claim is missing
    """
    if any(not token.get(claim) for claim in SESSION_CLAIMS):
        raise AuthenticationError("Invalid token payload")

    log_context(user_id=token["id"])

    return token


async def get_current_user_id(
    user: Annotated[dict, Depends(get_current_user)],
) -> UUID:
    """Requestor id from the session claims."""
    try:
        return UUID(str(user["id"]))
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Decoded session claims
CurrentUser = Annotated[dict, Depends(get_current_user)]

# Requestor id (most common dependency)
CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
