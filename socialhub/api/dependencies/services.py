"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

The upload service is built on the storage adapter dependency, so tests
swap the object store with ``app.dependency_overrides[get_storage_adapter]``.

Usage:
======
    from socialhub.api.dependencies.services import get_auth_service

    @router.post("/signup")
    async def signup(
        data: SignupRequest,
        auth_service: AuthService = Depends(get_auth_service)
    ):
        return await auth_service.signup(...)
"""

from fastapi import Depends

from socialhub.api.dependencies.database import DbSession
from socialhub.shared.adapters.storage_adapter import StorageAdapter, get_storage_adapter
from socialhub.shared.services.activity_service import ActivityService
from socialhub.shared.services.auth_service import AuthService
from socialhub.shared.services.comment_service import CommentService
from socialhub.shared.services.post_service import PostService
from socialhub.shared.services.share_service import ShareService
from socialhub.shared.services.upload_service import UploadService
from socialhub.shared.services.user_service import UserService


async def get_auth_service(
    db: DbSession,
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_post_service(
    db: DbSession,
) -> PostService:
    """
    Dependency to get PostService instance.
    """
    return PostService(db)


async def get_comment_service(
    db: DbSession,
) -> CommentService:
    """
    Dependency to get CommentService instance.
    """
    return CommentService(db)


async def get_share_service(
    db: DbSession,
) -> ShareService:
    """
    Dependency to get ShareService instance.
    """
    return ShareService(db)


async def get_user_service(
    db: DbSession,
) -> UserService:
    """
    Dependency to get UserService instance.
    """
    return UserService(db)


async def get_activity_service(
    db: DbSession,
) -> ActivityService:
    """
    Dependency to get ActivityService instance.
    """
    return ActivityService(db)


async def get_upload_service(
    storage: StorageAdapter = Depends(get_storage_adapter),
) -> UploadService:
    """
    Dependency to get UploadService instance backed by the object store.
    """
    return UploadService(storage)
