"""
Share Service

Business logic for re-sharing posts.

A user shares a given post at most once. The duplicate check is one
filtered lookup on (user, post), and the ``uq_shares_user_post`` constraint
catches whatever slips past it concurrently.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.shared.core.exceptions import AlreadySharedError, PostNotFoundError, UserNotFoundError
from socialhub.shared.core.logging import logger
from socialhub.shared.core.permissions import ensure_can_act
from socialhub.shared.models.share import Share
from socialhub.shared.repositories.post_repository import PostRepository
from socialhub.shared.repositories.share_repository import ShareRepository
from socialhub.shared.repositories.user_repository import UserRepository
from socialhub.shared.services.integrity_service import IntegrityService


class ShareService:
    """Service for share-related business logic."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.share_repo = ShareRepository(session)
        self.post_repo = PostRepository(session)
        self.user_repo = UserRepository(session)
        self.integrity = IntegrityService(session)

    async def share_post(
        self,
        requestor_id: UUID,
        post_id: UUID,
        user_id: Optional[UUID] = None,
        content: Optional[str] = None,
    ) -> Share:
        """
        Share a post as the requestor.

        Args:
            requestor_id: Authenticated user
            post_id: Post to share
            user_id: Sharing user as named by the client; must be the requestor
            content: Optional text attached to the share

        Raises:
            PermissionDeniedError: If ``user_id`` names someone else
            PostNotFoundError: If the post does not exist
            AlreadySharedError: If the requestor already shared the post
        """
        if user_id is not None:
            ensure_can_act(requestor_id, user_id)

        if not await self.post_repo.exists(post_id):
            raise PostNotFoundError(str(post_id))

        if not await self.user_repo.exists(requestor_id):
            raise UserNotFoundError(str(requestor_id))

        if await self.share_repo.get_user_share(requestor_id, post_id):
            raise AlreadySharedError(str(post_id))

        try:
            share = await self.share_repo.create(
                user_id=requestor_id,
                post_id=post_id,
                content=content,
            )
        except IntegrityError as e:
            raise AlreadySharedError(str(post_id)) from e

        logger.info("Post shared", share_id=str(share.id), post_id=str(post_id))

        return share

    async def delete_share(
        self,
        requestor_id: UUID,
        share_id: UUID,
        user_id: Optional[UUID] = None,
        post_id: Optional[UUID] = None,
    ) -> Share:
        """
        Delete an own share.

        Args:
            requestor_id: Authenticated user
            share_id: Share to delete
            user_id: Owner as named by the client; must be the requestor
            post_id: Post the share must point at, if given

        Raises:
            PermissionDeniedError: If ``user_id`` names someone else
            IntegrityMismatchError: If the share is not the requestor's share
                of ``post_id``
        """
        if user_id is not None:
            ensure_can_act(requestor_id, user_id)

        return await self.integrity.delete_share(share_id, user_id=requestor_id, post_id=post_id)
