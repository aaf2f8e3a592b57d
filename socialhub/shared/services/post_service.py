"""
Post Service

Business logic for posts and likes.

Every mutation first checks that the requestor owns the post (or, for
creation, the account the post is created for). Likes are per user and
post: liking twice is rejected, disliking is idempotent.

Usage:
======
    from socialhub.shared.services.post_service import PostService

    service = PostService(db)
    post = await service.create_post(current_user_id, user_id, "Hello")
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.shared.core.exceptions import (
    AlreadyLikedError,
    PostNotFoundError,
    UserNotFoundError,
)
from socialhub.shared.core.logging import logger
from socialhub.shared.core.permissions import ensure_can_act
from socialhub.shared.models.post import Post
from socialhub.shared.models.user import User
from socialhub.shared.repositories.post_like_repository import PostLikeRepository
from socialhub.shared.repositories.post_repository import PostRepository
from socialhub.shared.repositories.user_repository import UserRepository
from socialhub.shared.services.integrity_service import IntegrityService


class PostService:
    """
    Service for post-related business logic.

    Handles:
    - Listing and reading populated posts
    - Creating, editing and deleting own posts
    - Liking and disliking posts
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize PostService.

        Args:
            session: Async database session
        """
        self.session = session
        self.post_repo = PostRepository(session)
        self.user_repo = UserRepository(session)
        self.like_repo = PostLikeRepository(session)
        self.integrity = IntegrityService(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_posts(self) -> list[Post]:
        """All posts, newest first, populated."""
        return await self.post_repo.list_populated()

    async def get_post(self, post_id: UUID) -> Post:
        """
        Get one populated post.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        post = await self.post_repo.get_populated(post_id)
        if not post:
            raise PostNotFoundError(str(post_id))
        return post

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_post(
        self,
        requestor_id: UUID,
        user_id: UUID,
        content: str,
        image_url: Optional[str] = None,
    ) -> Post:
        """
        Create a post on ``user_id``'s account.

        Raises:
            PermissionDeniedError: If requestor is not ``user_id``
            UserNotFoundError: If the account no longer exists
        """
        ensure_can_act(requestor_id, user_id)

        if not await self.user_repo.exists(user_id):
            raise UserNotFoundError(str(user_id))

        post = await self.post_repo.create(user_id=user_id, content=content, image_url=image_url)

        logger.info("Post created", post_id=str(post.id), user_id=str(user_id))

        return await self.get_post(post.id)

    async def update_post(
        self,
        requestor_id: UUID,
        post_id: UUID,
        content: str,
        image_url: Optional[str] = None,
    ) -> Post:
        """
        Edit content and image of an own post.

        An omitted image keeps the current one.

        Raises:
            PostNotFoundError: If the post does not exist
            PermissionDeniedError: If requestor is not the author
        """
        post = await self.post_repo.get(post_id)
        if not post:
            raise PostNotFoundError(str(post_id))

        ensure_can_act(requestor_id, post.user_id)

        await self.post_repo.update(post_id, content=content, image_url=image_url)

        return await self.get_post(post_id)

    async def delete_post(self, requestor_id: UUID, post_id: UUID) -> Post:
        """
        Delete an own post with its likes, comments and shares.

        Returns:
            The post as it was before deletion (populated)

        Raises:
            PostNotFoundError: If the post does not exist
            PermissionDeniedError: If requestor is not the author
        """
        post = await self.get_post(post_id)

        ensure_can_act(requestor_id, post.user_id)

        await self.integrity.delete_post(post_id)

        return post

    # ═══════════════════════════════════════════════════════════════════════════
    # LIKES
    # ═══════════════════════════════════════════════════════════════════════════

    async def like_post(self, requestor_id: UUID, post_id: UUID) -> User:
        """
        Like a post as the requestor.

        Returns:
            The requestor's account with updated liked posts

        Raises:
            PostNotFoundError: If the post does not exist
            AlreadyLikedError: If the requestor already likes the post
        """
        if not await self.post_repo.exists(post_id):
            raise PostNotFoundError(str(post_id))

        if not await self.user_repo.exists(requestor_id):
            raise UserNotFoundError(str(requestor_id))

        if await self.like_repo.has_liked(requestor_id, post_id):
            raise AlreadyLikedError(str(post_id))

        try:
            await self.like_repo.add(requestor_id, post_id)
        except IntegrityError as e:
            raise AlreadyLikedError(str(post_id)) from e

        logger.info("Post liked", post_id=str(post_id), user_id=str(requestor_id))

        return await self._account(requestor_id)

    async def dislike_post(self, requestor_id: UUID, post_id: UUID) -> User:
        """
        Remove the requestor's like from a post. Not liking it is not an error.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        if not await self.post_repo.exists(post_id):
            raise PostNotFoundError(str(post_id))

        removed = await self.like_repo.remove(requestor_id, post_id)
        if removed:
            logger.info("Post disliked", post_id=str(post_id), user_id=str(requestor_id))

        return await self._account(requestor_id)

    async def _account(self, user_id: UUID) -> User:
        user = await self.user_repo.get_account(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user
