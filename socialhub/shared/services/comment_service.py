"""
Comment Service

Business logic for comments under posts.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.shared.core.exceptions import CommentNotFoundError, PostNotFoundError, UserNotFoundError
from socialhub.shared.core.logging import logger
from socialhub.shared.core.permissions import ensure_can_act
from socialhub.shared.models.comment import Comment
from socialhub.shared.models.post import Post
from socialhub.shared.repositories.comment_repository import CommentRepository
from socialhub.shared.repositories.post_repository import PostRepository
from socialhub.shared.repositories.user_repository import UserRepository
from socialhub.shared.services.integrity_service import IntegrityService


class CommentService:
    """
    Service for comment-related business logic.

    Handles:
    - Listing comments of a post
    - Commenting on any post
    - Editing and deleting own comments
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.comment_repo = CommentRepository(session)
        self.post_repo = PostRepository(session)
        self.user_repo = UserRepository(session)
        self.integrity = IntegrityService(session)

    async def list_comments(self, post_id: UUID) -> list[Comment]:
        """
        Comments under a post, oldest first, with authors.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        if not await self.post_repo.exists(post_id):
            raise PostNotFoundError(str(post_id))
        return await self.comment_repo.list_by_post(post_id)

    async def create_comment(self, requestor_id: UUID, post_id: UUID, content: str) -> Post:
        """
        Comment on a post as the requestor.

        Returns:
            The commented post, populated, including the new comment

        Raises:
            PostNotFoundError: If the post does not exist
        """
        if not await self.post_repo.exists(post_id):
            raise PostNotFoundError(str(post_id))

        if not await self.user_repo.exists(requestor_id):
            raise UserNotFoundError(str(requestor_id))

        comment = await self.comment_repo.create(
            user_id=requestor_id,
            post_id=post_id,
            content=content,
        )
        logger.info("Comment created", comment_id=str(comment.id), post_id=str(post_id))

        post = await self.post_repo.get_populated(post_id)
        if not post:
            raise PostNotFoundError(str(post_id))
        return post

    async def update_comment(self, requestor_id: UUID, comment_id: UUID, content: str) -> Comment:
        """
        Edit an own comment.

        Raises:
            CommentNotFoundError: If the comment does not exist
            PermissionDeniedError: If requestor is not the author
        """
        comment = await self.comment_repo.get(comment_id)
        if not comment:
            raise CommentNotFoundError(str(comment_id))

        ensure_can_act(requestor_id, comment.user_id)

        await self.comment_repo.update(comment_id, content=content)

        return await self._get_with_author(comment_id)

    async def delete_comment(self, requestor_id: UUID, comment_id: UUID) -> Comment:
        """
        Delete an own comment.

        Returns:
            The deleted comment
        """
        comment = await self._get_with_author(comment_id)

        ensure_can_act(requestor_id, comment.user_id)

        await self.integrity.delete_comment(comment_id)

        return comment

    async def _get_with_author(self, comment_id: UUID) -> Comment:
        comment = await self.comment_repo.get_with_author(comment_id)
        if not comment:
            raise CommentNotFoundError(str(comment_id))
        return comment
