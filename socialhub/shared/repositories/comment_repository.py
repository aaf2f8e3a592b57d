"""
Comment Repository

Database operations specific to the Comment model.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from socialhub.shared.models.comment import Comment
from socialhub.shared.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Comment, session)

    async def get_with_author(self, comment_id: UUID) -> Optional[Comment]:
        """Get a comment with its author loaded."""
        result = await self.session.execute(
            select(Comment)
            .where(Comment.id == comment_id)
            .options(selectinload(Comment.author))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_by_post(self, post_id: UUID) -> list[Comment]:
        """
        Comments under a post, oldest first, with authors.

        SQL Generated:
            SELECT * FROM comments WHERE post_id = '...' ORDER BY created_at
        """
        result = await self.session.execute(
            select(Comment)
            .where(Comment.post_id == post_id)
            .options(selectinload(Comment.author))
            .order_by(Comment.created_at)
        )
        return list(result.scalars().all())

    async def list_by_author(self, user_id: UUID, limit: Optional[int] = None) -> list[Comment]:
        """Comments written by ``user_id``, newest first."""
        query = (
            select(Comment)
            .where(Comment.user_id == user_id)
            .order_by(Comment.created_at.desc())
        )
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def delete_by_post(self, post_id: UUID) -> int:
        """Delete every comment under a post."""
        return await self.delete_where(Comment.post_id == post_id)

    async def delete_by_author(self, user_id: UUID) -> int:
        """Delete every comment written by a user."""
        return await self.delete_where(Comment.user_id == user_id)
