"""
PostLike Repository

Likes are rows in the ``post_likes`` junction. Adding a row updates both
the user's liked posts and the post's likes; removing it does the same.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from socialhub.shared.models.post_like import PostLike
from socialhub.shared.repositories.base import BaseRepository


class PostLikeRepository(BaseRepository[PostLike]):
    """Repository for the User ↔ Post like junction."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(PostLike, session)

    async def has_liked(self, user_id: UUID, post_id: UUID) -> bool:
        """True if ``user_id`` currently likes ``post_id``."""
        result = await self.session.execute(
            select(sql_count())
            .select_from(PostLike)
            .where(PostLike.user_id == user_id, PostLike.post_id == post_id)
        )
        return (result.scalar() or 0) > 0

    async def add(self, user_id: UUID, post_id: UUID) -> PostLike:
        """Insert a like. A duplicate fails at flush on the primary key."""
        like = PostLike(user_id=user_id, post_id=post_id)
        self.session.add(like)
        await self.session.flush()
        return like

    async def remove(self, user_id: UUID, post_id: UUID) -> bool:
        """Remove a like if present. Returns whether a row was deleted."""
        deleted = await self.delete_where(
            PostLike.user_id == user_id,
            PostLike.post_id == post_id,
        )
        return deleted > 0

    async def delete_by_post(self, post_id: UUID) -> int:
        """Strip a post from every user's liked posts."""
        return await self.delete_where(PostLike.post_id == post_id)

    async def delete_by_user(self, user_id: UUID) -> int:
        """Remove every like a user made."""
        return await self.delete_where(PostLike.user_id == user_id)
