"""
Follow Repository

Follows are directed rows in the ``follows`` junction. A single row is
both an entry of the follower's "following" and of the followed user's
"followers", so the two sides cannot drift apart.
"""

from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from socialhub.shared.models.follow import Follow
from socialhub.shared.repositories.base import BaseRepository


class FollowRepository(BaseRepository[Follow]):
    """Repository for the User → User follow junction."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Follow, session)

    async def is_following(self, follower_id: UUID, followed_id: UUID) -> bool:
        """True if ``follower_id`` follows ``followed_id``."""
        result = await self.session.execute(
            select(sql_count())
            .select_from(Follow)
            .where(Follow.follower_id == follower_id, Follow.followed_id == followed_id)
        )
        return (result.scalar() or 0) > 0

    async def add(self, follower_id: UUID, followed_id: UUID) -> Follow:
        """Insert a follow edge."""
        follow = Follow(follower_id=follower_id, followed_id=followed_id)
        self.session.add(follow)
        await self.session.flush()
        return follow

    async def remove(self, follower_id: UUID, followed_id: UUID) -> bool:
        """Remove a follow edge if present."""
        deleted = await self.delete_where(
            Follow.follower_id == follower_id,
            Follow.followed_id == followed_id,
        )
        return deleted > 0

    async def list_following_ids(self, follower_id: UUID) -> list[UUID]:
        """Ids of the users ``follower_id`` follows, oldest follow first."""
        result = await self.session.execute(
            select(Follow.followed_id)
            .where(Follow.follower_id == follower_id)
            .order_by(Follow.created_at)
        )
        return list(result.scalars().all())

    async def delete_for_user(self, user_id: UUID) -> int:
        """
        Remove a user from every follow relation, in both directions.

        SQL Generated:
            DELETE FROM follows WHERE follower_id = '...' OR followed_id = '...'
        """
        return await self.delete_where(
            or_(Follow.follower_id == user_id, Follow.followed_id == user_id)
        )
