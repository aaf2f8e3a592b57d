"""
Share Repository

Database operations specific to the Share model.

Duplicate detection is a single filtered lookup on (user_id, post_id),
backed by the ``uq_shares_user_post`` unique constraint.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.shared.models.share import Share
from socialhub.shared.repositories.base import BaseRepository


class ShareRepository(BaseRepository[Share]):
    """Repository for Share database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Share, session)

    async def get_user_share(self, user_id: UUID, post_id: UUID) -> Optional[Share]:
        """
        Check if a user already shared a post.

        SQL Generated:
            SELECT * FROM shares WHERE user_id = '...' AND post_id = '...'
        """
        result = await self.session.execute(
            select(Share).where(Share.user_id == user_id, Share.post_id == post_id)
        )
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: UUID, limit: Optional[int] = None) -> list[Share]:
        """Shares made by ``user_id``, newest first."""
        query = select(Share).where(Share.user_id == user_id).order_by(Share.created_at.desc())
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def delete_by_post(self, post_id: UUID) -> int:
        """Delete every share of a post."""
        return await self.delete_where(Share.post_id == post_id)

    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every share made by a user."""
        return await self.delete_where(Share.user_id == user_id)
