"""
Post Repository

Database operations specific to the Post model.

Populated reads:
================
A post response shows its author, the ids of the users who liked it,
its comments (each with author) and its shares. Every "populated" query
here attaches the same loader options so that nothing is lazy loaded
later, which async sessions do not allow.

``populate_existing`` is set on those reads because the post may already
sit in the session (just created or updated) with stale collections.
"""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from socialhub.shared.models.comment import Comment
from socialhub.shared.models.post import Post
from socialhub.shared.models.post_like import PostLike
from socialhub.shared.repositories.base import BaseRepository


def post_loader_options() -> tuple[LoaderOption, ...]:
    """Loader options resolving everything a post response shows."""
    return (
        selectinload(Post.author),
        selectinload(Post.likers),
        selectinload(Post.comments).selectinload(Comment.author),
        selectinload(Post.shares),
    )


class PostRepository(BaseRepository[Post]):
    """Repository for Post database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Post, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # POPULATED READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_populated(self, post_id: UUID) -> Optional[Post]:
        """Get one post with author, likers, comments and shares loaded."""
        result = await self.session.execute(
            select(Post)
            .where(Post.id == post_id)
            .options(*post_loader_options())
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_populated(self) -> list[Post]:
        """
        All posts, newest first, populated.

        SQL Generated:
            SELECT * FROM posts ORDER BY created_at DESC
            (+ one SELECT ... IN per loaded relationship)
        """
        result = await self.session.execute(
            select(Post)
            .options(*post_loader_options())
            .order_by(Post.created_at.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def list_by_author(self, user_id: UUID, limit: Optional[int] = None) -> list[Post]:
        """Posts written by ``user_id``, newest first."""
        query = (
            select(Post)
            .where(Post.user_id == user_id)
            .options(*post_loader_options())
            .order_by(Post.created_at.desc())
            .execution_options(populate_existing=True)
        )
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_liked_by(self, user_id: UUID, limit: Optional[int] = None) -> list[Post]:
        """
        Posts liked by ``user_id``, newest post first.

        SQL Generated:
            SELECT posts.* FROM posts
            JOIN post_likes ON post_likes.post_id = posts.id
            WHERE post_likes.user_id = '...'
            ORDER BY posts.created_at DESC
        """
        query = (
            select(Post)
            .join(PostLike, PostLike.post_id == Post.id)
            .where(PostLike.user_id == user_id)
            .options(*post_loader_options())
            .order_by(Post.created_at.desc())
            .execution_options(populate_existing=True)
        )
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_populated_by_ids(self, ids: Sequence[UUID]) -> dict[UUID, Post]:
        """Populated posts keyed by id; ids that no longer exist are absent."""
        if not ids:
            return {}

        result = await self.session.execute(
            select(Post)
            .where(Post.id.in_(list(ids)))
            .options(*post_loader_options())
            .execution_options(populate_existing=True)
        )
        return {post.id: post for post in result.scalars().all()}

    # ═══════════════════════════════════════════════════════════════════════════
    # CASCADE HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_ids_by_author(self, user_id: UUID) -> list[UUID]:
        """Ids of every post written by ``user_id``."""
        result = await self.session.execute(select(Post.id).where(Post.user_id == user_id))
        return list(result.scalars().all())
