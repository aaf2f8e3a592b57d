"""
Activity Service

Per-user activity feeds: what a user posted, liked, commented on and shared.

Every feed is newest first and takes an optional ``limit`` (the ``qty``
path segment). For comments and shares the limit applies to the comments
or shares themselves; the feed then lists their parent posts, each post
once, in the order it was first reached.
"""

from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.shared.core.exceptions import UserNotFoundError
from socialhub.shared.models.post import Post
from socialhub.shared.repositories.comment_repository import CommentRepository
from socialhub.shared.repositories.post_repository import PostRepository
from socialhub.shared.repositories.share_repository import ShareRepository
from socialhub.shared.repositories.user_repository import UserRepository


def unique_in_order(ids: Iterable[UUID]) -> list[UUID]:
    """Drop repeated ids, keeping the first occurrence of each."""
    seen: set[UUID] = set()
    ordered = []
    for value in ids:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


class ActivityService:
    """Service building activity feeds."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.user_repo = UserRepository(session)
        self.post_repo = PostRepository(session)
        self.comment_repo = CommentRepository(session)
        self.share_repo = ShareRepository(session)

    async def post_activity(self, user_id: UUID, limit: Optional[int] = None) -> list[Post]:
        """Posts written by the user."""
        await self._ensure_user(user_id)
        return await self.post_repo.list_by_author(user_id, limit)

    async def like_activity(self, user_id: UUID, limit: Optional[int] = None) -> list[Post]:
        """Posts liked by the user."""
        await self._ensure_user(user_id)
        return await self.post_repo.list_liked_by(user_id, limit)

    async def comment_activity(self, user_id: UUID, limit: Optional[int] = None) -> list[Post]:
        """Posts the user commented on, by most recent comment."""
        await self._ensure_user(user_id)
        comments = await self.comment_repo.list_by_author(user_id, limit)
        return await self._posts_in_order(comment.post_id for comment in comments)

    async def share_activity(self, user_id: UUID, limit: Optional[int] = None) -> list[Post]:
        """
        Posts the user shared, by most recent share.

        The posts carry all their shares; callers show only the user's own.
        """
        await self._ensure_user(user_id)
        shares = await self.share_repo.list_by_user(user_id, limit)
        return await self._posts_in_order(share.post_id for share in shares)

    async def _posts_in_order(self, post_ids: Iterable[UUID]) -> list[Post]:
        ordered = unique_in_order(post_ids)
        posts = await self.post_repo.get_populated_by_ids(ordered)
        return [posts[post_id] for post_id in ordered if post_id in posts]

    async def _ensure_user(self, user_id: UUID) -> None:
        if not await self.user_repo.exists(user_id):
            raise UserNotFoundError(str(user_id))
