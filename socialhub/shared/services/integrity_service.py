"""
Integrity Service

Keeps related rows consistent when something is deleted.

Every relation in the data model is a foreign key or a junction row, so
"removing a post from every user's liked posts" is a single DELETE on
``post_likes`` rather than a scan over users. The service issues those
deletes child-first, in the order below, and leaves ownership checks to
the caller.

Cascades:
=========
    delete_post(post)
        ├── likes of the post            (post_likes.post_id)
        ├── comments under the post
        ├── shares of the post
        └── the post

    delete_user(user)
        ├── delete_post() for each post the user wrote
        ├── follow edges in both directions
        ├── likes, shares and comments the user left on other posts
        └── the user

    delete_comment(comment)              → the comment
    delete_share(share, user, post)      → membership check, then the share

Transactions:
=============
Nothing here commits. All statements run inside the request's session, and
get_db() commits once the handler returns or rolls the whole cascade back
if any step raises.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.shared.core.exceptions import IntegrityMismatchError
from socialhub.shared.core.logging import get_logger
from socialhub.shared.core.permissions import can_act
from socialhub.shared.models.share import Share
from socialhub.shared.repositories.comment_repository import CommentRepository
from socialhub.shared.repositories.follow_repository import FollowRepository
from socialhub.shared.repositories.post_like_repository import PostLikeRepository
from socialhub.shared.repositories.post_repository import PostRepository
from socialhub.shared.repositories.share_repository import ShareRepository
from socialhub.shared.repositories.user_repository import UserRepository


logger = get_logger(__name__)


class IntegrityService:
    """
    Cascading deletes across users, posts, comments, shares and junctions.

    Attributes:
        session: Database session shared by every repository below
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.user_repo = UserRepository(session)
        self.post_repo = PostRepository(session)
        self.comment_repo = CommentRepository(session)
        self.share_repo = ShareRepository(session)
        self.like_repo = PostLikeRepository(session)
        self.follow_repo = FollowRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # POSTS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete_post(self, post_id: UUID) -> None:
        """
        Delete a post and everything hanging off it.

        Args:
            post_id: Post to delete (ownership already checked)
        """
        likes = await self.like_repo.delete_by_post(post_id)
        comments = await self.comment_repo.delete_by_post(post_id)
        shares = await self.share_repo.delete_by_post(post_id)
        await self.post_repo.delete(post_id)

        logger.info(
            "Post deleted",
            post_id=str(post_id),
            likes_removed=likes,
            comments_removed=comments,
            shares_removed=shares,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # USERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete_user(self, user_id: UUID) -> None:
        """
        Delete a user, their posts, and every reference other rows hold to them.

        Args:
            user_id: User to delete (ownership already checked)
        """
        post_ids = await self.post_repo.list_ids_by_author(user_id)
        for post_id in post_ids:
            await self.delete_post(post_id)

        follows = await self.follow_repo.delete_for_user(user_id)
        likes = await self.like_repo.delete_by_user(user_id)
        shares = await self.share_repo.delete_by_user(user_id)
        comments = await self.comment_repo.delete_by_author(user_id)
        await self.user_repo.delete(user_id)

        logger.info(
            "User deleted",
            user_id=str(user_id),
            posts_removed=len(post_ids),
            follows_removed=follows,
            likes_removed=likes,
            shares_removed=shares,
            comments_removed=comments,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # COMMENTS & SHARES
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete_comment(self, comment_id: UUID) -> None:
        """Delete a comment; the parent post's comment list is derived."""
        await self.comment_repo.delete(comment_id)
        logger.info("Comment deleted", comment_id=str(comment_id))

    async def delete_share(
        self,
        share_id: UUID,
        user_id: UUID,
        post_id: Optional[UUID] = None,
    ) -> Share:
        """
        Delete a share after checking it links ``user_id`` and ``post_id``.

        Args:
            share_id: Share to delete
            user_id: User the share must belong to
            post_id: Post the share must point at (skipped when None)

        Returns:
            The deleted share

        Raises:
            IntegrityMismatchError: Share missing, or made by another user,
                or pointing at another post
        """
        share = await self.share_repo.get(share_id)
        if share is None:
            raise IntegrityMismatchError(details={"share_id": str(share_id)})

        if not can_act(user_id, share.user_id):
            raise IntegrityMismatchError(details={"share_id": str(share_id)})

        if post_id is not None and not can_act(post_id, share.post_id):
            raise IntegrityMismatchError(details={"share_id": str(share_id)})

        await self.share_repo.delete(share_id)
        logger.info("Share deleted", share_id=str(share_id), user_id=str(user_id))

        return share
