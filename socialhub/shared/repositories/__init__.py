"""
Repository Pattern Implementations

This module provides the Repository pattern for database operations.
Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]        ← Generic CRUD operations
         │
         ├── UserRepository          ← Login lookups, account/profile reads
         ├── PostRepository          ← Populated post reads, activity queries
         ├── CommentRepository       ← Comments by post / by author
         ├── ShareRepository         ← Duplicate check, shares by user
         ├── PostLikeRepository      ← Like junction
         └── FollowRepository        ← Follow junction

Usage Example:
==============
    from socialhub.shared.repositories import PostRepository, PostLikeRepository

    async def like(db: AsyncSession, user_id: UUID, post_id: UUID):
        if await PostLikeRepository(db).has_liked(user_id, post_id):
            raise AlreadyLikedError(str(post_id))
        await PostLikeRepository(db).add(user_id, post_id)
"""

from socialhub.shared.repositories.base import BaseRepository
from socialhub.shared.repositories.user_repository import UserRepository
from socialhub.shared.repositories.post_repository import PostRepository, post_loader_options
from socialhub.shared.repositories.comment_repository import CommentRepository
from socialhub.shared.repositories.share_repository import ShareRepository
from socialhub.shared.repositories.post_like_repository import PostLikeRepository
from socialhub.shared.repositories.follow_repository import FollowRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ShareRepository",
    # Junctions
    "PostLikeRepository",
    "FollowRepository",
    # Loader options
    "post_loader_options",
]
