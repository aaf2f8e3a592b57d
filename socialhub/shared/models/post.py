"""
Post Entity Model

A piece of content published by a user, optionally with an image.

SAMPLE POST RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 770e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ content          │ "First post!"                                             │
│ image_url        │ "https://bucket.s3.amazonaws.com/appcrud/....png"         │
│ created_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘

The comment, share and like lists of a post are not stored on the row;
they are the live Comment, Share and PostLike rows pointing at it.
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from socialhub.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from socialhub.shared.models.user import User
    from socialhub.shared.models.comment import Comment
    from socialhub.shared.models.share import Share


class Post(Base, TimestampMixin):
    """
    Post model.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Author (never null)
        content: Post text (required)
        image_url: Optional image URL

    Relationships:
        author: The user who wrote the post
        comments: Comments on the post, oldest first
        shares: Shares of the post
        likers: Users who liked the post
    """

    __tablename__ = "posts"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT
    # ═══════════════════════════════════════════════════════════════════════════

    content: Mapped[str] = mapped_column(Text, nullable=False)

    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    author: Mapped["User"] = relationship(
        "User",
        back_populates="posts",
    )

    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="post",
        order_by="Comment.created_at",
        passive_deletes=True,
    )

    shares: Mapped[list["Share"]] = relationship(
        "Share",
        back_populates="post",
        order_by="Share.created_at",
        passive_deletes=True,
    )

    likers: Mapped[list["User"]] = relationship(
        "User",
        secondary="post_likes",
        order_by="PostLike.created_at",
        viewonly=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Post(id={self.id}, user_id={self.user_id})>"
