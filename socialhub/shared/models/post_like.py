"""
PostLike Junction Model

Links users to the posts they liked.

One row stands for both sides of the relation: the user's "likedPosts"
entry and the post's "likes" entry. The composite primary key makes a
second like by the same user impossible at the database level.
"""

from datetime import datetime
import uuid

from sqlalchemy import DateTime, ForeignKey, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from socialhub.shared.models.base import Base, utcnow


class PostLike(Base):
    """
    PostLike model - junction between User and Post.

    Attributes:
        user_id: The liking user (part of composite PK)
        post_id: The liked post (part of composite PK)
        created_at: When the like happened
    """

    __tablename__ = "post_likes"

    # ═══════════════════════════════════════════════════════════════════════════
    # COMPOSITE PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    post_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<PostLike(user_id={self.user_id}, post_id={self.post_id})>"
