"""
Share Entity Model

A user re-sharing a post, with an optional note.

SAMPLE SHARE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 990e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 660e8400-e29b-41d4-a716-446655440000                      │
│ post_id          │ 770e8400-e29b-41d4-a716-446655440000                      │
│ content          │ "Worth a read"                                            │
└──────────────────────────────────────────────────────────────────────────────┘

A user can share a given post at most once (uq_shares_user_post).
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from socialhub.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from socialhub.shared.models.user import User
    from socialhub.shared.models.post import Post


class Share(Base, TimestampMixin):
    """
    Share model.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: The sharing user
        post_id: The shared post
        content: Optional note attached to the share
    """

    __tablename__ = "shares"
    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_shares_user_post"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    post_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    author: Mapped["User"] = relationship(
        "User",
        back_populates="shares",
    )

    post: Mapped["Post"] = relationship(
        "Post",
        back_populates="shares",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Share(id={self.id}, user_id={self.user_id}, post_id={self.post_id})>"
