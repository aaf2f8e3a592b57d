"""
Comment Entity Model

A reply written by a user under a post.

SAMPLE COMMENT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 880e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ post_id          │ 770e8400-e29b-41d4-a716-446655440000                      │
│ content          │ "Nice one"                                                │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from socialhub.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from socialhub.shared.models.user import User
    from socialhub.shared.models.post import Post


class Comment(Base, TimestampMixin):
    """
    Comment model.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Author
        post_id: Parent post (must exist at creation)
        content: Comment text (required)
    """

    __tablename__ = "comments"

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

    content: Mapped[str] = mapped_column(Text, nullable=False)

    author: Mapped["User"] = relationship(
        "User",
        back_populates="comments",
    )

    post: Mapped["Post"] = relationship(
        "Post",
        back_populates="comments",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Comment(id={self.id}, post_id={self.post_id})>"
