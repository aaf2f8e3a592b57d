"""
Follow Junction Model

A directed "follower → followed" edge between two users.

Storing each edge once keeps the two views consistent by construction:
the follower's "following" list and the followed user's "followers" list
are both read from this table.
"""

from datetime import datetime
import uuid

from sqlalchemy import DateTime, ForeignKey, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from socialhub.shared.models.base import Base, utcnow


class Follow(Base):
    """
    Follow model - self-referencing junction on User.

    Attributes:
        follower_id: The user who follows (part of composite PK)
        followed_id: The user being followed (part of composite PK)
        created_at: When the follow happened
    """

    __tablename__ = "follows"

    follower_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    followed_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
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
        return f"<Follow(follower_id={self.follower_id}, followed_id={self.followed_id})>"
