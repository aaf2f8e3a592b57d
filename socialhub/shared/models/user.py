"""
User Entity Model

Represents a registered account.

Model Hierarchy:
================
    User
       ├── posts (Post[])              - Posts authored by the user
       ├── comments (Comment[])        - Comments written by the user
       ├── shares (Share[])            - Shares made by the user ("sharedPosts")
       ├── liked_posts (Post[])        - Through post_likes ("likedPosts")
       ├── following (User[])          - Through follows, user is follower
       └── followers (User[])          - Through follows, user is followed

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ email            │ "ada@example.com"                                         │
│ username         │ "ada"                                                     │
│ password_hash    │ "$2b$12$..."                                              │
│ name             │ "Ada Lovelace"                                            │
│ about            │ "Analyst"                                                 │
│ image_url        │ "https://.../avatar.png"                                  │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘

Relationship collections are read-only views used for "populate" queries.
Writes to likes and follows go through their junction repositories.
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from socialhub.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from socialhub.shared.models.post import Post
    from socialhub.shared.models.comment import Comment
    from socialhub.shared.models.share import Share


class User(Base, TimestampMixin):
    """
    User model representing a registered account.

    Attributes:
        id: Unique identifier (UUID v4)
        email: Email address (unique, indexed)
        username: Handle (unique, indexed)
        password_hash: Bcrypt hashed password
        name: Display name
        about, location, education, occupation: Optional profile fields
        image_url: Avatar URL
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    username: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    about: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    education: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    occupation: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    posts: Mapped[list["Post"]] = relationship(
        "Post",
        back_populates="author",
        order_by="Post.created_at.desc()",
        passive_deletes=True,
    )

    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="author",
        passive_deletes=True,
    )

    shares: Mapped[list["Share"]] = relationship(
        "Share",
        back_populates="author",
        order_by="Share.created_at.desc()",
        passive_deletes=True,
    )

    liked_posts: Mapped[list["Post"]] = relationship(
        "Post",
        secondary="post_likes",
        order_by="Post.created_at.desc()",
        viewonly=True,
    )

    following: Mapped[list["User"]] = relationship(
        "User",
        secondary="follows",
        primaryjoin="User.id == Follow.follower_id",
        secondaryjoin="User.id == Follow.followed_id",
        viewonly=True,
    )

    followers: Mapped[list["User"]] = relationship(
        "User",
        secondary="follows",
        primaryjoin="User.id == Follow.followed_id",
        secondaryjoin="User.id == Follow.follower_id",
        viewonly=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
