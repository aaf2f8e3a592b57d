"""
SocialHub SQLAlchemy Models

This package contains all database models for the SocialHub application.

Model Hierarchy:
================
    User
       ├── posts (Post[])
       │      ├── comments (Comment[])
       │      ├── shares (Share[])
       │      └── likers (User[])       ← via PostLike
       ├── comments (Comment[])
       ├── shares (Share[])
       ├── liked_posts (Post[])         ← via PostLike
       ├── following (User[])          ← via Follow
       └── followers (User[])          ← via Follow

Models Overview:
================
- Base: Base class and timestamp mixin
- User: Registered account
- Post: Authored content
- Comment: Reply under a post
- Share: Re-share of a post (unique per user and post)
- PostLike: Junction for likes
- Follow: Junction for follows

Usage:
======
    from socialhub.shared.models import User, Post, Comment, Share
"""

from socialhub.shared.models.base import Base, TimestampMixin
from socialhub.shared.models.user import User
from socialhub.shared.models.post import Post
from socialhub.shared.models.comment import Comment
from socialhub.shared.models.share import Share
from socialhub.shared.models.post_like import PostLike
from socialhub.shared.models.follow import Follow

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Entities
    "User",
    "Post",
    "Comment",
    "Share",
    # Junctions
    "PostLike",
    "Follow",
]
