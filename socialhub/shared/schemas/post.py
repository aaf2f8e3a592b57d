"""
Post Schemas

Request/response models for post endpoints.

A populated post looks like:

    {
        "id": "...",
        "content": "Hello",
        "imageUrl": null,
        "user": {"id": "...", "name": "Ada", "imageUrl": "..."},
        "likes": ["<user id>", ...],
        "comments": [{"id": "...", "content": "...", "user": {...}, ...}],
        "shares": [{"id": "...", "userId": "...", "postId": "...", ...}],
        "createdAt": "...",
        "updatedAt": "..."
    }
"""

from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from pydantic import Field, field_validator

from socialhub.shared.models.post import Post
from socialhub.shared.models.share import Share
from socialhub.shared.schemas.comment import CommentResponse, build_comment_response
from socialhub.shared.schemas.common import BaseSchema, UserBrief
from socialhub.shared.schemas.share import ShareResponse


class PostCreate(BaseSchema):
    """Schema for creating or editing a post."""

    content: str = Field(default="", validate_default=True)
    image_url: Optional[str] = None

    @field_validator("content")
    @classmethod
    def content_required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Please provide the post content")
        return value


class PostResponse(BaseSchema):
    """A post with author, likes, comments and shares resolved."""

    id: UUID
    content: str
    image_url: Optional[str] = None
    user: UserBrief
    likes: list[UUID] = Field(default_factory=list)
    comments: list[CommentResponse] = Field(default_factory=list)
    shares: list[ShareResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


def build_post_response(
    post: Post,
    *,
    share_filter: Optional[Callable[[Share], bool]] = None,
) -> PostResponse:
    """
    Build a PostResponse from a post loaded with ``post_loader_options()``.

    Args:
        post: Populated post
        share_filter: Optional predicate limiting which shares are listed
    """
    shares = post.shares
    if share_filter is not None:
        shares = [share for share in shares if share_filter(share)]

    return PostResponse(
        id=post.id,
        content=post.content,
        image_url=post.image_url,
        user=UserBrief.model_validate(post.author),
        likes=[liker.id for liker in post.likers],
        comments=[build_comment_response(comment) for comment in post.comments],
        shares=[ShareResponse.model_validate(share) for share in shares],
        created_at=post.created_at,
        updated_at=post.updated_at,
    )
