"""
Comment Schemas

Request/response models for comment endpoints.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from socialhub.shared.models.comment import Comment
from socialhub.shared.schemas.common import BaseSchema, UserBrief


class CommentCreate(BaseSchema):
    """Schema for writing (or editing) a comment."""

    content: str = Field(default="", validate_default=True)

    @field_validator("content")
    @classmethod
    def content_required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Please provide the comment content")
        return value


class CommentResponse(BaseSchema):
    """A comment with its author joined."""

    id: UUID
    content: str
    user: Optional[UserBrief] = None
    post_id: UUID
    created_at: datetime
    updated_at: datetime


def build_comment_response(comment: Comment, *, with_author: bool = True) -> CommentResponse:
    """Build a CommentResponse; the author must be loaded when requested."""
    return CommentResponse(
        id=comment.id,
        content=comment.content,
        user=UserBrief.model_validate(comment.author) if with_author else None,
        post_id=comment.post_id,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )
