"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, camelCase aliases)
- UserBrief: The "name + image" projection used wherever a user is joined
- Generic Responses: MessageResponse, ErrorResponse, HealthResponse

JSON field names:
=================
The API speaks camelCase (``imageUrl``, ``authToken``, ``likedPosts``).
BaseSchema generates those aliases from the snake_case attribute names and
still accepts snake_case input, so both spellings parse.

Usage:
======
    from socialhub.shared.schemas.common import BaseSchema

    class ShareResponse(BaseSchema):
        id: UUID
        user_id: UUID       # serialized as "userId"
        created_at: datetime
"""

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All request and response schemas inherit from this class.
    Provides:
    - from_attributes: Allow creating from ORM models
    - alias_generator: camelCase names on the wire
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# JOINED USER
# ═══════════════════════════════════════════════════════════════════════════════


class UserBrief(BaseSchema):
    """A joined user: only id, name and avatar are exposed."""

    id: UUID
    name: str
    image_url: Optional[str] = None


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Simple message response for liveness and confirmations."""

    message: str


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    All API errors return this format for consistency.

    Example:
        {
            "errorMessage": "This username is already taken",
            "error": {
                "code": "USERNAME_TAKEN",
                "message": "This username is already taken",
                "details": {"username": "ada"}
            }
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    error_message: str = Field(alias="errorMessage")
    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "socialhub"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
