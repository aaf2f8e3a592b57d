"""
Share Schemas

Request/response models for share endpoints.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from socialhub.shared.schemas.common import BaseSchema


class ShareCreateRequest(BaseSchema):
    """
    Schema for sharing a post.

    ``userId`` may be sent by clients; when present it must be the caller.
    """

    user_id: Optional[UUID] = None
    content: Optional[str] = None


class DeleteShareRequest(BaseSchema):
    """Body of a share deletion: the user and post the share should belong to."""

    user_id: Optional[UUID] = None
    post_id: Optional[UUID] = None


class ShareResponse(BaseSchema):
    """Schema for share response."""

    id: UUID
    user_id: UUID
    post_id: UUID
    content: Optional[str] = None
    created_at: datetime
    updated_at: datetime
