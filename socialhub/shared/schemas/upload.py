"""
Upload Schemas
"""

from socialhub.shared.schemas.common import BaseSchema


class UploadResponse(BaseSchema):
    """Public URL of an uploaded image, serialized as ``fileUrl``."""

    file_url: str
