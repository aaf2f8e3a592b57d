"""
Upload Service

Checks an uploaded image and hands it to the object store.
"""

from typing import Optional

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from socialhub.config.settings import settings
from socialhub.shared.adapters.storage_adapter import StorageAdapter, StoredObject
from socialhub.shared.core.exceptions import ValidationError
from socialhub.shared.core.logging import logger


class UploadService:
    """
    Service for image uploads.

    Attributes:
        storage: Object store adapter
        max_bytes: Largest accepted file
    """

    def __init__(self, storage: StorageAdapter, max_bytes: Optional[int] = None) -> None:
        self.storage = storage
        self.max_bytes = max_bytes or settings.UPLOAD_MAX_BYTES

    def _too_large(self, size: int) -> ValidationError:
        return ValidationError(
            "File is too large",
            details={"size": size, "max_bytes": self.max_bytes},
        )

    async def upload_form_file(self, upload: Optional[UploadFile]) -> StoredObject:
        """
        Store a multipart upload.

        A declared size over the limit is rejected before reading; otherwise
        at most ``max_bytes + 1`` bytes are read.
        """
        if upload is None:
            raise ValidationError("No file uploaded")
        if upload.size is not None and upload.size > self.max_bytes:
            raise self._too_large(upload.size)

        data = await upload.read(self.max_bytes + 1)
        return await self.upload_image(data, upload.filename, upload.content_type)

    async def upload_image(
        self,
        data: bytes,
        filename: Optional[str],
        content_type: Optional[str] = None,
    ) -> StoredObject:
        """
        Store an image and return where it lives.

        Raises:
            ValidationError: No file, an empty file, a file over the size
                limit, or a format outside the allowed set
            ExternalServiceError: If the object store fails
        """
        if not filename or not data:
            raise ValidationError("No file uploaded")

        if len(data) > self.max_bytes:
            raise self._too_large(len(data))

        # Reject disallowed formats before uploading
        self.storage.extension_of(filename)

        stored = await run_in_threadpool(self.storage.upload_image, data, filename, content_type)

        logger.info("Image uploaded", key=stored.key, size=stored.size)

        return stored
