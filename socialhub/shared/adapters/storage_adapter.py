"""
Storage adapter - S3-compatible object storage for uploaded images.

Provides:
- Format check against the allowed image extensions
- Object upload under a random key in the upload folder
- Public URL resolution for stored objects

Objects are stored as ``<UPLOAD_FOLDER>/<uuid>.<ext>``. The public URL is
``S3_PUBLIC_BASE_URL/<key>`` when a base URL (CDN, MinIO, ...) is
configured, otherwise the bucket's virtual-hosted S3 URL.

boto3 is blocking; async callers run ``upload_image`` in a worker thread.
"""

import logging
import uuid
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Optional, Sequence

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ...config.settings import settings
from ..core.exceptions import ExternalServiceError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class StoredObject:
    """An object written to the bucket."""

    key: str
    url: str
    content_type: Optional[str]
    size: int


class StorageAdapter:
    """
    Adapter for S3 object storage.

    Handles:
    - Validating image extensions
    - Uploading image bytes
    - Building retrievable URLs
    """

    def __init__(
        self,
        bucket: Optional[str] = None,
        region: Optional[str] = None,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        public_base_url: Optional[str] = None,
        folder: Optional[str] = None,
        allowed_formats: Optional[Sequence[str]] = None,
    ):
        """
        Initialize storage adapter. Unset arguments fall back to settings.

        Args:
            bucket: Target bucket name
            region: AWS region
            aws_access_key_id: AWS access key
            aws_secret_access_key: AWS secret key
            endpoint_url: Custom S3-compatible endpoint
            public_base_url: Prefix for public object URLs
            folder: Key prefix for uploads
            allowed_formats: Accepted file extensions (lowercase, no dot)
        """
        self.bucket = bucket or settings.S3_BUCKET_NAME
        self.region = region or settings.AWS_REGION
        self.aws_access_key_id = aws_access_key_id or settings.AWS_ACCESS_KEY_ID
        self.aws_secret_access_key = aws_secret_access_key or settings.AWS_SECRET_ACCESS_KEY
        self.endpoint_url = endpoint_url or settings.S3_ENDPOINT_URL or None
        self.public_base_url = public_base_url or settings.S3_PUBLIC_BASE_URL
        self.folder = (folder or settings.UPLOAD_FOLDER).strip("/")
        self.allowed_formats = tuple(
            fmt.lower() for fmt in (allowed_formats or settings.UPLOAD_ALLOWED_FORMATS)
        )
        self._client = None

    @property
    def client(self):
        """Lazy-loaded S3 client."""
        if self._client is None:
            if self.aws_access_key_id and self.aws_secret_access_key:
                self._client = boto3.client(
                    "s3",
                    region_name=self.region,
                    endpoint_url=self.endpoint_url,
                    aws_access_key_id=self.aws_access_key_id,
                    aws_secret_access_key=self.aws_secret_access_key,
                )
            else:
                # Use default credentials (IAM role, environment, etc.)
                self._client = boto3.client(
                    "s3",
                    region_name=self.region,
                    endpoint_url=self.endpoint_url,
                )
        return self._client

    def extension_of(self, filename: str) -> str:
        """
        Return the lowercase extension of ``filename`` if it is allowed.

        Raises:
            ValidationError: If the extension is missing or not an image format
        """
        extension = PurePosixPath(filename or "").suffix.lstrip(".").lower()
        if extension not in self.allowed_formats:
            raise ValidationError(
                f"File format not allowed. Allowed formats: {', '.join(self.allowed_formats)}",
                details={"filename": filename, "allowed_formats": list(self.allowed_formats)},
            )
        return extension

    def build_key(self, filename: str) -> str:
        """Random object key for an upload, keeping the file's extension."""
        extension = self.extension_of(filename)
        return f"{self.folder}/{uuid.uuid4().hex}.{extension}"

    def public_url(self, key: str) -> str:
        """Retrievable URL of a stored object."""
        if self.public_base_url:
            return f"{self.public_base_url.rstrip('/')}/{key}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    def upload_image(
        self,
        data: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> StoredObject:
        """
        Upload image bytes to the bucket.

        Args:
            data: File contents
            filename: Original file name (used for the extension only)
            content_type: MIME type to store with the object

        Returns:
            StoredObject with the key and public URL

        Raises:
            ValidationError: If the file format is not allowed
            ExternalServiceError: If the object store rejects the upload
        """
        key = self.build_key(filename)

        params = {
            "Bucket": self.bucket,
            "Key": key,
            "Body": data,
        }
        if content_type:
            params["ContentType"] = content_type

        try:
            self.client.put_object(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to upload {key} to bucket {self.bucket}: {e}")
            raise ExternalServiceError("storage", "Failed to upload file") from e

        logger.info(f"Uploaded {key} ({len(data)} bytes) to bucket {self.bucket}")

        return StoredObject(
            key=key,
            url=self.public_url(key),
            content_type=content_type,
            size=len(data),
        )


# Singleton instance
_storage_adapter: Optional[StorageAdapter] = None


def get_storage_adapter() -> StorageAdapter:
    """Get or create storage adapter singleton."""
    global _storage_adapter
    if _storage_adapter is None:
        _storage_adapter = StorageAdapter()
    return _storage_adapter
