"""
Upload Handler

    POST /upload   multipart field ``imageUrl`` → {"fileUrl": "..."}
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from socialhub.shared.schemas.upload import UploadResponse
from socialhub.shared.services.upload_service import UploadService
from socialhub.api.dependencies.auth import CurrentUserId
from socialhub.api.dependencies.services import get_upload_service


router = APIRouter()


@router.post("/upload", response_model=UploadResponse)
async def upload_file(
    current_user_id: CurrentUserId,
    image_url: Optional[UploadFile] = File(default=None, alias="imageUrl"),
    upload_service: UploadService = Depends(get_upload_service),
):
    """
    Upload an image to the object store.

    Raises:
        400: No file, file too large, or format not allowed
        503: Object store unavailable
    """
    stored = await upload_service.upload_form_file(image_url)
    return UploadResponse(file_url=stored.url)
