"""
Share Handler

    POST   /share-post/{post_id}      → Share a post
    DELETE /delete-share/{share_id}   → Delete an own share
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends

from socialhub.shared.schemas.share import DeleteShareRequest, ShareCreateRequest, ShareResponse
from socialhub.shared.services.share_service import ShareService
from socialhub.api.dependencies.auth import CurrentUserId
from socialhub.api.dependencies.services import get_share_service


router = APIRouter()


@router.post("/share-post/{post_id}", response_model=ShareResponse)
async def share_post(
    post_id: UUID,
    current_user_id: CurrentUserId,
    data: Optional[ShareCreateRequest] = Body(default=None),
    share_service: ShareService = Depends(get_share_service),
):
    """
    Share a post, optionally with a comment.

    Raises:
        403: If the body names another user
        404: If post not found
        409: If the caller already shared the post
    """
    data = data or ShareCreateRequest()
    share = await share_service.share_post(
        requestor_id=current_user_id,
        post_id=post_id,
        user_id=data.user_id,
        content=data.content,
    )
    return ShareResponse.model_validate(share)


@router.delete("/delete-share/{share_id}", response_model=ShareResponse)
async def delete_share(
    share_id: UUID,
    current_user_id: CurrentUserId,
    data: Optional[DeleteShareRequest] = Body(default=None),
    share_service: ShareService = Depends(get_share_service),
):
    """
    Delete an own share.

    Raises:
        400: If the share isn't the caller's share of the named post
        403: If the body names another user
    """
    data = data or DeleteShareRequest()
    share = await share_service.delete_share(
        requestor_id=current_user_id,
        share_id=share_id,
        user_id=data.user_id,
        post_id=data.post_id,
    )
    return ShareResponse.model_validate(share)
