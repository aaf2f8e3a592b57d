"""
Activity Handler

Per-user activity feeds, newest first. Each feed has an unbounded form
and a ``/{qty}`` form limiting the number of entries.

    GET /in/{user_id}/postActivity[/{qty}]
    GET /in/{user_id}/likeActivity[/{qty}]
    GET /in/{user_id}/commentActivity[/{qty}]
    GET /in/{user_id}/shareActivity[/{qty}]
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends

from socialhub.shared.core.exceptions import ValidationError
from socialhub.shared.core.permissions import can_act
from socialhub.shared.schemas.post import PostResponse, build_post_response
from socialhub.shared.services.activity_service import ActivityService
from socialhub.api.dependencies.services import get_activity_service


router = APIRouter()


def _limit(qty: Optional[int]) -> Optional[int]:
    if qty is not None and qty < 1:
        raise ValidationError("qty must be a positive number", details={"qty": qty})
    return qty


@router.get("/in/{user_id}/postActivity", response_model=list[PostResponse])
@router.get("/in/{user_id}/postActivity/{qty}", response_model=list[PostResponse])
async def post_activity(
    user_id: UUID,
    qty: Optional[int] = None,
    activity_service: ActivityService = Depends(get_activity_service),
):
    """Posts written by the user."""
    posts = await activity_service.post_activity(user_id, _limit(qty))
    return [build_post_response(post) for post in posts]


@router.get("/in/{user_id}/likeActivity", response_model=list[PostResponse])
@router.get("/in/{user_id}/likeActivity/{qty}", response_model=list[PostResponse])
async def like_activity(
    user_id: UUID,
    qty: Optional[int] = None,
    activity_service: ActivityService = Depends(get_activity_service),
):
    """Posts liked by the user."""
    posts = await activity_service.like_activity(user_id, _limit(qty))
    return [build_post_response(post) for post in posts]


@router.get("/in/{user_id}/commentActivity", response_model=list[PostResponse])
@router.get("/in/{user_id}/commentActivity/{qty}", response_model=list[PostResponse])
async def comment_activity(
    user_id: UUID,
    qty: Optional[int] = None,
    activity_service: ActivityService = Depends(get_activity_service),
):
    """Posts the user commented on, each once."""
    posts = await activity_service.comment_activity(user_id, _limit(qty))
    return [build_post_response(post) for post in posts]


@router.get("/in/{user_id}/shareActivity", response_model=list[PostResponse])
@router.get("/in/{user_id}/shareActivity/{qty}", response_model=list[PostResponse])
async def share_activity(
    user_id: UUID,
    qty: Optional[int] = None,
    activity_service: ActivityService = Depends(get_activity_service),
):
    """Posts the user shared, each listing only that user's shares."""
    posts = await activity_service.share_activity(user_id, _limit(qty))
    return [
        build_post_response(post, share_filter=lambda share: can_act(share.user_id, user_id))
        for post in posts
    ]
