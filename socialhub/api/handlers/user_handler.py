"""
User Handler

Profile pages, follows and account management.

Endpoints:
==========
    GET    /in/{user_id}                        → Public profile
    GET    /check-share/{user_id}               → Shares made by a user
    GET    /check-follow/{user_id}              → Ids a user follows
    GET    /in/{user_id}/follow?followUserId=   → Does the caller follow someone?
    PUT    /in/{user_id}/follow                 → Follow / unfollow toggle
    PUT    /profile-edit/{user_id}              → Edit own profile
    PUT    /edit-password/{user_id}             → Change own password
    DELETE /profile-delete/{user_id}            → Delete own account
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from socialhub.shared.schemas.share import ShareResponse
from socialhub.shared.schemas.user import (
    CheckFollowResponse,
    CheckShareResponse,
    FollowRequest,
    PasswordEditRequest,
    ProfileEditRequest,
    ProfileResponse,
    UserResponse,
    build_profile_response,
    build_user_response,
)
from socialhub.shared.services.user_service import UserService
from socialhub.api.dependencies.auth import CurrentUserId
from socialhub.api.dependencies.services import get_user_service


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# PUBLIC READS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/in/{user_id}", response_model=ProfileResponse)
async def get_profile(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
):
    """
    Public profile with posts, liked posts, followers and following.

    Raises:
        404: If user not found
    """
    user, posts, liked_posts = await user_service.get_profile(user_id)
    return build_profile_response(user, posts, liked_posts)


@router.get("/check-share/{user_id}", response_model=CheckShareResponse)
async def check_share(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
):
    """Shares made by a user and the ids of the shared posts."""
    user = await user_service.get_shares(user_id)
    return CheckShareResponse(
        id=user.id,
        shares=[ShareResponse.model_validate(share) for share in user.shares],
        shared_posts_ids=[share.post_id for share in user.shares],
    )


@router.get("/check-follow/{user_id}", response_model=CheckFollowResponse)
async def check_follow(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
):
    """Ids of the users a user follows."""
    following = await user_service.get_following_ids(user_id)
    return CheckFollowResponse(id=user_id, following=following)


# ═══════════════════════════════════════════════════════════════════════════════
# FOLLOWS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/in/{user_id}/follow", response_model=bool)
async def is_following(
    user_id: UUID,
    current_user_id: CurrentUserId,
    follow_user_id: UUID = Query(alias="followUserId"),
    user_service: UserService = Depends(get_user_service),
):
    """
    Whether the caller follows ``followUserId``.

    Raises:
        403: If ``user_id`` is not the caller
    """
    return await user_service.is_following(current_user_id, user_id, follow_user_id)


@router.put("/in/{user_id}/follow", response_model=UserResponse)
async def toggle_follow(
    user_id: UUID,
    data: FollowRequest,
    current_user_id: CurrentUserId,
    user_service: UserService = Depends(get_user_service),
):
    """
    Follow ``followUserId``, or unfollow if already following.

    Raises:
        400: If the caller tries to follow themselves
        403: If ``user_id`` is not the caller
        404: If the followed user does not exist
    """
    user = await user_service.toggle_follow(current_user_id, user_id, data.follow_user_id)
    return build_user_response(user)


# ═══════════════════════════════════════════════════════════════════════════════
# ACCOUNT
# ═══════════════════════════════════════════════════════════════════════════════


@router.put("/profile-edit/{user_id}", response_model=UserResponse)
async def edit_profile(
    user_id: UUID,
    data: ProfileEditRequest,
    current_user_id: CurrentUserId,
    user_service: UserService = Depends(get_user_service),
):
    """
    Update profile fields. Omitted fields are left unchanged.

    Raises:
        403: If ``user_id`` is not the caller
        409: If the new username belongs to someone else
    """
    user = await user_service.edit_profile(
        current_user_id,
        user_id,
        data.model_dump(exclude_unset=True),
    )
    return build_user_response(user)


@router.put("/edit-password/{user_id}", response_model=UserResponse)
async def edit_password(
    user_id: UUID,
    data: PasswordEditRequest,
    current_user_id: CurrentUserId,
    user_service: UserService = Depends(get_user_service),
):
    """
    Change the caller's password.

    Raises:
        400: If the new password fails the policy
        403: If ``user_id`` is not the caller
    """
    user = await user_service.edit_password(current_user_id, user_id, data.new_password)
    return build_user_response(user)


@router.delete("/profile-delete/{user_id}", response_model=UserResponse)
async def delete_profile(
    user_id: UUID,
    current_user_id: CurrentUserId,
    user_service: UserService = Depends(get_user_service),
):
    """
    Delete the caller's account, posts, comments, likes, shares and follows.

    Returns:
        The deleted account
    """
    user = await user_service.delete_user(current_user_id, user_id)
    return build_user_response(user)
