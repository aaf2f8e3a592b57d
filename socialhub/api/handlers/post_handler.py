"""
Post Handler

Endpoints for reading, writing, liking and deleting posts.

Endpoints:
==========
    GET    /posts                    → All posts, newest first
    GET    /post/{post_id}           → One post
    POST   /create-post/{user_id}    → Create a post (owner only)
    PUT    /post-update/{post_id}    → Edit a post (author only)
    PUT    /post-like/{post_id}      → Like a post
    PUT    /post-dislike/{post_id}   → Remove a like
    DELETE /post-delete/{post_id}    → Delete a post and its dependents
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from socialhub.shared.schemas.post import PostCreate, PostResponse, build_post_response
from socialhub.shared.schemas.user import UserResponse, build_user_response
from socialhub.shared.services.post_service import PostService
from socialhub.api.dependencies.auth import CurrentUserId
from socialhub.api.dependencies.services import get_post_service


router = APIRouter()


@router.get("/posts", response_model=list[PostResponse])
async def list_posts(
    post_service: PostService = Depends(get_post_service),
):
    """
    List every post with author, likes, comments and shares.
    """
    posts = await post_service.list_posts()
    return [build_post_response(post) for post in posts]


@router.get("/post/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: UUID,
    post_service: PostService = Depends(get_post_service),
):
    """
    Get one post.

    Raises:
        404: If post not found
    """
    post = await post_service.get_post(post_id)
    return build_post_response(post)


@router.post(
    "/create-post/{user_id}",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    user_id: UUID,
    data: PostCreate,
    current_user_id: CurrentUserId,
    post_service: PostService = Depends(get_post_service),
):
    """
    Create a post on the caller's own account.

    Raises:
        400: If content is missing
        403: If ``user_id`` is not the caller
    """
    post = await post_service.create_post(
        requestor_id=current_user_id,
        user_id=user_id,
        content=data.content,
        image_url=data.image_url,
    )
    return build_post_response(post)


@router.put("/post-update/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: UUID,
    data: PostCreate,
    current_user_id: CurrentUserId,
    post_service: PostService = Depends(get_post_service),
):
    """
    Edit content and image of an own post.

    Raises:
        403: If the caller is not the author
        404: If post not found
    """
    post = await post_service.update_post(
        requestor_id=current_user_id,
        post_id=post_id,
        content=data.content,
        image_url=data.image_url,
    )
    return build_post_response(post)


@router.put("/post-like/{post_id}", response_model=UserResponse)
async def like_post(
    post_id: UUID,
    current_user_id: CurrentUserId,
    post_service: PostService = Depends(get_post_service),
):
    """
    Like a post.

    Returns:
        The caller's account with the updated liked posts

    Raises:
        404: If post not found
        409: If the caller already likes the post
    """
    user = await post_service.like_post(current_user_id, post_id)
    return build_user_response(user)


@router.put("/post-dislike/{post_id}", response_model=UserResponse)
async def dislike_post(
    post_id: UUID,
    current_user_id: CurrentUserId,
    post_service: PostService = Depends(get_post_service),
):
    """
    Remove the caller's like. Disliking a post that isn't liked is a no-op.
    """
    user = await post_service.dislike_post(current_user_id, post_id)
    return build_user_response(user)


@router.delete("/post-delete/{post_id}", response_model=PostResponse)
async def delete_post(
    post_id: UUID,
    current_user_id: CurrentUserId,
    post_service: PostService = Depends(get_post_service),
):
    """
    Delete an own post together with its likes, comments and shares.

    Returns:
        The deleted post
    """
    post = await post_service.delete_post(current_user_id, post_id)
    return build_post_response(post)
