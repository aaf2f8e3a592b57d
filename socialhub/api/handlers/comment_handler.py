"""
Comment Handler

    GET    /comments/{post_id}              → Comments of a post
    POST   /create-comment/{post_id}        → Comment on a post
    PUT    /comment-update/{comment_id}     → Edit an own comment
    DELETE /comment/{comment_id}            → Delete an own comment
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from socialhub.shared.schemas.comment import CommentCreate, CommentResponse, build_comment_response
from socialhub.shared.schemas.post import PostResponse, build_post_response
from socialhub.shared.services.comment_service import CommentService
from socialhub.api.dependencies.auth import CurrentUserId
from socialhub.api.dependencies.services import get_comment_service


router = APIRouter()


@router.get("/comments/{post_id}", response_model=list[CommentResponse])
async def list_comments(
    post_id: UUID,
    comment_service: CommentService = Depends(get_comment_service),
):
    """List the comments of a post, oldest first."""
    comments = await comment_service.list_comments(post_id)
    return [build_comment_response(comment) for comment in comments]


@router.post(
    "/create-comment/{post_id}",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    data: CommentCreate,
    current_user_id: CurrentUserId,
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    Comment on a post.

    Returns:
        The post with the new comment
    """
    post = await comment_service.create_comment(current_user_id, post_id, data.content)
    return build_post_response(post)


@router.put("/comment-update/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: UUID,
    data: CommentCreate,
    current_user_id: CurrentUserId,
    comment_service: CommentService = Depends(get_comment_service),
):
    """Edit an own comment."""
    comment = await comment_service.update_comment(current_user_id, comment_id, data.content)
    return build_comment_response(comment)


@router.delete("/comment/{comment_id}", response_model=CommentResponse)
async def delete_comment(
    comment_id: UUID,
    current_user_id: CurrentUserId,
    comment_service: CommentService = Depends(get_comment_service),
):
    """Delete an own comment."""
    comment = await comment_service.delete_comment(current_user_id, comment_id)
    return build_comment_response(comment)
