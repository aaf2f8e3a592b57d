"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema (camelCase aliases), joined-user brief, error / health responses
- user: Authentication, account and profile schemas
- post: Post requests and the populated post response
- comment: Comment requests and responses
- share: Share requests and responses
- upload: Upload response

Usage:
======
    from socialhub.shared.schemas.user import SignupRequest, AuthTokenResponse
    from socialhub.shared.schemas.post import PostResponse, build_post_response
"""

from socialhub.shared.schemas.common import (
    BaseSchema,
    UserBrief,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from socialhub.shared.schemas.comment import (
    CommentCreate,
    CommentResponse,
    build_comment_response,
)
from socialhub.shared.schemas.share import (
    ShareCreateRequest,
    DeleteShareRequest,
    ShareResponse,
)
from socialhub.shared.schemas.post import (
    PostCreate,
    PostResponse,
    build_post_response,
)
from socialhub.shared.schemas.user import (
    SignupRequest,
    LoginRequest,
    GoogleAuthRequest,
    AuthTokenResponse,
    SessionClaimsResponse,
    ProfileEditRequest,
    PasswordEditRequest,
    FollowRequest,
    UserResponse,
    ProfileResponse,
    CheckShareResponse,
    CheckFollowResponse,
    build_user_response,
    build_profile_response,
)
from socialhub.shared.schemas.upload import UploadResponse

__all__ = [
    # Common
    "BaseSchema",
    "UserBrief",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Comment
    "CommentCreate",
    "CommentResponse",
    "build_comment_response",
    # Share
    "ShareCreateRequest",
    "DeleteShareRequest",
    "ShareResponse",
    # Post
    "PostCreate",
    "PostResponse",
    "build_post_response",
    # User
    "SignupRequest",
    "LoginRequest",
    "GoogleAuthRequest",
    "AuthTokenResponse",
    "SessionClaimsResponse",
    "ProfileEditRequest",
    "PasswordEditRequest",
    "FollowRequest",
    "UserResponse",
    "ProfileResponse",
    "CheckShareResponse",
    "CheckFollowResponse",
    "build_user_response",
    "build_profile_response",
    # Upload
    "UploadResponse",
]
