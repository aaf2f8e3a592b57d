"""
User Schemas

Request/response models for user and authentication endpoints.

Two user views exist:
- UserResponse: the account itself, relations listed by id. Returned by
  the mutating user routes (like, follow, profile edit, ...).
- ProfileResponse: the public profile page with posts and liked posts
  populated and followers / following joined as name + image.

Neither view ever carries the password hash.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from socialhub.shared.models.post import Post
from socialhub.shared.models.user import User
from socialhub.shared.schemas.common import BaseSchema, UserBrief
from socialhub.shared.schemas.post import PostResponse, build_post_response
from socialhub.shared.schemas.share import ShareResponse
from socialhub.shared.utils.security import PASSWORD_POLICY_MESSAGE, SecurityUtils


def _required(value: Optional[str], message: str) -> str:
    if not value or not value.strip():
        raise ValueError(message)
    return value


def _strong_password(value: str) -> str:
    if not SecurityUtils.is_strong_password(value):
        raise ValueError(PASSWORD_POLICY_MESSAGE)
    return value


def canonical_email(value: str) -> str:
    """Emails are stored and compared lowercased."""
    return value.strip().lower()


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION
# ═══════════════════════════════════════════════════════════════════════════════


class SignupRequest(BaseSchema):
    """Schema for user registration."""

    username: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)
    name: str = Field(default="", validate_default=True)
    email: EmailStr

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return canonical_email(value)

    @field_validator("username")
    @classmethod
    def username_required(cls, value: str) -> str:
        return _required(value, "Please provide username").strip()

    @field_validator("password")
    @classmethod
    def password_policy(cls, value: str) -> str:
        return _strong_password(_required(value, "Please provide password"))

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        return _required(value, "Please provide name")


class LoginRequest(BaseSchema):
    """Schema for user login: username or email plus password."""

    login_name: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)

    @field_validator("login_name", "password")
    @classmethod
    def not_blank(cls, value: str) -> str:
        return _required(value, "Provide username or email and password.")


class GoogleAuthRequest(BaseSchema):
    """
    Profile posted by the client after a Google sign-in.

    The profile is trusted as sent; no Google token is checked.
    """

    email: EmailStr
    username: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return canonical_email(value)


class AuthTokenResponse(BaseSchema):
    """Schema for authentication response, serialized as ``authToken``."""

    auth_token: str


class SessionClaimsResponse(BaseSchema):
    """Decoded session token."""

    id: str
    username: str
    email: str
    name: str
    exp: Optional[int] = None
    iat: Optional[int] = None


# ═══════════════════════════════════════════════════════════════════════════════
# ACCOUNT MUTATIONS
# ═══════════════════════════════════════════════════════════════════════════════


class ProfileEditRequest(BaseSchema):
    """Partial profile update; omitted fields keep their value."""

    username: Optional[str] = None
    name: Optional[str] = None
    image_url: Optional[str] = None
    education: Optional[str] = None
    occupation: Optional[str] = None
    location: Optional[str] = None
    about: Optional[str] = None

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _required(value, "Please provide username").strip()


class PasswordEditRequest(BaseSchema):
    """Schema for changing the password."""

    new_password: str = Field(default="", validate_default=True)

    @field_validator("new_password")
    @classmethod
    def password_policy(cls, value: str) -> str:
        return _strong_password(_required(value, "Please provide password"))


class FollowRequest(BaseSchema):
    """Body of the follow toggle."""

    follow_user_id: UUID


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class UserResponse(BaseSchema):
    """Account view: profile fields plus relation id lists."""

    id: UUID
    username: str
    email: str
    name: str
    about: Optional[str] = None
    location: Optional[str] = None
    education: Optional[str] = None
    occupation: Optional[str] = None
    image_url: Optional[str] = None
    posts: list[UUID] = Field(default_factory=list)
    liked_posts: list[UUID] = Field(default_factory=list)
    shared_posts: list[UUID] = Field(default_factory=list)
    following: list[UUID] = Field(default_factory=list)
    followers: list[UUID] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ProfileResponse(BaseSchema):
    """Public profile page."""

    id: UUID
    username: str
    name: str
    about: Optional[str] = None
    location: Optional[str] = None
    education: Optional[str] = None
    occupation: Optional[str] = None
    image_url: Optional[str] = None
    posts: list[PostResponse] = Field(default_factory=list)
    liked_posts: list[PostResponse] = Field(default_factory=list)
    followers: list[UserBrief] = Field(default_factory=list)
    following: list[UserBrief] = Field(default_factory=list)


class CheckShareResponse(BaseSchema):
    """Shares made by a user and the ids of the posts they point to."""

    id: UUID
    shares: list[ShareResponse] = Field(default_factory=list)
    shared_posts_ids: list[UUID] = Field(default_factory=list)


class CheckFollowResponse(BaseSchema):
    """Ids of the users a user follows."""

    id: UUID
    following: list[UUID] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════════
# BUILDERS
# ═══════════════════════════════════════════════════════════════════════════════


def build_user_response(user: User) -> UserResponse:
    """Build the account view from a user loaded by ``get_account``."""
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        name=user.name,
        about=user.about,
        location=user.location,
        education=user.education,
        occupation=user.occupation,
        image_url=user.image_url,
        posts=[post.id for post in user.posts],
        liked_posts=[post.id for post in user.liked_posts],
        shared_posts=[share.id for share in user.shares],
        following=[followed.id for followed in user.following],
        followers=[follower.id for follower in user.followers],
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def build_profile_response(
    user: User,
    posts: list[Post],
    liked_posts: list[Post],
) -> ProfileResponse:
    """
    Build the profile page.

    ``user`` comes from ``UserRepository.get_profile``; ``posts`` and
    ``liked_posts`` are loaded with ``post_loader_options()``.
    """
    return ProfileResponse(
        id=user.id,
        username=user.username,
        name=user.name,
        about=user.about,
        location=user.location,
        education=user.education,
        occupation=user.occupation,
        image_url=user.image_url,
        posts=[build_post_response(post) for post in posts],
        liked_posts=[build_post_response(post) for post in liked_posts],
        followers=[UserBrief.model_validate(follower) for follower in user.followers],
        following=[UserBrief.model_validate(followed) for followed in user.following],
    )
