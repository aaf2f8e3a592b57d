"""
User Service

Business logic for profiles, follows and account management.

Usage:
======
    from socialhub.shared.services.user_service import UserService

    service = UserService(db)
    user = await service.toggle_follow(current_user_id, current_user_id, other_id)
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.shared.core.exceptions import (
    UserNotFoundError,
    UsernameTakenError,
    ValidationError,
)
from socialhub.shared.core.logging import logger
from socialhub.shared.core.permissions import can_act, ensure_can_act
from socialhub.shared.models.post import Post
from socialhub.shared.models.user import User
from socialhub.shared.repositories.follow_repository import FollowRepository
from socialhub.shared.repositories.post_repository import PostRepository
from socialhub.shared.repositories.user_repository import UserRepository
from socialhub.shared.services.integrity_service import IntegrityService
from socialhub.shared.utils.security import SecurityUtils


# Columns a profile edit may touch
EDITABLE_PROFILE_FIELDS = (
    "username",
    "name",
    "image_url",
    "education",
    "occupation",
    "location",
    "about",
)


class UserService:
    """
    Service for user-related business logic.

    Handles:
    - Public profile reads
    - Follow / unfollow toggle
    - Profile and password edits
    - Account deletion (through IntegrityService)
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserService.

        Args:
            session: Async database session
        """
        self.session = session
        self.user_repo = UserRepository(session)
        self.follow_repo = FollowRepository(session)
        self.post_repo = PostRepository(session)
        self.integrity = IntegrityService(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_profile(self, user_id: UUID) -> tuple[User, list[Post], list[Post]]:
        """
        Profile page: the user with followers and following, plus its
        populated posts and liked posts, newest first.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        # Post loaders refresh author rows; the user is loaded after them
        posts = await self.post_repo.list_by_author(user_id)
        liked_posts = await self.post_repo.list_liked_by(user_id)

        user = await self.user_repo.get_profile(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user, posts, liked_posts

    async def get_account(self, user_id: UUID) -> User:
        """Account view with relation id lists."""
        user = await self.user_repo.get_account(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user

    async def get_shares(self, user_id: UUID) -> User:
        """User with the shares it made, newest first."""
        user = await self.user_repo.get_with_shares(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user

    async def get_following_ids(self, user_id: UUID) -> list[UUID]:
        """Ids of the users ``user_id`` follows."""
        if not await self.user_repo.exists(user_id):
            raise UserNotFoundError(str(user_id))
        return await self.follow_repo.list_following_ids(user_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # FOLLOWS
    # ═══════════════════════════════════════════════════════════════════════════

    async def is_following(self, requestor_id: UUID, user_id: UUID, follow_user_id: UUID) -> bool:
        """
        Whether ``user_id`` (the requestor) follows ``follow_user_id``.

        Raises:
            PermissionDeniedError: If requestor is not ``user_id``
        """
        ensure_can_act(requestor_id, user_id)

        if not await self.user_repo.exists(user_id):
            raise UserNotFoundError(str(user_id))

        return await self.follow_repo.is_following(user_id, follow_user_id)

    async def toggle_follow(self, requestor_id: UUID, user_id: UUID, follow_user_id: UUID) -> User:
        """
        Follow ``follow_user_id`` if not yet followed, otherwise unfollow.

        Returns:
            The requestor's account after the toggle

        Raises:
            PermissionDeniedError: If requestor is not ``user_id``
            ValidationError: If a user tries to follow themselves
            UserNotFoundError: If either user does not exist
        """
        ensure_can_act(requestor_id, user_id)

        if can_act(user_id, follow_user_id):
            raise ValidationError("You cannot follow yourself")

        if not await self.user_repo.exists(user_id):
            raise UserNotFoundError(str(user_id))
        if not await self.user_repo.exists(follow_user_id):
            raise UserNotFoundError(str(follow_user_id))

        if await self.follow_repo.is_following(user_id, follow_user_id):
            await self.follow_repo.remove(user_id, follow_user_id)
            logger.info("User unfollowed", user_id=str(user_id), followed_id=str(follow_user_id))
        else:
            await self.follow_repo.add(user_id, follow_user_id)
            logger.info("User followed", user_id=str(user_id), followed_id=str(follow_user_id))

        return await self.get_account(user_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # ACCOUNT
    # ═══════════════════════════════════════════════════════════════════════════

    async def edit_profile(self, requestor_id: UUID, user_id: UUID, changes: dict[str, Any]) -> User:
        """
        Apply a partial profile update. ``None`` values are ignored.

        Raises:
            PermissionDeniedError: If requestor is not ``user_id``
            UsernameTakenError: If another user already has the new username
        """
        ensure_can_act(requestor_id, user_id)

        if not await self.user_repo.exists(user_id):
            raise UserNotFoundError(str(user_id))

        updates = {
            field: changes[field]
            for field in EDITABLE_PROFILE_FIELDS
            if changes.get(field) is not None
        }

        username: Optional[str] = updates.get("username")
        if username:
            holder = await self.user_repo.get_by_username(username)
            if holder and not can_act(holder.id, user_id):
                raise UsernameTakenError(username)

        try:
            await self.user_repo.update(user_id, **updates)
        except IntegrityError as e:
            raise UsernameTakenError(username or "") from e

        logger.info("Profile updated", user_id=str(user_id), fields=sorted(updates))

        return await self.get_account(user_id)

    async def edit_password(self, requestor_id: UUID, user_id: UUID, new_password: str) -> User:
        """
        Replace the password hash.

        ``new_password`` has already been checked against the policy.
        """
        ensure_can_act(requestor_id, user_id)

        if not await self.user_repo.exists(user_id):
            raise UserNotFoundError(str(user_id))

        await self.user_repo.update(user_id, password_hash=SecurityUtils.hash_password(new_password))

        logger.info("Password changed", user_id=str(user_id))

        return await self.get_account(user_id)

    async def delete_user(self, requestor_id: UUID, user_id: UUID) -> User:
        """
        Delete an own account and everything that depends on it.

        Returns:
            The account as it was before deletion
        """
        ensure_can_act(requestor_id, user_id)

        user = await self.get_account(user_id)

        await self.integrity.delete_user(user_id)

        return user
