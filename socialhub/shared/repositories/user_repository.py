"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods.

Common Operations:
==================
- get_by_email()        → Find user by email address
- get_by_username()     → Find user by username
- get_by_login_name()   → Find user by username OR email (login form)
- get_account()         → User with every relation id list loaded
- get_profile()         → User with followers and following loaded

Usage Example:
==============
    async def authenticate_user(db: AsyncSession, login_name: str, password: str):
        repo = UserRepository(db)
        user = await repo.get_by_login_name(login_name)
        if not user:
            raise AuthenticationError("User not found")
        # Verify password...
        return user
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from socialhub.shared.repositories.base import BaseRepository
from socialhub.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.

    Provides methods for common user queries beyond basic CRUD:
    - Looking up users by email or username
    - Checking username / email availability
    - Loading the derived relation lists for responses
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        SQL Generated:
            SELECT * FROM users WHERE lower(email) = 'user@example.com'
        """
        result = await self.session.execute(
            select(User).where(func.lower(User.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        SQL Generated:
            SELECT * FROM users WHERE username = 'ada'
        """
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_by_login_name(self, login_name: str) -> Optional[User]:
        """
        Get user by username or email, whichever matches.

        Args:
            login_name: Either the username or the email typed at login

        SQL Generated:
            SELECT * FROM users WHERE username = 'x' OR lower(email) = lower('x')
        """
        result = await self.session.execute(
            select(User).where(
                or_(
                    User.username == login_name,
                    func.lower(User.email) == login_name.strip().lower(),
                )
            )
        )
        return result.scalars().first()

    async def email_exists(self, email: str) -> bool:
        """Check if email is already registered."""
        user = await self.get_by_email(email)
        return user is not None

    async def username_exists(self, username: str) -> bool:
        """Check if username is already taken."""
        user = await self.get_by_username(username)
        return user is not None

    # ═══════════════════════════════════════════════════════════════════════════
    # POPULATED READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_account(self, user_id: UUID) -> Optional[User]:
        """
        Get a user with the relations its account view lists by id.

        Loads posts, liked posts, shares, following and followers.
        """
        result = await self.session.execute(
            select(User)
            .where(User.id == user_id)
            .options(
                selectinload(User.posts),
                selectinload(User.liked_posts),
                selectinload(User.shares),
                selectinload(User.following),
                selectinload(User.followers),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_profile(self, user_id: UUID) -> Optional[User]:
        """
        Get a user for the public profile page.

        Loads followers and following only. Posts and liked posts come from
        PostRepository and must be read before this query.
        """
        result = await self.session.execute(
            select(User)
            .where(User.id == user_id)
            .options(
                selectinload(User.following),
                selectinload(User.followers),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_with_shares(self, user_id: UUID) -> Optional[User]:
        """Get a user with the shares it made."""
        result = await self.session.execute(
            select(User)
            .where(User.id == user_id)
            .options(selectinload(User.shares))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

