"""
Authentication Service

Business logic for user authentication and registration.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Security utilities (hashing, tokens)
- Domain logic

Usage:
======
    from socialhub.shared.services.auth_service import AuthService

    service = AuthService(db)
    token = await service.signup(username, password, name, email)
"""

import secrets
from datetime import timedelta
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.config.settings import settings
from socialhub.shared.repositories.user_repository import UserRepository
from socialhub.shared.utils.security import SecurityUtils
from socialhub.shared.core.exceptions import DuplicateResourceError, AuthenticationError
from socialhub.shared.core.logging import logger
from socialhub.shared.models.user import User


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with username/email/password
    - User authentication by username or email
    - Google sign-in (find or create by email)
    - Session token generation

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = UserRepository(session)

    def issue_token(self, user: User) -> str:
        """
        Sign a session token for ``user``.

        Claims are ``{id, username, email, name}``; lifetime comes from
        ACCESS_TOKEN_EXPIRE_MINUTES.
        """
        return SecurityUtils.create_access_token(
            data=SecurityUtils.build_session_claims(user),
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )

    async def signup(
        self,
        username: str,
        password: str,
        name: str,
        email: str,
    ) -> str:
        """
        Register a new user and sign them in.

        Args:
            username: Unique handle
            password: Plain text password (already checked against the policy)
            name: Display name
            email: Unique email address

        Returns:
            Session token for the new account

        Raises:
            DuplicateResourceError: If username or email is already registered
        """
        if await self.repo.username_exists(username) or await self.repo.email_exists(email):
            raise DuplicateResourceError("User already exists.")

        # Hash password using bcrypt
        password_hash = SecurityUtils.hash_password(password)

        try:
            user = await self.repo.create(
                username=username,
                email=email,
                name=name,
                password_hash=password_hash,
                image_url=settings.DEFAULT_PROFILE_IMAGE_URL,
            )
        except IntegrityError as e:
            # Concurrent signup with the same username or email
            raise DuplicateResourceError("User already exists.") from e

        logger.info("User registered", user_id=str(user.id), username=user.username)

        return self.issue_token(user)

    async def login(self, login_name: str, password: str) -> str:
        """
        Authenticate user and generate token.

        Args:
            login_name: Username or email
            password: Plain text password

        Returns:
            Session token

        Raises:
            AuthenticationError: If the user is unknown or the password is wrong
        """
        user = await self.repo.get_by_login_name(login_name)
        if not user:
            raise AuthenticationError("User not found.")

        if not SecurityUtils.verify_password(password, user.password_hash):
            logger.info("Login rejected", user_id=str(user.id))
            raise AuthenticationError("Unable to authenticate the user")

        return self.issue_token(user)

    async def google_auth(
        self,
        email: str,
        username: Optional[str] = None,
        name: Optional[str] = None,
        password: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> str:
        """
        Sign in with a profile coming from Google.

        An existing account with the same email is reused as-is. Otherwise a
        new account is created: username falls back to the local part of the
        email, name falls back to the username, and a missing password is
        replaced by a random one so the account can't be password-logged
        into until the owner sets one.

        Returns:
            Session token

        Raises:
            DuplicateResourceError: If a new account's username is taken
        """
        user = await self.repo.get_by_email(email)
        if user:
            return self.issue_token(user)

        username = username or email.split("@", 1)[0]
        if await self.repo.username_exists(username):
            raise DuplicateResourceError("User already exists.")

        try:
            user = await self.repo.create(
                username=username,
                email=email,
                name=name or username,
                password_hash=SecurityUtils.hash_password(password or secrets.token_urlsafe(32)),
                image_url=image_url or settings.DEFAULT_PROFILE_IMAGE_URL,
            )
        except IntegrityError as e:
            raise DuplicateResourceError("User already exists.") from e

        logger.info("User registered via Google", user_id=str(user.id), username=user.username)

        return self.issue_token(user)
