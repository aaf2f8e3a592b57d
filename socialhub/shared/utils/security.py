"""
Security Utilities

Password hashing, password policy and session token management.

Password Hashing:
=================
Uses bcrypt (through passlib) with automatic per-call salt generation, so
hashing the same password twice yields two different strings.

Session Tokens:
===============
Uses PyJWT (HS256). Session tokens carry the identity claims
``{id, username, email, name}`` plus ``exp``/``iat``.

Usage:
======
    from socialhub.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("Passw0rd")
    SecurityUtils.verify_password("Passw0rd", hashed)  # True

    token = SecurityUtils.create_access_token(
        data={"id": "123", "username": "ada"},
        secret_key="secret",
        expires_delta=timedelta(hours=6)
    )
    payload = SecurityUtils.decode_access_token(token, "secret")
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from socialhub.shared.core.exceptions import InvalidTokenError


# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
)

# At least 6 characters with one digit, one lowercase and one uppercase letter
PASSWORD_PATTERN = re.compile(r"(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{6,}")
PASSWORD_POLICY_MESSAGE = (
    "Password must have at least 6 characters and contain at least one number, "
    "one lowercase and one uppercase letter."
)

# Claims copied from the user record into every session token
SESSION_CLAIMS = ("id", "username", "email", "name")


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt
    - Password strength policy
    - Session token creation and validation
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORDS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string (includes salt)
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
        """
        Verify password against bcrypt hash.

        Returns False instead of raising when the stored value is empty or
        not a recognizable hash.
        """
        if not plain_password or not hashed_password:
            return False
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            return False

    @staticmethod
    def is_strong_password(password: Optional[str]) -> bool:
        """Check a password against the signup policy."""
        if not password:
            return False
        return PASSWORD_PATTERN.search(password) is not None

    # ═══════════════════════════════════════════════════════════════════════════
    # SESSION TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create a signed session token.

        Args:
            data: Claims to encode (id, username, email, name)
            secret_key: Secret key for signing
            expires_delta: Token lifetime (default: 6 hours)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()

        now = datetime.now(timezone.utc)
        expire = now + (expires_delta if expires_delta else timedelta(hours=6))

        to_encode.update({
            "exp": expire,
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify a session token.

        Returns:
            Decoded token payload

        Raises:
            InvalidTokenError: If token is expired, tampered with, or malformed
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}") from e

    @staticmethod
    def build_session_claims(user) -> dict:
        """
        Extract session claims from a user record.

        The password hash and profile fields are never placed in the token.
        """
        return {
            "id": str(user.id),
            "username": user.username,
            "email": user.email,
            "name": user.name,
        }
