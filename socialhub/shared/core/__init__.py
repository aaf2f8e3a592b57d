"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions
- Authorization policy

Usage:
======
    from socialhub.shared.core.logging import logger, get_logger
    from socialhub.shared.core.exceptions import SocialHubException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from socialhub.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from socialhub.shared.core.exceptions import (
    SocialHubException,
    ValidationError,
    IntegrityMismatchError,
    AuthenticationError,
    InvalidTokenError,
    PermissionDeniedError,
    NotFoundError,
    UserNotFoundError,
    PostNotFoundError,
    CommentNotFoundError,
    ConflictError,
    DuplicateResourceError,
    UsernameTakenError,
    AlreadyLikedError,
    AlreadySharedError,
    ServiceUnavailableError,
    ExternalServiceError,
)
from socialhub.shared.core.permissions import can_act, ensure_can_act, canonical_id

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "SocialHubException",
    "ValidationError",
    "IntegrityMismatchError",
    "AuthenticationError",
    "InvalidTokenError",
    "PermissionDeniedError",
    "NotFoundError",
    "UserNotFoundError",
    "PostNotFoundError",
    "CommentNotFoundError",
    "ConflictError",
    "DuplicateResourceError",
    "UsernameTakenError",
    "AlreadyLikedError",
    "AlreadySharedError",
    "ServiceUnavailableError",
    "ExternalServiceError",
    # Authorization
    "can_act",
    "ensure_can_act",
    "canonical_id",
]
