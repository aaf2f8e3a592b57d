"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    SocialHubException (base)
       │
       ├── ValidationError (400)          ← Missing or malformed input
       ├── IntegrityMismatchError (400)   ← Cascade precondition failed
       ├── AuthenticationError (401)      ← Bad credentials
       │      └── InvalidTokenError       ← Token invalid or expired
       ├── PermissionDeniedError (403)    ← Acting on another user's resource
       ├── NotFoundError (404)            ← Resource not found
       │      ├── UserNotFoundError
       │      ├── PostNotFoundError
       │      └── CommentNotFoundError
       ├── ConflictError (409)            ← Resource already exists
       │      ├── DuplicateResourceError
       │      ├── UsernameTakenError
       │      ├── AlreadyLikedError
       │      └── AlreadySharedError
       └── ServiceUnavailableError (503)  ← External service down
              └── ExternalServiceError

Usage:
======
    from socialhub.shared.core.exceptions import NotFoundError, ValidationError

    # Raise with automatic status code
    raise PostNotFoundError(post_id)
    # Results in: {"errorMessage": "Post with id 'abc' not found", "error": {...}}

    # Raise with additional details
    raise ValidationError("Please provide the post content", details={"field": "content"})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "errorMessage": "Post with id 'abc-123' not found",
        "error": {
            "code": "NOT_FOUND",
            "message": "Post with id 'abc-123' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class SocialHubException(Exception):
    """
    Base exception for all SocialHub application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        ``errorMessage`` is kept at the top level for clients that only read
        the message; ``error`` carries the structured form.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "errorMessage": self.message,
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            },
        }


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & INTEGRITY ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(SocialHubException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class IntegrityMismatchError(SocialHubException):
    """
    Relational precondition failed (400 Bad Request).

    Raised when a delete names a parent the record is not attached to,
    e.g. removing a share through a post it does not belong to.
    """

    def __init__(
        self,
        message: str = "This action cannot be completed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="INTEGRITY_MISMATCH",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & PERMISSION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(SocialHubException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - Missing or invalid credentials
    - Unknown login name
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class InvalidTokenError(AuthenticationError):
    """Session token has a bad signature, is malformed, or has expired."""

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message=message)
        self.error_code = "INVALID_TOKEN"


class PermissionDeniedError(SocialHubException):
    """
    Permission denied error (403 Forbidden).

    Raised when the caller is authenticated but does not own the resource.
    """

    def __init__(
        self,
        message: str = "This user does not have permission to perform this task",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="PERMISSION_DENIED",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(SocialHubException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.

    Example:
        raise NotFoundError("User", user_id)
        # Message: "User with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: str) -> None:
        super().__init__(resource="User", resource_id=str(user_id))


class PostNotFoundError(NotFoundError):
    """Post not found error."""

    def __init__(self, post_id: str) -> None:
        super().__init__(resource="Post", resource_id=str(post_id))


class CommentNotFoundError(NotFoundError):
    """Comment not found error."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(resource="Comment", resource_id=str(comment_id))


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT ERRORS (409)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(SocialHubException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        error_code: str = "CONFLICT",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code=error_code,
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """
    Duplicate resource error.

    Specific case of conflict when trying to create duplicate resource.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


class UsernameTakenError(ConflictError):
    """Requested username belongs to another user."""

    def __init__(self, username: str) -> None:
        super().__init__(
            message="This username is already taken",
            error_code="USERNAME_TAKEN",
            details={"username": username},
        )


class AlreadyLikedError(ConflictError):
    """User already liked the post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            message="You liked this post before",
            error_code="ALREADY_LIKED",
            details={"post_id": str(post_id)},
        )


class AlreadySharedError(ConflictError):
    """User already shared the post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            message="This post has already been shared",
            error_code="ALREADY_SHARED",
            details={"post_id": str(post_id)},
        )


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(SocialHubException):
    """
    Service temporarily unavailable error (503).

    Raised when external services (object storage) are down.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )


class ExternalServiceError(ServiceUnavailableError):
    """
    External service error.

    More specific error for external API failures.
    """

    def __init__(
        self,
        service_name: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        msg = message or f"{service_name} service error"
        extra_details = details or {}
        extra_details["service"] = service_name
        super().__init__(message=msg, details=extra_details)
