"""
API Handlers

Route handlers for the SocialHub API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from socialhub.api.handlers import (
    activity_handler,
    auth_handler,
    comment_handler,
    health_handler,
    post_handler,
    share_handler,
    upload_handler,
    user_handler,
)

__all__ = [
    "activity_handler",
    "auth_handler",
    "comment_handler",
    "health_handler",
    "post_handler",
    "share_handler",
    "upload_handler",
    "user_handler",
]
