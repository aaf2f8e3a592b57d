"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
external services, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ Authorization policy
                ↘ IntegrityService (cascading deletes)
                ↘ Object storage

Services should:
- Contain business logic and validation
- Check ownership before any mutation
- Coordinate multiple repositories if needed
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Signup, login, Google sign-in, session tokens
- PostService: Posts and likes
- CommentService: Comments
- ShareService: Shares
- UserService: Profiles, follows, account edits and deletion
- ActivityService: Per-user activity feeds
- IntegrityService: Cascading deletes
- UploadService: Image uploads

Usage:
======
    from socialhub.shared.services import AuthService, PostService

    service = AuthService(db)
    token = await service.login("ada", "Passw0rd")
"""

from socialhub.shared.services.auth_service import AuthService
from socialhub.shared.services.integrity_service import IntegrityService
from socialhub.shared.services.post_service import PostService
from socialhub.shared.services.comment_service import CommentService
from socialhub.shared.services.share_service import ShareService
from socialhub.shared.services.user_service import UserService
from socialhub.shared.services.activity_service import ActivityService
from socialhub.shared.services.upload_service import UploadService

__all__ = [
    "AuthService",
    "IntegrityService",
    "PostService",
    "CommentService",
    "ShareService",
    "UserService",
    "ActivityService",
    "UploadService",
]
