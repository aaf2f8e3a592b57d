"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /api, /health, /ready, /live          → Liveness and health checks
    /auth                                 → Signup, login, verify, Google sign-in
    /posts, /post, /create-post, ...      → Posts and likes
    /share-post, /delete-share            → Shares
    /comments, /create-comment, ...       → Comments
    /in, /check-share, /profile-edit, ... → Profiles, follows, accounts
    /in/{user_id}/*Activity               → Activity feeds
    /upload                               → Image upload

Usage:
======
    from socialhub.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

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


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Authentication endpoints
    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
    )

    # Posts and likes
    app.include_router(
        post_handler.router,
        tags=["Posts"],
    )

    # Shares
    app.include_router(
        share_handler.router,
        tags=["Shares"],
    )

    # Comments
    app.include_router(
        comment_handler.router,
        tags=["Comments"],
    )

    # Profiles, follows and accounts
    app.include_router(
        user_handler.router,
        tags=["Users"],
    )

    # Activity feeds
    app.include_router(
        activity_handler.router,
        tags=["Activity"],
    )

    # Image upload
    app.include_router(
        upload_handler.router,
        tags=["Upload"],
    )
