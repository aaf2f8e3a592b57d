"""
Database Module

This module provides database connectivity and session management.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request; commit on success, rollback on error)
        │  Passed to Services → Repositories
        ▼
    UserRepository / PostRepository / CommentRepository /
    ShareRepository / PostLikeRepository / FollowRepository
        │  SQL
        ▼
    PostgreSQL (SQLite for tests)

Usage in FastAPI:
=================
    from fastapi import Depends
    from socialhub.shared.db import get_db
    from socialhub.shared.repositories import UserRepository

    @app.get("/users/{user_id}")
    async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
        return await UserRepository(db).get(user_id)
"""

from socialhub.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
