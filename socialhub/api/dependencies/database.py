"""
Database Dependency

FastAPI dependency for database sessions.

This module re-exports the get_db dependency that yields async database
sessions to route handlers. The session is committed on success and
rolled back on error.

Usage:
======
    from socialhub.api.dependencies.database import DbSession

    @router.get("/posts")
    async def list_posts(db: DbSession):
        return await PostRepository(db).list_populated()
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.shared.db import get_db


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]

__all__ = ["get_db", "DbSession"]
