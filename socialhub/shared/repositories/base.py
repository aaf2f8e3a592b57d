"""
Base Repository

This module provides a generic base repository with common CRUD operations.
All entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)          → Fetch single record by UUID
- exists()         → Check if record exists
- create()         → Create new record
- update()         → Update existing record
- delete()         → Hard delete record
- delete_where()   → Bulk delete by criteria

Generic Type Pattern:
=====================
    class UserRepository(BaseRepository[User]):
        pass

    repo = UserRepository(db)
    user = await repo.get(id)  # Returns User, not Any!

flush() vs commit():
====================
- flush(): Sends SQL to database but doesn't commit transaction
  - Changes are visible within the same session
  - Can be rolled back if error occurs later

- commit(): Permanently saves all changes
  - Called by get_db() after request handler completes
  - Repository methods use flush() to allow request-level transactions

Bulk deletes:
=============
delete_where() issues a single DELETE statement and skips the ORM unit of
work. Cascades in this application are explicit (see IntegrityService), so
related rows are removed by their own repositories before the parent row.
Instances already loaded in the session are not reconciled; callers build
their responses before deleting.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import delete as sql_delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from socialhub.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session

    Example:
        class PostRepository(BaseRepository[Post]):
            def __init__(self, session: AsyncSession):
                super().__init__(Post, session)
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its UUID.

        Args:
            record_id: The UUID of the record to fetch

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM posts WHERE id = '550e8400-...'
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def exists(self, record_id: UUID) -> bool:
        """Check if a record exists without loading it."""
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Creates a new instance of the model, adds it to the session,
        and flushes to get the generated ID and defaults.

        SQL Generated:
            INSERT INTO posts (user_id, content, ...)
            VALUES ('...', 'Hello', ...)
        """
        instance = self.model(**kwargs)

        # Add to session (marks as pending insert)
        self.session.add(instance)

        # Flush: send INSERT to database (but don't commit yet)
        await self.session.flush()

        # Refresh: reload the instance from database
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(
        self,
        record_id: UUID,
        **kwargs: Any,
    ) -> Optional[ModelType]:
        """
        Update a record by ID.

        Only updates fields that are provided and not None.

        Returns:
            Updated model instance, or None if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        # Apply updates (skip None values to allow partial updates)
        for field, value in kwargs.items():
            if hasattr(instance, field) and value is not None:
                setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: UUID) -> bool:
        """
        Hard delete a record by ID.

        Returns:
            True if deleted, False if not found

        SQL Generated:
            DELETE FROM posts WHERE id = '...'
        """
        return await self.delete_where(self.model.id == record_id) > 0

    async def delete_where(self, *criteria: Any) -> int:
        """
        Delete every row matching ``criteria`` in one statement.

        Returns:
            Number of rows deleted
        """
        result = await self.session.execute(
            sql_delete(self.model)
            .where(*criteria)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
        return result.rowcount or 0
