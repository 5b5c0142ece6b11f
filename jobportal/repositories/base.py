"""
Generic repositories the entity repositories build on.

``BaseRepository`` covers single-table CRUD by primary key;
``UserJobRepository`` covers the tables keyed by a (user, job) pair.
"""
from typing import Any, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select, func, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobportal.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


def like_pattern(value: str) -> str:
    """Build a LIKE pattern matching ``value`` as a literal substring (escape char ``\\``)."""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class BaseRepository(Generic[ModelType]):
    """
    CRUD for one model.

    Writes only flush; committing is the calling service's job, so several
    writes can share one transaction.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get_by_id(self, db: AsyncSession, id: UUID) -> Optional[ModelType]:
        return await db.get(self.model, id)

    async def count(self, db: AsyncSession, *criteria: Any) -> int:
        query = select(func.count()).select_from(self.model)
        if criteria:
            query = query.where(*criteria)
        return (await db.execute(query)).scalar() or 0

    async def create(self, db: AsyncSession, **values: Any) -> ModelType:
        """Insert a row and reload it so defaults (id, created_at) are populated."""
        instance = self.model(**values)
        db.add(instance)
        await db.flush()
        await db.refresh(instance)
        return instance

    async def update(self, db: AsyncSession, instance: ModelType, **values: Any) -> ModelType:
        """Assign known columns on an existing row. Unknown keys are ignored."""
        for key, value in values.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        await db.flush()
        await db.refresh(instance)
        return instance

    async def delete(self, db: AsyncSession, id: UUID) -> bool:
        result = await db.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0


class UserJobRepository(BaseRepository[ModelType]):
    """
    A table of (user_id, job_id) rows with a ``job`` relationship, such as
    applications and bookmarks.
    """

    def _pair(self, user_id: UUID, job_id: UUID):
        return (self.model.user_id == user_id, self.model.job_id == job_id)

    async def find_by_user_and_job(
        self,
        db: AsyncSession,
        user_id: UUID,
        job_id: UUID,
    ) -> Optional[ModelType]:
        result = await db.execute(select(self.model).where(*self._pair(user_id, job_id)))
        return result.scalars().first()

    async def find_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[ModelType]:
        """A user's rows with their jobs loaded, newest first."""
        result = await db.execute(
            select(self.model)
            .options(selectinload(self.model.job))
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc())
        )
        return list(result.scalars().all())

    async def delete_by_user_and_job(
        self,
        db: AsyncSession,
        user_id: UUID,
        job_id: UUID,
    ) -> int:
        """Remove every row for the pair. Returns rows deleted."""
        result = await db.execute(delete(self.model).where(*self._pair(user_id, job_id)))
        return result.rowcount

    async def count_for_user(self, db: AsyncSession, user_id: UUID) -> int:
        return await self.count(db, self.model.user_id == user_id)
