"""
Base repository.

Repositories own all data access for one model. Every write is a single-row
operation committed immediately, so a service that performs two writes gets
two independent commits.
"""
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from courtbook.core.database import Base

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelT]):
    """Common CRUD operations for a single model."""

    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, id: str) -> Optional[ModelT]:
        result = await self.db.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def list_all(self) -> List[ModelT]:
        result = await self.db.execute(select(self.model))
        return list(result.scalars().all())

    async def count(self, *criteria: Any) -> int:
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def create(self, **fields: Any) -> ModelT:
        instance = self.model(**fields)
        self.db.add(instance)
        await self.db.commit()
        await self.db.refresh(instance)
        logger.debug(f"Inserted {self.model.__name__} {instance.id}")
        return instance

    async def update_by_id(self, id: str, **fields: Any) -> bool:
        """Set ``fields`` on one row. Returns False when no row matched."""
        result = await self.db.execute(
            update(self.model).where(self.model.id == id).values(**fields)
        )
        await self.db.commit()
        return result.rowcount > 0

    async def delete_by_id(self, id: str) -> bool:
        result = await self.db.execute(delete(self.model).where(self.model.id == id))
        await self.db.commit()
        return result.rowcount > 0
