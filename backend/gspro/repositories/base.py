"""
Shared CRUD plumbing for the table repositories.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gspro.core.errors import NotFoundError
from gspro.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Async CRUD operations for a single model.

    Subclasses set ``model`` and ``entity_name`` and add their own queries.
    Writes are flushed but never committed; the caller owns the transaction.

    Attributes:
        session: SQLAlchemy async session for database operations
    """

    model: Type[ModelT]
    entity_name: str = "Record"

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, record_id: str) -> Optional[ModelT]:
        stmt = select(self.model).where(self.model.id == record_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_raise(self, record_id: str) -> ModelT:
        """
        Retrieve a record by ID.

        Raises:
            NotFoundError: If no record has this ID
        """
        record = await self.get(record_id)
        if record is None:
            raise NotFoundError(self.entity_name, record_id)
        return record

    async def add(self, record: ModelT) -> ModelT:
        self.session.add(record)
        await self.session.flush()
        return record

    async def update(self, record: ModelT, changes: dict[str, Any]) -> ModelT:
        """
        Apply ``changes`` to ``record`` and flush.

        Keys that are not mapped columns are ignored.
        """
        columns = {column.key for column in self.model.__table__.columns}
        for key, value in changes.items():
            if key in columns and key != "id":
                setattr(record, key, value)
        await self.session.flush()
        return record

    async def delete(self, record: ModelT) -> None:
        await self.session.delete(record)
        await self.session.flush()
