"""Base repository shared by the entity repositories."""

from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from govflow.db.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository:
    """Async repository bound to one ORM model and one session.

    Repositories flush but never commit; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession, model_class: type[T]):
        self.session = session
        self.model_class = model_class

    async def first_where(self, *conditions, order_by=()) -> T | None:
        stmt = select(self.model_class).where(*conditions).order_by(*order_by).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_where(self, *conditions, order_by=()) -> list[T]:
        """List records matching all ``conditions`` in ``order_by`` order."""
        stmt = select(self.model_class).where(*conditions).order_by(*order_by)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, **kwargs: Any) -> T:
        """Add a new record and flush so defaults (timestamps) are populated."""
        row = self.model_class(**kwargs)
        self.session.add(row)
        await self.session.flush()
        return row
