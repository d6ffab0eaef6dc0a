"""
Repository abstract base class and generic implementation.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List, Sequence, Type, Any
from sqlmodel import SQLModel, select, func, col
from sqlmodel.ext.asyncio.session import AsyncSession

from .paging import Direction, Page, PageRequest

T = TypeVar("T", bound=SQLModel)


class IRepository(ABC, Generic[T]):
    """Repository interface; defines standard data access API."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Persist entity; the generated id is assigned on return."""
        pass

    @abstractmethod
    async def find_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[T]:
        """Get all entities."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count entities."""
        pass

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Delete entity."""
        pass


class BaseRepository(IRepository[T]):
    """Generic repository implementation with SQLModel CRUD; subclasses add custom queries."""

    def __init__(self, session: AsyncSession, model: Type[T]):
        """Initialize repository with session and model."""
        self.session = session
        self.model = model

    async def save(self, entity: T) -> T:
        """Add entity and flush so the auto-increment id is populated."""
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def find_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID (identity map first, then database)."""
        return await self.session.get(self.model, id)

    async def exists_by_id(self, id: int) -> bool:
        return await self.find_by_id(id) is not None

    async def find_all(self) -> List[T]:
        statement = select(self.model).order_by(col(self.model.id))
        result = await self.session.exec(statement)
        return list(result.all())

    async def delete(self, entity: T) -> None:
        await self.session.delete(entity)
        await self.session.flush()

    async def delete_by_id(self, id: int) -> bool:
        """Delete entity by id; returns False when nothing matched."""
        entity = await self.find_by_id(id)
        if entity:
            await self.delete(entity)
            return True
        return False

    async def find_one(self, **filters) -> Optional[T]:
        """Find one entity by filters (e.g. username='member1')."""
        statement = self._filtered(select(self.model), filters)
        result = await self.session.exec(statement)
        return result.first()

    async def find_all_by(self, **filters) -> List[T]:
        """Find entities by filters."""
        statement = self._filtered(select(self.model), filters)
        result = await self.session.exec(statement)
        return list(result.all())

    async def count(self, **filters) -> int:
        """Count entities matching filters."""
        statement = self._filtered(select(func.count(self.model.id)), filters)
        result = await self.session.exec(statement)
        return result.one()

    async def find_page(self, page_request: PageRequest, *criteria: Any, options: Sequence[Any] = ()) -> Page[T]:
        """
        Run content query (offset/limit/order) and a separate count query over the same criteria.

        `options` are loader options (e.g. joinedload) applied to the content query only.
        """
        statement = select(self.model).where(*criteria).options(*options)
        statement = self._ordered(statement, page_request)
        statement = statement.offset(page_request.offset).limit(page_request.size)
        result = await self.session.exec(statement)
        content = list(result.all())

        count_statement = select(func.count(self.model.id)).where(*criteria)
        total = (await self.session.exec(count_statement)).one()
        return Page(content, page_request, total)

    def _filtered(self, statement, filters: dict):
        for key, value in filters.items():
            if not hasattr(self.model, key):
                raise ValueError(f"{self.model.__name__} has no attribute '{key}'")
            statement = statement.where(getattr(self.model, key) == value)
        return statement

    def _ordered(self, statement, page_request: PageRequest):
        for order in page_request.sort.orders:
            if order.property not in self.model.model_fields:
                raise ValueError(f"No property '{order.property}' found for type {self.model.__name__}")
            column = col(getattr(self.model, order.property))
            statement = statement.order_by(column.desc() if order.direction == Direction.DESC else column.asc())
        return statement
