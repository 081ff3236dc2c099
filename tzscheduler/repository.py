"""
Generic repository over a single SQLAlchemy model.

Exposes exactly the store operations the schedule services need: point
lookup, equality-filtered select, insert, filtered update, filtered delete,
count and offset/limit pagination. Filters are keyword arguments mapped to
column equality.

Repositories flush but never commit; the caller's ``transaction()`` decides
when a unit of work is made durable.
"""

from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from .database import Base

ModelType = TypeVar("ModelType", bound=Base)


class SqlRepository(Generic[ModelType]):
    """
    Equality-filter CRUD for one model.

    Example:
        class ScheduleRepository(SqlRepository[Schedule]):
            model = Schedule
    """

    model: Type[ModelType]
    default_order: Sequence[str] = ("created_at", "id")

    def __init__(self, db: Session):
        self.db = db

    def _where(self, filters: dict[str, Any]) -> list:
        clauses = []
        for key, value in filters.items():
            column = getattr(self.model, key, None)
            if column is None:
                raise AttributeError(f"{self.model.__name__} has no column '{key}'")
            clauses.append(column == value)
        return clauses

    def _order(self, order_by: Optional[Sequence[str]]) -> list:
        return [getattr(self.model, name) for name in (order_by or self.default_order)]

    def get(self, id: str) -> Optional[ModelType]:
        """Point lookup by primary key"""
        return self.db.get(self.model, id)

    def find_one(self, **filters) -> Optional[ModelType]:
        """First row matching every filter, or None"""
        stmt = select(self.model).where(*self._where(filters)).limit(1)
        return self.db.execute(stmt).scalars().first()

    def find(self, order_by: Optional[Sequence[str]] = None, **filters) -> list[ModelType]:
        """All rows matching every filter, in a deterministic order"""
        stmt = select(self.model).where(*self._where(filters)).order_by(*self._order(order_by))
        return list(self.db.execute(stmt).scalars().all())

    def paginate(
        self,
        offset: int,
        limit: int,
        order_by: Optional[Sequence[str]] = None,
        **filters,
    ) -> list[ModelType]:
        """One page of rows matching every filter"""
        stmt = (
            select(self.model)
            .where(*self._where(filters))
            .order_by(*self._order(order_by))
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def count(self, **filters) -> int:
        stmt = select(func.count()).select_from(self.model).where(*self._where(filters))
        return self.db.execute(stmt).scalar_one()

    def insert(self, **values) -> ModelType:
        obj = self.model(**values)
        self.db.add(obj)
        self.db.flush()
        return obj

    def update_where(self, values: dict[str, Any], **filters) -> int:
        """Set ``values`` on every row matching the filters; returns rows affected"""
        stmt = (
            update(self.model)
            .where(*self._where(filters))
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        return self.db.execute(stmt).rowcount

    def delete_where(self, **filters) -> int:
        """Delete every row matching the filters; returns rows affected"""
        stmt = (
            delete(self.model)
            .where(*self._where(filters))
            .execution_options(synchronize_session="fetch")
        )
        return self.db.execute(stmt).rowcount


class ChildRepository(SqlRepository[ModelType]):
    """Rows that belong to exactly one schedule through ``schedule_id``"""

    def list_for_schedule(self, schedule_id: str) -> list[ModelType]:
        return self.find(schedule_id=schedule_id)

    def get_under_schedule(self, child_id: str, schedule_id: str) -> Optional[ModelType]:
        """Lookup by id AND parent, so an id from another schedule never matches"""
        return self.find_one(id=child_id, schedule_id=schedule_id)

    def update_under_schedule(self, child_id: str, schedule_id: str, values: dict[str, Any]) -> int:
        return self.update_where(values, id=child_id, schedule_id=schedule_id)

    def delete_under_schedule(self, child_id: str, schedule_id: str) -> int:
        return self.delete_where(id=child_id, schedule_id=schedule_id)

    def delete_for_schedule(self, schedule_id: str) -> int:
        return self.delete_where(schedule_id=schedule_id)
