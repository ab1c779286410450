"""
Base repositories

``CrudRepository`` is the persistence contract every entity repository
implements. Two adapters are provided:

- ``SqlAlchemyRepository``: ORM-backed, one SQLAlchemy Session per request
- ``InMemoryRepository``: dict-backed, for tests and database-less runs

Both return domain models (pydantic), never ORM rows.
"""
import logging
from abc import ABC, abstractmethod
from itertools import count
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from product_api.core.database import Base
from product_api.core.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class CrudRepository(ABC, Generic[T]):
    """Persistence operations shared by all entities"""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every stored entity ordered by id, [] if there are none."""

    @abstractmethod
    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Return the entity with this id, or None."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """
        Insert when ``entity.id`` is None, otherwise update the matching row.

        Returns the persisted entity with its id populated.

        Raises:
            EntityNotFoundError: entity.id is set but no row has it
        """

    @abstractmethod
    def delete_by_id(self, entity_id: int) -> bool:
        """Remove the entity. Returns False (and does nothing) if it doesn't exist."""


class SqlAlchemyRepository(CrudRepository[T]):
    """
    CrudRepository over a SQLAlchemy Session

    Subclasses set ``model`` (ORM class), ``schema`` (domain class) and
    ``entity_name`` (used in error messages). Each write commits.
    """

    model: Type[Base] = None
    schema: Type[T] = None
    entity_name: str = "Entity"

    def __init__(self, db: Session):
        self.db = db

    def _to_domain(self, row) -> T:
        return self.schema.model_validate(row)

    def _find_where(self, *criteria) -> List[T]:
        stmt = select(self.model).where(*criteria).order_by(self.model.id)
        return [self._to_domain(row) for row in self.db.execute(stmt).scalars()]

    def find_all(self) -> List[T]:
        stmt = select(self.model).order_by(self.model.id)
        return [self._to_domain(row) for row in self.db.execute(stmt).scalars()]

    def find_by_id(self, entity_id: int) -> Optional[T]:
        row = self.db.get(self.model, entity_id)
        if row is None:
            return None
        return self._to_domain(row)

    def save(self, entity: T) -> T:
        data = entity.model_dump(exclude={"id"})

        if entity.id is None:
            row = self.model(**data)
            self.db.add(row)
        else:
            row = self.db.get(self.model, entity.id)
            if row is None:
                raise EntityNotFoundError(self.entity_name, entity.id)
            for field, value in data.items():
                setattr(row, field, value)

        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(row)
        logger.debug(f"Saved {self.entity_name} {row.id}")
        return self._to_domain(row)

    def delete_by_id(self, entity_id: int) -> bool:
        row = self.db.get(self.model, entity_id)
        if row is None:
            return False

        self.db.delete(row)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.debug(f"Deleted {self.entity_name} {entity_id}")
        return True


class InMemoryRepository(CrudRepository[T]):
    """
    CrudRepository over a plain dict

    Stored and returned entities are copies, so callers mutating a result
    don't change what is stored (same as detached ORM rows).
    """

    entity_name: str = "Entity"

    def __init__(self):
        self._rows: Dict[int, T] = {}
        self._ids = count(1)

    def _find_where(self, predicate: Callable[[T], bool]) -> List[T]:
        return [row for row in self.find_all() if predicate(row)]

    def find_all(self) -> List[T]:
        return [self._rows[key].model_copy() for key in sorted(self._rows)]

    def find_by_id(self, entity_id: int) -> Optional[T]:
        row = self._rows.get(entity_id)
        return row.model_copy() if row is not None else None

    def save(self, entity: T) -> T:
        if entity.id is None:
            stored = entity.model_copy(update={"id": next(self._ids)})
        elif entity.id in self._rows:
            stored = entity.model_copy()
        else:
            raise EntityNotFoundError(self.entity_name, entity.id)

        self._rows[stored.id] = stored
        return stored.model_copy()

    def delete_by_id(self, entity_id: int) -> bool:
        return self._rows.pop(entity_id, None) is not None
