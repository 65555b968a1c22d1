"""Base repository implementation with common functionality."""

import logging
from typing import TypeVar, Generic, Optional, List, Type
from sqlalchemy.orm import Session

from valconv.domain.interfaces.repositories import IRepository
from valconv.domain.models import EntityNotFoundError, MultipleEntitiesFoundError

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BaseRepository(IRepository[T], Generic[T]):
    """
    Repository over one mapped entity class.

    Returned entities stay attached to the session, so later in-place
    changes are part of the next commit.
    """

    def __init__(self, session: Session, entity_class: Type[T]):
        self._session = session
        self._entity_class = entity_class

    def get(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        return self._session.get(self._entity_class, id)

    def single(self) -> T:
        """Get the only stored entity."""
        entities = (
            self._session.query(self._entity_class)
            .order_by(self._entity_class.id)
            .limit(2)
            .all()
        )
        name = self._entity_class.__name__
        if not entities:
            raise EntityNotFoundError(f"No {name} stored")
        if len(entities) > 1:
            raise MultipleEntitiesFoundError(f"More than one {name} stored")
        return entities[0]

    def list(self, limit: int = 100, offset: int = 0) -> List[T]:
        """List entities with pagination."""
        return (
            self._session.query(self._entity_class)
            .order_by(self._entity_class.id)
            .offset(offset)
            .limit(limit)
            .all()
        )

    def exists(self, id: int) -> bool:
        """Check if entity exists."""
        return (
            self._session.query(self._entity_class)
            .filter_by(id=id)
            .count() > 0
        )

    def add(self, entity: T) -> T:
        """Add a new entity."""
        self._session.add(entity)
        self._session.flush()
        logger.debug(f"Added {entity!r}")
        return entity

    def delete(self, id: int) -> bool:
        """Delete entity by ID."""
        entity = self.get(id)
        if entity is None:
            return False
        self._session.delete(entity)
        self._session.flush()
        return True
