"""Repositories for the three sample entity types."""

from typing import List
from sqlalchemy.orm import Session

from ..models import EntityType1, EntityType2, EntityType3
from .base import BaseRepository


class ClassEntityRepository(BaseRepository[EntityType1]):
    """Entities with an ImmutableClass property."""

    def __init__(self, session: Session):
        super().__init__(session, EntityType1)


class StructEntityRepository(BaseRepository[EntityType2]):
    """Entities with an ImmutableStruct property."""

    def __init__(self, session: Session):
        super().__init__(session, EntityType2)


class ListEntityRepository(BaseRepository[EntityType3]):
    """Entities with a list[int] property."""

    def __init__(self, session: Session):
        super().__init__(session, EntityType3)

    def find_by_values(self, values: List[int]) -> List[EntityType3]:
        """Find entities whose stored list equals values, in order."""
        return (
            self._session.query(EntityType3)
            .filter(EntityType3.my_property == list(values))
            .order_by(EntityType3.id)
            .all()
        )
