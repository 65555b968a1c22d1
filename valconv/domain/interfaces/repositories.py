"""
Repository Interfaces.

Defines abstract contracts for entity access following the Repository pattern.
Entities returned by a repository stay attached to the unit of work that
produced them, so in-place changes are picked up on the next commit.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, List

T = TypeVar('T')


class IReadRepository(ABC, Generic[T]):
    """
    Read-only repository interface.

    Provides query operations without modifying data.
    """

    @abstractmethod
    def get(self, id: int) -> Optional[T]:
        """
        Get entity by ID.

        Args:
            id: Entity identifier

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    def single(self) -> T:
        """
        Get the only stored entity.

        Returns:
            The entity

        Raises:
            EntityNotFoundError: If no entity is stored
            MultipleEntitiesFoundError: If more than one entity is stored
        """
        pass

    @abstractmethod
    def list(self, limit: int = 100, offset: int = 0) -> List[T]:
        """
        List entities with pagination, ordered by ID.

        Args:
            limit: Maximum number of entities to return
            offset: Number of entities to skip

        Returns:
            List of entities
        """
        pass

    @abstractmethod
    def exists(self, id: int) -> bool:
        """
        Check if entity exists.

        Args:
            id: Entity identifier

        Returns:
            True if exists, False otherwise
        """
        pass


class IWriteRepository(ABC, Generic[T]):
    """
    Write repository interface.

    Provides mutation operations.
    """

    @abstractmethod
    def add(self, entity: T) -> T:
        """
        Start tracking a new entity.

        Args:
            entity: Entity to add

        Returns:
            Added entity (ID assigned after flush)
        """
        pass

    @abstractmethod
    def delete(self, id: int) -> bool:
        """
        Delete entity by ID.

        Args:
            id: Entity identifier

        Returns:
            True if deleted, False if not found
        """
        pass


class IRepository(IReadRepository[T], IWriteRepository[T]):
    """Full repository interface combining read and write operations."""
    pass
