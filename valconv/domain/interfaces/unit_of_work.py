"""
Unit of Work Interface.

Scoped persistence context: acquired on enter, released on exit on every
exit path, rolled back when the scope ends with an exception.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .repositories import IRepository


class IUnitOfWork(ABC):
    """
    Unit of Work pattern interface.

    Manages transaction boundaries and provides access to repositories.

    Usage:
        with uow:
            entity = EntityType3(my_property=[1, 2, 3])
            uow.list_entities.add(entity)
            uow.commit()

            entity.my_property.append(4)
            uow.commit()  # In-place change detected and written

    Design Decisions:
    - Context manager handles session lifecycle
    - Automatic rollback on exception
    - Explicit commit required
    """

    class_entities: "IRepository"
    struct_entities: "IRepository"
    list_entities: "IRepository"

    @abstractmethod
    def __enter__(self) -> "IUnitOfWork":
        """
        Begin the scope.

        Returns:
            Self for context manager usage
        """
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        End the scope, rolling back on exception.

        Args:
            exc_type: Exception type if raised
            exc_val: Exception value if raised
            exc_tb: Exception traceback if raised
        """
        pass

    @abstractmethod
    def commit(self):
        """
        Commit the transaction.

        Detects in-place changes of snapshot-tracked values, then persists
        all pending changes.
        """
        pass

    @abstractmethod
    def rollback(self):
        """Discard all uncommitted changes."""
        pass
