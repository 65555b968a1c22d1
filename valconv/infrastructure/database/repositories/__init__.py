"""SQLAlchemy repository implementations."""

from .base import BaseRepository
from .entity_repository import (
    ClassEntityRepository,
    StructEntityRepository,
    ListEntityRepository,
)

__all__ = [
    "BaseRepository",
    "ClassEntityRepository",
    "StructEntityRepository",
    "ListEntityRepository",
]
