"""
valconv - Value conversions for SQLAlchemy entities.

Maps in-memory property types to storage primitives and back:
- ValueConverter / ConvertedType: pluggable bidirectional conversion
- ValueComparer: equality, hashing and snapshots for mutable values
- SnapshotChangeTracker: writes values that were mutated in place

Architecture follows:
- Domain-Driven Design (value objects, repository contracts)
- Repository + Unit of Work pattern
"""

__version__ = "0.1.0"

# Domain Models
from valconv.domain.models import (
    ImmutableClass,
    ImmutableStruct,
    ValueConversionError,
    ValueSerializationError,
    ValueDeserializationError,
)

# Infrastructure
from valconv.infrastructure.database import (
    ValueComparer,
    ValueConverter,
    ConvertedType,
    has_conversion,
    SnapshotChangeTracker,
    EntityType1,
    EntityType2,
    EntityType3,
    SQLAlchemyUnitOfWork,
)

__all__ = [
    "__version__",
    "ImmutableClass",
    "ImmutableStruct",
    "ValueConversionError",
    "ValueSerializationError",
    "ValueDeserializationError",
    "ValueComparer",
    "ValueConverter",
    "ConvertedType",
    "has_conversion",
    "SnapshotChangeTracker",
    "EntityType1",
    "EntityType2",
    "EntityType3",
    "SQLAlchemyUnitOfWork",
]
