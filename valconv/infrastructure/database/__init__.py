"""Database infrastructure - conversions, ORM models, repositories and unit of work."""

from .comparers import ValueComparer, INT_LIST_COMPARER
from .conversions import (
    ValueConverter,
    ConvertedType,
    has_conversion,
    IMMUTABLE_CLASS_CONVERTER,
    IMMUTABLE_STRUCT_CONVERTER,
    INT_LIST_JSON_CONVERTER,
)
from .change_tracking import SnapshotChangeTracker, get_change_tracker
from .models import (
    Base,
    EntityType1,
    EntityType2,
    EntityType3,
)
from .unit_of_work import SQLAlchemyUnitOfWork
from .config import (
    DatabaseConfig,
    get_database_config,
    reset_database_config,
    create_sample_engine,
    create_session_factory,
)
from .setup import (
    ensure_deleted,
    ensure_created,
    reset_database,
)

__all__ = [
    # Conversions
    "ValueComparer",
    "INT_LIST_COMPARER",
    "ValueConverter",
    "ConvertedType",
    "has_conversion",
    "IMMUTABLE_CLASS_CONVERTER",
    "IMMUTABLE_STRUCT_CONVERTER",
    "INT_LIST_JSON_CONVERTER",
    # Change tracking
    "SnapshotChangeTracker",
    "get_change_tracker",
    # Models
    "Base",
    "EntityType1",
    "EntityType2",
    "EntityType3",
    # UoW
    "SQLAlchemyUnitOfWork",
    # Config
    "DatabaseConfig",
    "get_database_config",
    "reset_database_config",
    "create_sample_engine",
    "create_session_factory",
    # Setup
    "ensure_deleted",
    "ensure_created",
    "reset_database",
]
