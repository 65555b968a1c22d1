"""
Database Setup and Initialization.

Drops and rebuilds the sample database so each scenario starts clean:
- ensure_deleted: remove the SQLite file (or drop all tables elsewhere)
- ensure_created: create every table defined in models.py
- reset_database: both, in order

Usage:
    from valconv.infrastructure.database.setup import reset_database

    reset_database()
"""

import logging
from pathlib import Path
from typing import List, Optional

from sqlalchemy import create_engine, inspect

from .config import DatabaseConfig, get_database_config
from .models import Base, EXPECTED_TABLES

logger = logging.getLogger(__name__)

SQLITE_SIDE_FILES = ("-journal", "-wal", "-shm")


def _sqlite_files(db_path: Path) -> List[Path]:
    return [db_path] + [db_path.with_name(db_path.name + suffix) for suffix in SQLITE_SIDE_FILES]


def ensure_deleted(config: Optional[DatabaseConfig] = None) -> bool:
    """
    Delete the sample database.

    For the local SQLite file the file itself is removed; for any other
    URL all sample tables are dropped.

    Args:
        config: Database configuration (global config if not provided)

    Returns:
        True if anything was deleted
    """
    if config is None:
        config = get_database_config()

    if config.is_sqlite_file:
        deleted = False
        for path in _sqlite_files(config.db_path):
            if path.exists():
                path.unlink()
                deleted = True
        logger.info(f"Deleted database file {config.db_path}" if deleted else
                    f"No database file at {config.db_path}")
        return deleted

    engine = create_engine(config.db_url, echo=config.echo)
    try:
        existing = set(inspect(engine).get_table_names())
        Base.metadata.drop_all(engine)
    finally:
        engine.dispose()
    dropped = [t for t in EXPECTED_TABLES if t in existing]
    logger.info(f"Dropped {len(dropped)} tables from {config.db_url}")
    return bool(dropped)


def ensure_created(config: Optional[DatabaseConfig] = None) -> bool:
    """
    Create all sample tables.

    Args:
        config: Database configuration (global config if not provided)

    Returns:
        True if every expected table exists afterwards
    """
    if config is None:
        config = get_database_config()

    engine = create_engine(config.db_url, echo=config.echo)
    try:
        Base.metadata.create_all(engine)
        tables = inspect(engine).get_table_names()
    finally:
        engine.dispose()

    created_count = sum(1 for t in EXPECTED_TABLES if t in tables)
    logger.info(f"Database initialized: {config.db_url} "
                f"(tables: {created_count}/{len(EXPECTED_TABLES)})")
    return created_count == len(EXPECTED_TABLES)


def reset_database(config: Optional[DatabaseConfig] = None) -> bool:
    """
    Delete and re-create the sample database.

    Returns:
        True if the fresh schema is complete
    """
    ensure_deleted(config)
    return ensure_created(config)
