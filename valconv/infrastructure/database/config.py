"""
Database Configuration for the value conversion samples.

This module provides centralized database path configuration.
Following the architecture pattern:
- Config: Only paths and URLs (this file)
- Models: SQLAlchemy ORM definitions (models.py)
- Repositories: Data access abstraction (repositories/)
- UoW: Transaction management (unit_of_work.py)

Usage:
    from valconv.infrastructure.database.config import get_database_config

    config = get_database_config()
    print(config.db_url)
"""

import os
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

DEFAULT_DB_FILENAME = "test.db"


@dataclass
class DatabaseConfig:
    """Database configuration settings (paths and URLs only)."""

    # Base data directory
    data_dir: Path

    # SQLite database file
    db_path: Path

    # Full URL override (e.g. another SQLite file or a server database)
    url_override: Optional[str] = None

    # Log SQL statements
    echo: bool = False

    @property
    def db_url(self) -> str:
        """Get the database URL."""
        if self.url_override:
            return self.url_override
        return f"sqlite:///{self.db_path}"

    @property
    def is_sqlite_file(self) -> bool:
        """True if the database is the local SQLite file at db_path."""
        return self.url_override is None


# Global configuration cache
_config: Optional[DatabaseConfig] = None


def get_project_root() -> Path:
    """Get the project root directory."""
    current = Path(__file__).resolve()

    for parent in current.parents:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return Path.cwd()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def get_database_config(
    data_dir: Optional[Path] = None,
    use_env: bool = True,
    db_path: Optional[Path] = None,
) -> DatabaseConfig:
    """
    Get database configuration (paths and URLs only).

    Args:
        data_dir: Override data directory path
        use_env: Whether to read from environment variables
        db_path: Override the database file path

    VALCONV_DATABASE_URL applies only when neither data_dir nor db_path is given.

    Returns:
        DatabaseConfig with all paths configured
    """
    global _config

    explicit_location = data_dir is not None or db_path is not None
    if _config is not None and not explicit_location:
        return _config

    if db_path is not None:
        db_path = Path(db_path)
        data_dir = db_path.parent

    # Determine data directory
    if data_dir is None:
        if use_env and os.getenv("VALCONV_DATA_DIR"):
            data_dir = Path(os.getenv("VALCONV_DATA_DIR"))
        else:
            data_dir = get_project_root() / "data"
    data_dir = Path(data_dir)

    # Ensure data directory exists
    data_dir.mkdir(parents=True, exist_ok=True)

    if db_path is None:
        db_path = data_dir / DEFAULT_DB_FILENAME

    url_override = None
    echo = False
    if use_env:
        # An explicit path or directory wins over the URL from the environment
        if not explicit_location:
            url_override = os.getenv("VALCONV_DATABASE_URL") or None
        echo = _env_flag("VALCONV_ECHO_SQL")

    _config = DatabaseConfig(
        data_dir=data_dir,
        db_path=db_path,
        url_override=url_override,
        echo=echo,
    )

    return _config


def reset_database_config() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None


def create_sample_engine(config: Optional[DatabaseConfig] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create SQLAlchemy engine for the sample database.

    Args:
        config: Database configuration (global config if not provided)
        echo: Whether to log SQL statements (config.echo if not provided)

    Returns:
        SQLAlchemy Engine
    """
    if config is None:
        config = get_database_config()
    if echo is None:
        echo = config.echo
    return create_engine(config.db_url, echo=echo)


def create_session_factory(engine: Optional[Engine] = None) -> sessionmaker:
    """
    Create SQLAlchemy session factory.

    Args:
        engine: Optional engine (creates new if not provided)

    Returns:
        SQLAlchemy sessionmaker
    """
    if engine is None:
        engine = create_sample_engine()
    return sessionmaker(bind=engine)

