"""
SQLAlchemy Unit of Work Implementation.

Scoped persistence context for the sample entities. Installs the snapshot
change tracker on its session factory so in-place changes of
comparer-backed values are written on commit.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from valconv.domain.interfaces.unit_of_work import IUnitOfWork
from .change_tracking import SnapshotChangeTracker, get_change_tracker
from .config import create_session_factory
from .models import Base
from .repositories import (
    ClassEntityRepository,
    StructEntityRepository,
    ListEntityRepository,
)

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(IUnitOfWork):
    """
    SQLAlchemy-based Unit of Work implementation.

    Usage:
        with SQLAlchemyUnitOfWork("sqlite:///data/test.db") as uow:
            entity = EntityType3(my_property=[1, 2, 3])
            uow.list_entities.add(entity)
            uow.commit()

            entity.my_property.append(4)
            uow.commit()
    """

    def __init__(
        self,
        db_url: str = "sqlite:///test.db",
        echo: bool = False,
        engine: Optional[Engine] = None,
        change_tracker: Optional[SnapshotChangeTracker] = None,
    ):
        """
        Initialize the Unit of Work.

        Args:
            db_url: Database connection URL (ignored when engine is given)
            echo: If True, log SQL statements
            engine: Existing engine to share between units of work
            change_tracker: Tracker to install (process-wide tracker if not provided)
        """
        self._owns_engine = engine is None
        self._engine = engine if engine is not None else create_engine(db_url, echo=echo)
        self._session_factory = create_session_factory(self._engine)
        self._session: Optional[Session] = None
        self._tracker = change_tracker or get_change_tracker()
        self._tracker.install(self._session_factory, Base)

        # Create tables if they don't exist
        Base.metadata.create_all(self._engine)

    def __enter__(self) -> "SQLAlchemyUnitOfWork":
        """Open a session and initialize repositories."""
        self._session = self._session_factory()

        self.class_entities = ClassEntityRepository(self._session)
        self.struct_entities = StructEntityRepository(self._session)
        self.list_entities = ListEntityRepository(self._session)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close the session, rolling back on exception."""
        if exc_type:
            logger.debug(f"Rolling back after {exc_type.__name__}")
            self.rollback()
        if self._session:
            self._session.close()
            self._session = None

    def add(self, entity):
        """Start tracking an entity of any mapped type."""
        self._require_session().add(entity)
        return entity

    def flush(self):
        """Detect in-place changes and flush without committing."""
        session = self._require_session()
        self._tracker.detect_changes(session)
        session.flush()

    def commit(self):
        """Commit the transaction."""
        if self._session:
            try:
                self._session.commit()
            except Exception:
                self.rollback()
                raise

    def rollback(self):
        """Rollback the transaction."""
        if self._session:
            self._session.rollback()

    def dispose(self):
        """Release pooled connections of an engine this unit of work created."""
        if self._owns_engine:
            self._engine.dispose()

    def _require_session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work is not active; use it as a context manager")
        return self._session

    @property
    def session(self) -> Optional[Session]:
        """Get the current session (for advanced usage)."""
        return self._session

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def change_tracker(self) -> SnapshotChangeTracker:
        return self._tracker
