"""
Pytest fixtures for valconv tests.
"""

import pytest

from valconv.infrastructure.database import (
    SQLAlchemyUnitOfWork,
    get_database_config,
    reset_database_config,
)


@pytest.fixture(autouse=True)
def _isolated_database_config(monkeypatch):
    """Keep env vars and the cached config from leaking between tests."""
    for name in ("VALCONV_DATA_DIR", "VALCONV_DATABASE_URL", "VALCONV_ECHO_SQL"):
        monkeypatch.delenv(name, raising=False)
    reset_database_config()
    yield
    reset_database_config()


@pytest.fixture
def db_path(tmp_path):
    """Throwaway SQLite file."""
    return tmp_path / "test.db"


@pytest.fixture
def db_config(db_path):
    """Database config pointing at the throwaway file."""
    return get_database_config(db_path=db_path, use_env=False)


@pytest.fixture
def uow_factory(db_config):
    """Create fresh units of work against the same file, disposing them afterwards."""
    created = []

    def factory():
        uow = SQLAlchemyUnitOfWork(db_config.db_url)
        created.append(uow)
        return uow

    yield factory

    for uow in created:
        uow.dispose()


@pytest.fixture
def uow():
    """A SQLAlchemy UoW with in-memory SQLite, already entered."""
    uow = SQLAlchemyUnitOfWork("sqlite:///:memory:")
    with uow:
        yield uow
    uow.dispose()
