"""Infrastructure layer - SQLAlchemy persistence."""

from .database import SQLAlchemyUnitOfWork

__all__ = [
    "SQLAlchemyUnitOfWork",
]
