"""Domain interfaces - repository and unit of work contracts."""

from .repositories import IReadRepository, IWriteRepository, IRepository
from .unit_of_work import IUnitOfWork

__all__ = [
    "IReadRepository",
    "IWriteRepository",
    "IRepository",
    "IUnitOfWork",
]
