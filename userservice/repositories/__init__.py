"""
Persistence adapters.

Services depend on the ``UserRepository`` protocol; the SQL adapter is used in
production and the in-memory one in tests.
"""

from .base import RepositoryIntegrityError, UserRecord, UserRepository
from .memory_repository import InMemoryUserRepository
from .sql_repository import SQLUserRepository

__all__ = [
    "InMemoryUserRepository",
    "RepositoryIntegrityError",
    "SQLUserRepository",
    "UserRecord",
    "UserRepository",
]
