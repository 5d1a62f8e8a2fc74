"""Storage contract consumed by the user service."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol


class RepositoryIntegrityError(Exception):
    """Raised when the store rejects a write (unique email/username violated)."""


@dataclass
class UserRecord:
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    id: Optional[int] = None


class UserRepository(Protocol):
    def find_all(self) -> list[UserRecord]:
        ...

    def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        ...

    def exists_by_email(self, email: str) -> bool:
        ...

    def exists_by_username(self, username: str) -> bool:
        ...

    def save(self, record: UserRecord) -> UserRecord:
        """Persist ``record`` and return it with its assigned id."""
        ...
