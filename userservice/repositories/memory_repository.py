"""Process-local user store, used by tests and ``USER_STORE=memory``."""
from __future__ import annotations

import threading
from dataclasses import replace
from typing import Optional

from .base import RepositoryIntegrityError, UserRecord


class InMemoryUserRepository:
    """Dict-backed store enforcing the same unique email/username rules as the SQL table."""

    def __init__(self, records: list[UserRecord] | None = None) -> None:
        self._lock = threading.Lock()
        self._rows: dict[int, UserRecord] = {}
        self._next_id = 1
        for record in records or []:
            self.save(record)

    def find_all(self) -> list[UserRecord]:
        with self._lock:
            return [replace(self._rows[key]) for key in sorted(self._rows)]

    def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        with self._lock:
            row = self._rows.get(user_id)
            return replace(row) if row else None

    def exists_by_email(self, email: str) -> bool:
        with self._lock:
            return any(row.email == email for row in self._rows.values())

    def exists_by_username(self, username: str) -> bool:
        with self._lock:
            return any(row.username == username for row in self._rows.values())

    def save(self, record: UserRecord) -> UserRecord:
        with self._lock:
            for row in self._rows.values():
                if row.id == record.id:
                    continue
                if row.email == record.email or row.username == record.username:
                    raise RepositoryIntegrityError(
                        f"User {record.username!r} <{record.email}> violates a unique constraint"
                    )
            user_id = record.id if record.id is not None else self._next_id
            self._next_id = max(self._next_id, user_id + 1)
            stored = replace(record, id=user_id)
            self._rows[user_id] = stored
            return replace(stored)
