from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the userservice package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from userservice.core import config as core_config  # noqa: E402
from userservice.db import models  # noqa: E402
from userservice.db import session as db_session  # noqa: E402
from userservice.repositories import InMemoryUserRepository  # noqa: E402


class RecordingRepository(InMemoryUserRepository):
    """In-memory store that remembers which operations were called."""

    def __init__(self, records=None):
        self.calls: list[str] = []
        super().__init__(records)
        self.calls.clear()

    def find_all(self):
        self.calls.append("find_all")
        return super().find_all()

    def find_by_id(self, user_id):
        self.calls.append("find_by_id")
        return super().find_by_id(user_id)

    def exists_by_email(self, email):
        self.calls.append("exists_by_email")
        return super().exists_by_email(email)

    def exists_by_username(self, username):
        self.calls.append("exists_by_username")
        return super().exists_by_username(username)

    def save(self, record):
        self.calls.append("save")
        return super().save(record)


@pytest.fixture()
def recording_repo():
    """Factory for a RecordingRepository seeded with optional records."""
    return RecordingRepository


def _reset_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and tear it down completely."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("USER_STORE", "sql")
    _reset_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _reset_caches()
