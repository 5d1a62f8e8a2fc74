"""User data access backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from userservice.db.models import User
from userservice.db.session import get_session

from .base import RepositoryIntegrityError, UserRecord

MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def _entity_to_record(entity: User) -> UserRecord:
    return UserRecord(
        id=entity.id,
        username=entity.username,
        email=entity.email,
        first_name=entity.first_name,
        last_name=entity.last_name,
        date_of_birth=entity.date_of_birth,
    )


class SQLUserRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def find_all(self) -> list[UserRecord]:
        with get_session() as session:
            stmt = select(User).order_by(User.id)
            return [_entity_to_record(u) for u in session.execute(stmt).scalars().all()]

    def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        # ids outside a signed 64-bit column can never have been stored
        if not MIN_ID <= user_id <= MAX_ID:
            return None
        with get_session() as session:
            entity = session.get(User, user_id)
            return _entity_to_record(entity) if entity else None

    def exists_by_email(self, email: str) -> bool:
        with get_session() as session:
            stmt = select(User.id).where(User.email == email).limit(1)
            return session.execute(stmt).first() is not None

    def exists_by_username(self, username: str) -> bool:
        with get_session() as session:
            stmt = select(User.id).where(User.username == username).limit(1)
            return session.execute(stmt).first() is not None

    def save(self, record: UserRecord) -> UserRecord:
        entity = User(
            id=record.id,
            username=record.username,
            email=record.email,
            first_name=record.first_name,
            last_name=record.last_name,
            date_of_birth=record.date_of_birth,
        )
        with get_session() as session:
            session.add(entity)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise RepositoryIntegrityError(
                    f"User {record.username!r} <{record.email}> violates a unique constraint"
                ) from exc
            session.refresh(entity)
            return _entity_to_record(entity)
