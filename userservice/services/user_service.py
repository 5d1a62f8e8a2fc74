"""
User lookup and registration use cases.
"""

from __future__ import annotations

import logging

from userservice.repositories.base import UserRecord, UserRepository
from userservice.schemas import UserDto

logger = logging.getLogger("userservice.service")


class UserServiceError(Exception):
    """Base class for user service failures surfaced to clients."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConflictError(UserServiceError):
    """Raised when a new user would reuse a taken email or username."""


class NotFoundError(UserServiceError):
    """Raised when the requested user does not exist."""


def _to_dto(record: UserRecord) -> UserDto:
    return UserDto(
        id=record.id,
        username=record.username,
        email=record.email,
        first_name=record.first_name,
        last_name=record.last_name,
        date_of_birth=record.date_of_birth,
    )


def _to_record(dto: UserDto) -> UserRecord:
    return UserRecord(
        id=dto.id,
        username=dto.username,
        email=dto.email,
        first_name=dto.first_name,
        last_name=dto.last_name,
        date_of_birth=dto.date_of_birth,
    )


class UserService:
    """Lists, fetches and creates users on top of a UserRepository."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def list_users(self) -> list[UserDto]:
        return [_to_dto(record) for record in self.repository.find_all()]

    def get_user(self, user_id: int) -> UserDto:
        record = self.repository.find_by_id(user_id)
        if record is None:
            raise NotFoundError(f"User {user_id} does not exist.")
        return _to_dto(record)

    def create_user(self, user: UserDto) -> UserDto:
        # Email is checked first: a request reusing both reports the email.
        if self.repository.exists_by_email(user.email):
            raise ConflictError(f"Email {user.email} has already been taken by other user.")
        if self.repository.exists_by_username(user.username):
            raise ConflictError(f"Username {user.username} has already been taken by other user.")
        record = _to_record(user)
        record.id = None
        saved = self.repository.save(record)
        logger.info("Created user %s (%s)", saved.id, saved.username)
        return _to_dto(saved)
