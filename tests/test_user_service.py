from __future__ import annotations

from datetime import date

import pytest

from userservice.repositories import InMemoryUserRepository, UserRecord
from userservice.schemas import UserDto
from userservice.services.user_service import ConflictError, NotFoundError, UserService


def _alice() -> UserRecord:
    return UserRecord(
        username="alice",
        email="a@x.com",
        first_name="Alice",
        last_name="Anders",
        date_of_birth=date(1990, 1, 31),
    )


def _bob() -> UserRecord:
    return UserRecord(
        username="bob",
        email="b@x.com",
        first_name="Bob",
        last_name="Brown",
        date_of_birth=date(1985, 6, 2),
    )


def _request(**overrides) -> UserDto:
    data = {
        "username": "carol",
        "email": "c@x.com",
        "firstName": "Carol",
        "lastName": "Clark",
        "dateOfBirth": "1994-08-13",
    }
    data.update(overrides)
    return UserDto.model_validate(data)


def test_list_users_on_empty_store_is_empty():
    svc = UserService(InMemoryUserRepository())
    assert svc.list_users() == []


def test_list_users_translates_every_record():
    svc = UserService(InMemoryUserRepository([_alice(), _bob()]))

    users = svc.list_users()

    assert [u.id for u in users] == [1, 2]
    alice = users[0]
    assert alice.username == "alice"
    assert alice.email == "a@x.com"
    assert alice.first_name == "Alice"
    assert alice.last_name == "Anders"
    assert alice.date_of_birth == date(1990, 1, 31)


def test_get_user_returns_matching_record():
    svc = UserService(InMemoryUserRepository([_alice(), _bob()]))
    user = svc.get_user(2)
    assert user.id == 2
    assert user.username == "bob"


def test_get_user_missing_raises_not_found():
    svc = UserService(InMemoryUserRepository([_alice()]))
    with pytest.raises(NotFoundError) as exc:
        svc.get_user(999)
    assert exc.value.message == "User 999 does not exist."


def test_create_user_assigns_id_and_keeps_fields(recording_repo):
    repo = recording_repo([_alice()])
    svc = UserService(repo)

    created = svc.create_user(_request())

    assert created.id is not None
    assert created.username == "carol"
    assert created.email == "c@x.com"
    assert created.first_name == "Carol"
    assert created.last_name == "Clark"
    assert created.date_of_birth == date(1994, 8, 13)
    assert repo.calls == ["exists_by_email", "exists_by_username", "save"]
    assert repo.find_by_id(created.id).username == "carol"


def test_create_user_ignores_client_supplied_id():
    repo = InMemoryUserRepository([_alice()])
    svc = UserService(repo)

    created = svc.create_user(_request(id=1))

    assert created.id == 2
    assert repo.find_by_id(1).username == "alice"


def test_duplicate_email_is_reported_without_checking_username(recording_repo):
    repo = recording_repo([_alice(), _bob()])
    svc = UserService(repo)

    with pytest.raises(ConflictError) as exc:
        svc.create_user(_request(email="a@x.com", username="bob"))

    assert exc.value.message == "Email a@x.com has already been taken by other user."
    assert repo.calls == ["exists_by_email"]


def test_duplicate_username_is_reported_when_email_is_free(recording_repo):
    repo = recording_repo([_alice(), _bob()])
    svc = UserService(repo)

    with pytest.raises(ConflictError) as exc:
        svc.create_user(_request(email="c@x.com", username="bob"))

    assert exc.value.message == "Username bob has already been taken by other user."
    assert "save" not in repo.calls
    assert len(repo.find_all()) == 2
