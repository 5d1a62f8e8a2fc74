from __future__ import annotations

from fastapi import APIRouter, Request

from userservice.schemas import UserDto
from userservice.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


@router.get("", response_model=list[UserDto])
def find_users(request: Request):
    return _get_user_service(request).list_users()


@router.get("/{user_id}", response_model=UserDto)
def find_by_id(user_id: int, request: Request):
    return _get_user_service(request).get_user(user_id)


@router.post("", response_model=UserDto)
def create_user(user: UserDto, request: Request):
    return _get_user_service(request).create_user(user)
