"""Wire-facing (transfer) records for the HTTP layer."""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from userservice.domain.users import is_valid_date_of_birth, is_valid_email


class UserDto(BaseModel):
    """User as sent and received over HTTP (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    username: str
    email: str
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    date_of_birth: Optional[date] = Field(default=None, alias="dateOfBirth")

    @field_validator("email")
    @classmethod
    def _email_well_formed(cls, value: str) -> str:
        if not is_valid_email(value):
            raise ValueError("malformed email address")
        return value

    @field_validator("date_of_birth")
    @classmethod
    def _date_of_birth_not_in_future(cls, value: Optional[date]) -> Optional[date]:
        if not is_valid_date_of_birth(value):
            raise ValueError("date of birth is in the future")
        return value


class ErrorResponse(BaseModel):
    message: str
    timestamp: datetime = Field(default_factory=datetime.now)
