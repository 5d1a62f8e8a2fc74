"""Domain helpers for user field validation and error wording."""
from __future__ import annotations

import re
from datetime import date
from typing import Any, Mapping

EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*"
)

# Display names keyed by wire field name.
FIELD_LABELS: Mapping[str, str] = {
    "id": "Id",
    "user_id": "Id",
    "username": "Username",
    "email": "Email",
    "firstName": "First name",
    "lastName": "Last name",
    "dateOfBirth": "Date of birth",
}

INVALID_BODY_MESSAGE = "Request body is invalid."


class FieldValidationError(Exception):
    """A single rejected request field, worded for the client."""

    def __init__(self, field: str, value: Any, message: str | None = None):
        self.field = field
        self.value = value
        self.message = message or format_field_error(field, value)
        super().__init__(self.message)

    @classmethod
    def for_body(cls, value: Any) -> "FieldValidationError":
        """The body as a whole is unreadable (not JSON, or not an object)."""
        return cls("body", value, message=INVALID_BODY_MESSAGE)


def is_valid_email(value: str | None) -> bool:
    if not value:
        return False
    return bool(EMAIL_PATTERN.fullmatch(value))


def is_valid_date_of_birth(value: date | None, today: date | None = None) -> bool:
    """A date of birth is accepted up to and including today."""
    if value is None:
        return True
    return value <= (today or date.today())


def field_label(field: str) -> str:
    return FIELD_LABELS.get(field, field)


def _render_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def format_field_error(field: str, value: Any) -> str:
    """'Email foo is invalid.' style message for a rejected field."""
    return f"{field_label(field)} {_render_value(value)} is invalid."
