"""Translate service and validation failures into JSON error bodies."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from userservice.domain.users import FieldValidationError
from userservice.schemas import ErrorResponse
from userservice.services.user_service import ConflictError, NotFoundError

logger = logging.getLogger("userservice.http")


def _error_response(message: str, status_code: int) -> JSONResponse:
    body = ErrorResponse(message=message)
    return JSONResponse(body.model_dump(mode="json"), status_code=status_code)


def first_field_error(exc: RequestValidationError) -> FieldValidationError:
    """Only the first rejected field is reported back to the client."""
    error = exc.errors()[0]
    value = error.get("input")
    if error.get("type") == "json_invalid":
        return FieldValidationError.for_body(value)
    # names only: list positions and the JSON decode offset are ints
    names = [
        part for part in error.get("loc", ())
        if isinstance(part, str) and part not in ("body", "path", "query")
    ]
    if not names:
        return FieldValidationError.for_body(value)
    if error.get("type") == "missing":
        value = None
    return FieldValidationError(names[-1], value)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = first_field_error(exc)
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, err.message)
    return _error_response(err.message, 400)


async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
    logger.warning(exc.message)
    return _error_response(exc.message, 400)


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.warning(exc.message)
    return _error_response(exc.message, 404)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(ConflictError, handle_conflict)
    app.add_exception_handler(NotFoundError, handle_not_found)
