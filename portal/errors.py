"""Typed failures surfaced by the repositories and how the API renders them.

Absence is not an error here: read-by-id, update and delete report a missing
row through ``None`` / ``False`` results instead of raising.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class PortalError(Exception):
    code = "error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        return {"error": self.code, "detail": self.message, "field": self.field}


class ValidationError(PortalError):
    """Malformed or missing input; raised before any store access."""

    code = "validation_error"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class ConstraintError(PortalError):
    """Uniqueness violation or an invalid combination of field values."""

    code = "constraint_error"
    status_code = status.HTTP_409_CONFLICT


class PolicyError(PortalError):
    """Business rule refusal, e.g. removing the last active admin."""

    code = "policy_error"
    status_code = status.HTTP_403_FORBIDDEN


class TransportError(PortalError):
    code = "transport_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


def _error_response(exc: PortalError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _field_from_loc(loc) -> Optional[str]:
    # ("body", "title") -> "title"; ("query", "limit") -> "limit"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or None


async def portal_error_handler(request: Request, exc: PortalError):
    return _error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    wrapped = ValidationError(
        first.get("msg", "Invalid request"),
        field=_field_from_loc(first.get("loc", ())),
    )
    response = wrapped.to_dict()
    response["errors"] = [
        {"field": _field_from_loc(err.get("loc", ())), "detail": err.get("msg")}
        for err in errors
    ]
    return JSONResponse(status_code=wrapped.status_code, content=response)


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("[store] %s %s failed", request.method, request.url.path)
    return _error_response(TransportError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PortalError, portal_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
