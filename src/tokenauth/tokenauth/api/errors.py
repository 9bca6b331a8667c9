# ABOUTME: Exception handlers mapping authentication and storage failures to HTTP responses
# ABOUTME: Every error body has the shape {"message": ...}; validation failures map fields to messages

from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from tokenauth.exceptions import AuthenticationException, StorageError

_log = logger.bind(name=__name__)

STORAGE_UNAVAILABLE_MESSAGE = "Service temporarily unavailable"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _field_label(field: str) -> str:
    return field[:1].upper() + field[1:]


def _message_for(error: Dict[str, Any], field: str) -> str:
    if error.get("type") == "missing":
        return f"{_field_label(field)} is mandatory"
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return error.get("msg", "Invalid value")


def validation_errors_to_fields(exc: RequestValidationError) -> Dict[str, str]:
    """
    Collapse request validation errors into a field -> message map.

    Only the first error per field is kept.
    """
    fields: Dict[str, str] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(location) or "body"
        fields.setdefault(field, _message_for(error, field))
    return fields


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers for validation, authentication and storage errors."""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        fields = validation_errors_to_fields(exc)
        _log.debug(f"Validation failed on {request.url.path}: {sorted(fields)}")
        return JSONResponse(status_code=400, content=fields)

    @app.exception_handler(AuthenticationException)
    async def handle_authentication_error(request: Request, exc: AuthenticationException):
        status_code = exc.details.get("status_code", 401)
        _log.info(f"{request.method} {request.url.path} -> {status_code} ({exc.code})")
        return error_response(status_code, exc.message)

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        _log.error(f"Storage unavailable during {request.method} {request.url.path}: {exc.message} ({exc.code})")
        return error_response(503, STORAGE_UNAVAILABLE_MESSAGE)
