"""Exception handlers rendering every failure as ``{"error": message}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from grocery.services.bootstrap import BootstrapError

logger = logging.getLogger(__name__)

# Pydantic error types that map onto a short "<field> ..." sentence
FIELD_MESSAGES = {
    "missing": "is required",
    "string_type": "must be a string",
    "bool_type": "must be a boolean",
    "list_type": "must be an array",
    "model_type": "must be an object",
    "model_attributes_type": "must be an object",
    "dict_type": "must be an object",
}


def error_response(message: str, status_code: int, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first validation failure into a human-readable message."""
    errors = exc.errors()
    if not errors:
        return "Validation error"

    error = errors[0]
    if error.get("type") == "json_invalid":
        return "Invalid JSON body"
    # No body at all
    if error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",):
        return "Invalid JSON body"

    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])

    field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    phrase = FIELD_MESSAGES.get(error.get("type", ""))
    if field and phrase:
        return f"{field} {phrase}"
    if field:
        return f"{field}: {error.get('msg', 'invalid value')}"
    return error.get("msg", "Validation error")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(str(exc.detail), exc.status_code, getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = describe_validation_error(exc)
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return error_response(message, status.HTTP_400_BAD_REQUEST)


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Database error on {request.method} {request.url.path}")
    message = str(getattr(exc, "orig", None) or exc)
    return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def bootstrap_exception_handler(request: Request, exc: BootstrapError) -> JSONResponse:
    logger.error(f"Bootstrap failed while fetching {exc.source}: {exc}", exc_info=exc.cause)
    return error_response(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(BootstrapError, bootstrap_exception_handler)
