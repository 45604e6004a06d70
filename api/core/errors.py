"""
Exception handlers shared by every router.

All error bodies have the same shape: {"error": "<message>"}.
- HTTPException          -> its own status (404 not found, 413 upload too large)
- RequestValidationError -> 400 with per-field details (404 for unparsable path ids)
- database failures      -> 500 carrying the driver's message verbatim
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

VALIDATION_ERROR_MESSAGE = "Missing required properties"
DEFAULT_NOT_FOUND_MESSAGE = "Not found"

# Raised by asyncpg while executing statements or opening connections.
DATABASE_ERRORS: tuple[type[Exception], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
)


def error_body(message: str, **extra) -> dict:
    return {"error": message, **extra}


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(
        "http_error status=%s method=%s path=%s detail=%s",
        exc.status_code,
        request.method,
        request.url.path,
        exc.detail,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def _validation_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            # Drop the leading "body"/"path"/"form" segment.
            "field": ".".join(str(loc) for loc in e["loc"][1:]) or str(e["loc"][0]),
            "message": e["msg"],
        }
        for e in exc.errors()
    ]


def _is_path_error(error: dict) -> bool:
    return tuple(error["loc"][:1]) == ("path",)


def make_validation_error_handler(path_not_found: dict[str, str] | None = None):
    """
    Body errors answer 400. An unparsable path id cannot match any row, so a
    request whose only errors are in the path answers 404 with the message
    registered for that path parameter.
    """
    not_found_messages = dict(path_not_found or {})

    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        if errors and all(_is_path_error(e) for e in errors):
            param = str(errors[0]["loc"][-1])
            message = not_found_messages.get(param, DEFAULT_NOT_FOUND_MESSAGE)
            logger.warning(
                "path_not_found method=%s path=%s param=%s",
                request.method,
                request.url.path,
                param,
            )
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=error_body(message),
            )

        details = _validation_details(exc)
        logger.warning(
            "validation_error method=%s path=%s fields=%s",
            request.method,
            request.url.path,
            ",".join(d["field"] for d in details),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(VALIDATION_ERROR_MESSAGE, details=details),
        )

    return validation_error_handler


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request_failed method=%s path=%s error=%s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(str(exc)),
    )


def register_error_handlers(app: FastAPI, *, path_not_found: dict[str, str] | None = None) -> None:
    """
    `path_not_found` maps a path parameter name (e.g. "event_id") to the
    not-found message used when that parameter does not parse.
    """
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, make_validation_error_handler(path_not_found))
    for exc_type in DATABASE_ERRORS:
        app.add_exception_handler(exc_type, server_error_handler)
    # Anything else still answers with the raw message.
    app.add_exception_handler(Exception, server_error_handler)
