"""
Error envelope for every failed request.

All failures are rendered as `{"message": <text>}`. Service errors, bad input
and store failures are all reported as 400; router-level 404/405 keep their
status code.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def error_response(message: str, status_code: int = status.HTTP_400_BAD_REQUEST, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."

    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Malformed JSON body."

    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query"))
    reason = str(first.get("msg") or "invalid value")
    return f"{field}: {reason}" if field else reason


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(str(exc.detail), exc.status_code, headers=getattr(exc, "headers", None))


async def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(validation_message(exc))


async def _store_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("store_failure path=%s error=%s", request.url.path, exc)
    return error_response(str(exc) or exc.__class__.__name__)


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error path=%s", request.url.path)
    return error_response(str(exc) or "Internal error.")


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    for exc_class in STORE_ERRORS:
        app.add_exception_handler(exc_class, _store_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
