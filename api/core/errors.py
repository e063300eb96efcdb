"""
Exception handlers: the single place where failures become HTTP responses.

Mutation and auth errors use `{"status": "error", "message": ...}`. Statement
failures keep the existing contract of returning the backend's error text as
`text/plain`.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .db import DatabaseConnectionError, DatabaseQueryError

logger = logging.getLogger(__name__)


def error_body(message: str) -> dict[str, str]:
    return {"status": "error", "message": message}


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("invalid_request path=%s errors=%s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request"),
    )


async def _db_connection_handler(_: Request, exc: DatabaseConnectionError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("DB Connection Failed"),
    )


async def _db_query_handler(_: Request, exc: DatabaseQueryError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(DatabaseConnectionError, _db_connection_handler)
    app.add_exception_handler(DatabaseQueryError, _db_query_handler)
