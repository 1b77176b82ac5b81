"""Map domain failures onto short, status-coded plain-text responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fieldday.modules.logbook import InvalidInputError, StorageError
from fieldday.web.rendering import TemplateRenderError

logger = logging.getLogger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> PlainTextResponse:
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse("Malformed form body", status_code=400)


async def storage_error_handler(request: Request, exc: StorageError) -> PlainTextResponse:
    logger.error("%s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return PlainTextResponse("Storage error", status_code=500)


async def template_error_handler(request: Request, exc: TemplateRenderError) -> PlainTextResponse:
    logger.error("TEMPLATE ERROR (%s)", exc, exc_info=exc)
    return PlainTextResponse("Template error", status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(TemplateRenderError, template_error_handler)


__all__ = ["register_exception_handlers"]
