from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ideabox.core.errors import AppError, ErrorKind

log = logging.getLogger(__name__)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.not_found: 404,
    ErrorKind.not_valid: 400,
    ErrorKind.unauthorized: 401,
    ErrorKind.access_denied: 403,
    ErrorKind.conflict: 409,
    ErrorKind.internal: 500,
}


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, 500)
    if status_code >= 500:
        log.error("[api] %s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=500, content={"message": "internal server error"})
    log.info("[api] %s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"message": exc.message})


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    log.exception("[api] %s %s crashed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"message": "internal server error"})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
