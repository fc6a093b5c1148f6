"""
Error responses.

Every error leaves the service as ``{"error": "<message>"}`` with a
matching status code. Handlers raise ``APIError``; FastAPI's own errors
(invalid bodies, unknown routes) and unexpected exceptions are converted
by the handlers registered in ``install_error_handlers``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_BODY = "Invalid request body"
INTERNAL_ERROR = "Internal server error"


class APIError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _api_error(request: Request, exc: APIError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(400, INVALID_BODY)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    # Anything that gets here is a bug. Log it and keep serving.
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, INTERNAL_ERROR)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, _api_error)
    app.add_exception_handler(RequestValidationError, _invalid_body)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unhandled)
