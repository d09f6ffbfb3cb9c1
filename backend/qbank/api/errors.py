"""
Exception handlers: parameter validation -> 400, storage and unexpected failures -> generic 500.
Internal details are logged server-side and never returned to the caller.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from qbank.config import settings

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MSG = "Internal error"


def _internal_error(exc: Exception) -> JSONResponse:
    detail = INTERNAL_ERROR_MSG
    if settings.debug:
        detail = f"{INTERNAL_ERROR_MSG}: {type(exc).__name__}: {exc}"
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": detail})


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Bad path/query parameters (e.g. non-numeric question id) are client errors, reported as 400
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception("Storage error on %s %s: %s", request.method, request.url.path, exc)
        return _internal_error(exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
        return _internal_error(exc)
