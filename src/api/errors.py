"""Mapping from domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.model.errors import (
    AuthenticationError, CapacityReachedError, DomainError, DuplicateError,
    MissingFieldsError, NotFoundError, ValidationError,
)

logger = logging.getLogger(__name__)

_BAD_REQUEST = (ValidationError, DuplicateError, CapacityReachedError)


def to_http_exception(error: DomainError, failure_message: str) -> HTTPException:
    """Translate ``error`` for the client.

    Store failures surface as a bare DomainError or a StorageError and are
    reported with ``failure_message`` instead of their own text.
    """
    if isinstance(error, MissingFieldsError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(error), "missing": error.fields},
        )
    if isinstance(error, _BAD_REQUEST):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, AuthenticationError):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error))

    logger.error(failure_message, extra={"error": str(error), "errorType": type(error).__name__})
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure_message)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = sorted({'.'.join(str(p) for p in err['loc'][1:]) or str(err['loc'][0]) for err in exc.errors()})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"message": "Invalid request", "fields": fields}},
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path, "method": request.method})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Something went wrong!"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
