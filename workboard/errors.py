"""
Error handling for the WorkBoard API.

Storage failures surface to callers as a generic server fault; request bodies
that fail validation surface as a 400.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"
BAD_REQUEST_MESSAGE = "Bad Request"


class StorageError(Exception):
    """A database operation failed and was rolled back."""

    def __init__(self, operation: str, original: Exception):
        self.operation = operation
        self.original = original
        super().__init__(f"{operation} failed: {original}")


@contextmanager
def storage_guard(db: Session, operation: str) -> Iterator[Session]:
    """Roll back and re-raise as StorageError on any SQLAlchemy failure."""
    try:
        yield db
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Storage failure during %s", operation)
        raise StorageError(operation, exc) from exc


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": BAD_REQUEST_MESSAGE, "detail": jsonable_encoder(exc.errors())},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
