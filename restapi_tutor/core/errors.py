"""Domain errors and their HTTP rendering."""
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TutorError(Exception):
    """Base for errors a request can fail with."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TutorError):
    status_code = 400
    default_message = "Invalid input"


class ConflictError(TutorError):
    status_code = 400
    default_message = "Already exists"


class AuthError(TutorError):
    status_code = 401
    default_message = "Invalid or expired token"


class NotFoundError(TutorError):
    status_code = 404
    default_message = "Not found"


class StorageError(TutorError):
    status_code = 500
    default_message = "Internal server error"


async def tutor_error_handler(request: Request, exc: TutorError) -> JSONResponse:
    if isinstance(exc, StorageError):
        # detail was logged where it was raised; the client gets nothing schema-related
        return JSONResponse(status_code=exc.status_code, content={"detail": StorageError.default_message})

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request body", "errors": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TutorError, tutor_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
