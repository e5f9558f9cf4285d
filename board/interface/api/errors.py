"""Translation of domain errors into HTTP responses."""

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from board.domain.error import (
    DomainError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from board.util.jwt import JWTError

# Most specific first; the first matching class wins
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DuplicateUsernameError, status.HTTP_409_CONFLICT),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
]


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error, 400 for unmapped ones."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    logfire.warn(
        "Request failed with domain error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=status_code,
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def _jwt_error_handler(request: Request, exc: JWTError) -> JSONResponse:
    logfire.warn("Request failed with invalid token", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)}
    )


async def _value_error_handler(
    request: Request, exc: pydantic.ValidationError
) -> JSONResponse:
    # Value objects built inside use cases (usernames, display names)
    messages = [error["msg"] for error in exc.errors()]
    logfire.warn("Request failed value validation", path=request.url.path, errors=messages)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "; ".join(messages)}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the application."""
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(JWTError, _jwt_error_handler)
    app.add_exception_handler(pydantic.ValidationError, _value_error_handler)
