"""Interface layer errors.

Maps exceptions raised below the HTTP layer to status codes and the JSON
error envelope returned by every failing request:

    {"error": {"message": "...", "code": 404}}

The code is the numeric HTTP status. Server-side failures carry a generic
message; their detail is logged.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.domain.error import (
    AuthenticationError,
    CommentDeletedError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from blog.persistence.error import PersistenceError
from blog.util.jwt import JWTError

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Most specific first; the first matching class wins
_DOMAIN_ERROR_MAP: list[tuple[type[DomainError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (CommentDeletedError, status.HTTP_410_GONE),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "code": status_code}},
    )


def classify_domain_error(exc: DomainError) -> int:
    """Return the HTTP status code for a domain error."""
    for error_type, status_code in _DOMAIN_ERROR_MAP:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _internal_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled server error",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Handle errors raised by domain services."""
    status_code = classify_domain_error(exc)
    if status_code >= 500:
        return _internal_error(request, exc)

    logfire.info(
        "Request rejected",
        path=request.url.path,
        status_code=status_code,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return error_response(status_code, str(exc))


async def handle_server_error(request: Request, exc: Exception) -> JSONResponse:
    """Handle persistence, token signing and unexpected errors."""
    return _internal_error(request, exc)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed request bodies, paths and query strings."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP errors (404 routes, 405 methods) in the envelope."""
    return error_response(exc.status_code, str(exc.detail))


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(JWTError, handle_server_error)
    app.add_exception_handler(PersistenceError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_server_error)
