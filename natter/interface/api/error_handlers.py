"""Mapping of domain errors to HTTP responses.

Every error body has the shape ``{"success": false, "error": "<message>"}``.
"""

from collections.abc import Awaitable, Callable

import logfire
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from natter.domain.error import (
    AuthError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ParentNotFoundError,
    ProviderUnavailableError,
    RateLimitedError,
    StoreUnavailableError,
    ValidationError,
)

# Ordered most specific first; the first matching entry wins.
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ParentNotFoundError, status.HTTP_400_BAD_REQUEST),
    (RateLimitedError, status.HTTP_429_TOO_MANY_REQUESTS),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (ProviderUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build the JSON error payload."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
        headers=headers,
    )


def status_for(error: DomainError) -> int:
    """Resolve the HTTP status of a domain error."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    headers = None

    if isinstance(exc, RateLimitedError):
        headers = {"Retry-After": str(exc.retry_after_seconds)}
    elif status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error_type=type(exc).__name__,
        )

    return error_response(status_code, str(exc), headers)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    logfire.warn("Malformed request", path=request.url.path, errors=len(errors))

    message = "Invalid request body"
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()))
        detail = errors[0].get("msg", "")
        message = f"Invalid request: {location}: {detail}" if location else detail
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


async def catch_unexpected_errors(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Turn unhandled errors into the generic 500 payload.

    Runs as regular middleware, inside CORSMiddleware, so the 500 still
    carries the CORS headers. A handler registered for Exception would run
    in ServerErrorMiddleware, outside of it.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await handle_unexpected_error(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Must run before CORSMiddleware is added so that the catch-all middleware
    ends up inside it.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.middleware("http")(catch_unexpected_errors)
    # Last resort for failures outside the middleware stack
    app.add_exception_handler(Exception, handle_unexpected_error)
