"""
Conversion of exceptions into HTTP error envelopes.

Endpoints are wrapped with ``handle_http_errors`` so they contain no
try/except blocks. ``register_exception_handlers`` turns every raised
exception into the error envelope, whether it comes from request parsing,
a dependency or an endpoint body.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from bookshelf.exceptions import AppException, DatabaseError
from bookshelf.logging import logger
from bookshelf.schemas.errors import ErrorEnvelope, HTTPErrorResponse


def http_error_response(
    status_code: int,
    code: str,
    msg: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Build a JSON response carrying the error envelope.

    Args:
        status_code: HTTP status code.
        code: Machine-readable error code.
        msg: Human-readable error message.
        details: Optional additional context.

    Returns:
        JSONResponse with an HTTPErrorResponse body.
    """
    body = HTTPErrorResponse(
        error=ErrorEnvelope(code=code, msg=msg, details=details)
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def exception_response(ex: AppException) -> JSONResponse:
    """Build the error response for an application exception."""
    return http_error_response(ex.http_status, ex.code, ex.message, ex.details)


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTTP endpoints to log and normalize raised exceptions.

    AppException subclasses are logged and re-raised unchanged. Raw database
    errors are re-raised as DatabaseError so internals never reach the
    client. Either way the exception propagates through the request's
    session dependency, which rolls the unit of work back, and is then
    rendered as an error envelope by the handlers installed with
    ``register_exception_handlers``.

    Args:
        func: The HTTP endpoint function to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        @router.post("/authors")
        @handle_http_errors
        async def create_author(body: CreateAuthorRequest, repo: AuthorRepoDep):
            input_data = validate_input(CreateAuthorInput, name=body.name)
            return await CreateAuthorCommand(repo).execute(input_data)
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            logger.warning(
                f"AppException in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            raise
        except SQLAlchemyError as ex:
            logger.error(
                f"Database error in {func.__name__}: {ex}",
                exc_info=True,
            )
            raise DatabaseError("Database error occurred") from ex

    return wrapper


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register application-wide exception handlers.

    - RequestValidationError (malformed body or query) → 400 envelope
    - AppException → its own status and code
    - anything else → generic 500 envelope
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "msg": error["msg"],
            }
            for error in exc.errors()
        ]
        return http_error_response(
            status.HTTP_400_BAD_REQUEST,
            "validation_error",
            "Invalid request",
            {"errors": errors},
        )

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request, exc: AppException
    ) -> JSONResponse:
        logger.debug(f"AppException on {request.url.path}: {exc.message}")
        return exception_response(exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.error(
            f"Unhandled error on {request.url.path}: {exc}", exc_info=exc
        )
        return http_error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            "Internal server error",
        )
