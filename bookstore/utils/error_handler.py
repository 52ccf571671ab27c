"""
Application-wide exception handlers.

Author commands return results for every expected outcome; these handlers
cover what escapes them: invalid request bodies, AppException raised from
other code paths, and unexpected errors. 5xx responses always carry the
fixed message so exception text never reaches the client.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookstore.exceptions import AppException
from bookstore.logging import logger
from bookstore.utils.responses import server_error_response


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer invalid path parameters or bodies with 400 and the errors."""
    logger.warning(
        f"Invalid request to {request.method} {request.url.path}",
        extra={"errors": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def app_exception_handler(
    request: Request, exc: AppException
) -> JSONResponse:
    """Map an AppException to its HTTP status."""
    if exc.http_status >= 500:
        logger.error(
            f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}",
            exc_info=exc,
        )
    else:
        logger.warning(
            f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}"
        )
    return JSONResponse(
        status_code=exc.http_status,
        content={"detail": exc.client_message},
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Last resort: log everything, tell the client nothing."""
    logger.error(
        f"Unhandled error in {request.method} {request.url.path}",
        exc_info=exc,
    )
    return server_error_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to the application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
