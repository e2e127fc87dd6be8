"""Central error responder.

Maps ``AppError`` kinds, request validation failures, unknown routes and
unhandled exceptions to JSON error responses.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.common.config import Environment, settings
from app.core.common.errors import AppError, ErrorType
from app.core.common.logging import logger


def _response(error: AppError) -> JSONResponse:
    return JSONResponse(status_code=error.error_type.status, content=error.to_body())


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(
        "request_failed",
        error=exc.error_type.code,
        status_code=exc.error_type.status,
        message=exc.message,
    )
    return _response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report every field that failed validation."""
    validation_errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        validation_errors.append(
            {
                "field": ".".join(location) or "body",
                "message": error.get("msg", ""),
            }
        )

    logger.info("request_validation_failed", fields=[item["field"] for item in validation_errors])
    return _response(
        AppError(
            ErrorType.VALIDATION,
            "Invalid request",
            validation_errors=validation_errors,
        )
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return _response(AppError(ErrorType.NOT_FOUND, f"Route not found: {request.url.path}"))

    return JSONResponse(
        status_code=exc.status_code,
        content={"statusCode": exc.status_code, "error": "HTTP_ERROR", "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", error=str(exc))
    message = "Internal server error"
    if settings.ENVIRONMENT != Environment.PRODUCTION:
        message = str(exc) or message
    return _response(AppError(ErrorType.SERVER, message))


def setup_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
