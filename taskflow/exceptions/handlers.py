"""
FastAPI exception handlers.

Every error response is a JSON object carrying the request ID, so a client
report can be matched to the server log line.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskflow.monitoring import REQUEST_ID_HEADER, get_request_id
from taskflow.exceptions.errors import ServiceError, NotFoundError, to_http_exception

logger = logging.getLogger(__name__)


def _where(request: Request) -> dict:
    return {"method": request.method, "path": request.url.path}


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback and answer 500 without leaking details."""
    logger.error(
        f"Unhandled {type(exc).__name__} in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra=_where(request),
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred.",
            "request_id": get_request_id() or '-',
            **_where(request),
        },
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Flatten pydantic errors into "location: message" strings."""
    request_id = get_request_id() or '-'
    errors = [
        f"{' -> '.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    logger.warning(
        f"Invalid payload for {request.method} {request.url.path}: {'; '.join(errors)}",
        extra=_where(request),
    )
    response = JSONResponse(
        status_code=422,
        content={
            "error": "Validation error",
            "message": "One or more fields failed validation",
            "errors": errors,
            "request_id": request_id,
            **_where(request),
        },
    )
    if request_id != '-':
        response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Answer a ServiceError with its status code and JSON detail."""
    exc.request_id = exc.request_id or get_request_id()
    level = logging.WARNING if isinstance(exc, NotFoundError) else logging.ERROR
    logger.log(
        level,
        f"{exc.__class__.__name__} in {request.method} {request.url.path}: {exc.message}",
        extra=_where(request),
    )
    http_exc = to_http_exception(exc)
    return JSONResponse(status_code=http_exc.status_code, content=http_exc.detail)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the handlers; ServiceError goes first so it wins over Exception."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
