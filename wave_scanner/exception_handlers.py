import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

from wave_scanner.cors import cors_headers
from wave_scanner.exceptions import AppError, BadRequestError, RequestError, TransportError

logger = structlog.get_logger()

_TRANSPORT_MESSAGE = "Error connecting to AI service"
_INTERNAL_MESSAGE = "Internal server error"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=cors_headers(),
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.error("app_error", path=request.url.path, code=exc.code, error=exc.message)
    return _error_response(500, _INTERNAL_MESSAGE)


async def transport_error_handler(request: Request, exc: TransportError) -> JSONResponse:
    # The provider status stays in the logs; callers only see the generic message.
    logger.error(
        "transport_error",
        path=request.url.path,
        status_code=exc.status_code,
        error=exc.message,
    )
    return _error_response(500, _TRANSPORT_MESSAGE)


async def request_error_handler(request: Request, exc: RequestError) -> JSONResponse:
    logger.error("request_error", path=request.url.path, error=exc.message)
    return _error_response(500, _INTERNAL_MESSAGE)


async def bad_request_handler(request: Request, exc: BadRequestError) -> JSONResponse:
    return _error_response(400, exc.message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_error",
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return _error_response(500, _INTERNAL_MESSAGE)


def register_exception_handlers(app):
    app.add_exception_handler(TransportError, transport_error_handler)
    app.add_exception_handler(RequestError, request_error_handler)
    app.add_exception_handler(BadRequestError, bad_request_handler)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
