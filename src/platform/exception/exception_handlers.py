from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger


ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def _detail(message: Any) -> dict[str, Any]:
    return {'detail': message}


async def seating_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, CustomBaseError):
        exc = CustomBaseError(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        Logger.base.error(f'❌ [HTTP] {request.method} {request.url.path}: {exc.message}')
    elif exc.status_code == status.HTTP_409_CONFLICT:
        Logger.base.warning(f'⚠️ [HTTP] {request.method} {request.url.path}: {exc.message}')

    return JSONResponse(status_code=exc.status_code, content=_detail(exc.message))


async def integrity_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # A uniqueness or FK violation that no repository translated: another writer won
    Logger.base.warning(f'⚠️ [HTTP] Integrity violation on {request.url.path}: {exc}')
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=_detail('The request conflicts with the current seating state'),
    )


async def bad_value_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_detail(str(exc)))


async def request_body_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_detail(errors))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.error(f'💥 [HTTP] Unhandled {type(exc).__name__} on {request.url.path}: {exc}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_detail('Internal server error'),
    )


EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: seating_error_handler,
    IntegrityError: integrity_error_handler,
    ValueError: bad_value_handler,
    RequestValidationError: request_body_error_handler,
    Exception: unhandled_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
