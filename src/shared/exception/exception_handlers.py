from typing import Any, Callable, Coroutine, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi_users import exceptions as fastapi_users_exceptions
from starlette.responses import Response

from src.shared.exception.exceptions import CustomBaseError, ValidationError
from src.shared.logging.loguru_io import Logger


ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def _format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get('loc', ()) if part not in ('body', 'query', 'path')]
        formatted.append({'field': '.'.join(loc) or 'request', 'message': error.get('msg', '')})
    return formatted


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    content: Dict[str, Any] = {'detail': error.message}
    if error.status_code >= 500:
        Logger.base.opt(exception=exc).error(
            f'{request.method} {request.url.path} -> {type(error).__name__}: {error.message}'
            f' ({getattr(error, "reason", None)})'
        )
    else:
        Logger.base.error(f'{request.method} {request.url.path} -> {type(error).__name__}: {error.message}')
    if isinstance(error, ValidationError) and error.details:
        content['errors'] = error.details
    return JSONResponse(status_code=error.status_code, content=content)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    errors = _format_validation_errors(list(error.errors()))
    detail = f'{errors[0]["field"]}: {errors[0]["message"]}' if errors else 'Invalid request'
    Logger.base.error(f'Validation error on {request.method} {request.url.path}: {errors}')
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': detail, 'errors': errors},
    )


async def user_already_exists_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.error('User already exists')
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={'detail': 'REGISTER_USER_ALREADY_EXISTS'}
    )


async def invalid_password_handler(request: Request, exc: Exception) -> JSONResponse:
    reason = getattr(exc, 'reason', 'INVALID_PASSWORD')
    Logger.base.error(f'Invalid password: {reason}')
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': reason})


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.error(f'ValueError: {exc}')
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': str(exc)})


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(f'Unhandled exception: {exc}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'detail': 'Internal server error'},
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    fastapi_users_exceptions.UserAlreadyExists: user_already_exists_handler,
    fastapi_users_exceptions.InvalidPasswordException: invalid_password_handler,
    ValueError: value_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
