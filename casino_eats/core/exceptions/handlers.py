import logging
from fastapi import FastAPI, Request, status

from casino_eats.core.exceptions.app_exception import AppHttpException
from casino_eats.core.exceptions.errors import (
    CasinoEatsError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


def to_http_exception(error: CasinoEatsError) -> AppHttpException:
    if isinstance(error, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, PersistenceError):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return AppHttpException(
        status_code=status_code,
        detail=error.detail,
        solution=error.solution,
        errors=error.errors,
    )


async def casino_eats_error_handler(request: Request, exc: CasinoEatsError):
    http_exc = to_http_exception(exc)
    if http_exc.status_code >= 500:
        logging.error(f"SISTEMA >>> {request.method} {request.url.path} -> {exc.detail}")
    else:
        logging.info(f"SISTEMA >>> {request.method} {request.url.path} rechazado -> {exc.detail}")
    return http_exc.to_response()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CasinoEatsError, casino_eats_error_handler)
