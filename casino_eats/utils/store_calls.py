import logging
from typing import Any, Callable, TypeVar
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError

from casino_eats.core.exceptions.errors import PersistenceError

T = TypeVar("T")


async def call_store(func: Callable[..., T], *args: Any, retries: int = 1, area: str = "ALMACÉN", **kwargs: Any) -> T:
    """
    Ejecuta una llamada bloqueante al almacén fuera del event loop.

    Los fallos de base de datos se reintentan `retries` veces; después se
    propagan como PersistenceError. Los errores de dominio (no encontrado,
    validación) no se reintentan.
    """
    attempt = 0
    while True:
        try:
            return await run_in_threadpool(func, *args, **kwargs)
        except SQLAlchemyError as e:
            if attempt >= retries:
                logging.error(f"{area} >>> Falló {func.__name__} tras {attempt + 1} intentos -> {e}")
                raise PersistenceError(f"Error al comunicarse con el almacén: {func.__name__}") from e
            attempt += 1
            logging.warning(f"{area} >>> Reintentando {func.__name__} ({attempt}/{retries}) -> {e}")
