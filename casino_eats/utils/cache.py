# casino_eats/utils/cache.py
from typing import Any, Callable, Dict, Optional
import logging
from datetime import datetime, timedelta, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DataCache:
    def __init__(self, default_ttl: int = 30, clock: Callable[[], datetime] = _utcnow):
        self._cache: Dict[str, Any] = {}
        self._expiry_times: Dict[str, datetime] = {}
        self.default_ttl = timedelta(seconds=default_ttl)
        self.clock = clock

    def set(self, key: str, data: Any, ttl: Optional[int] = None) -> None:
        """Guarda datos con tiempo de expiración en segundos."""
        self.sweep()
        lifetime = timedelta(seconds=ttl) if ttl is not None else self.default_ttl
        self._cache[key] = data
        self._expiry_times[key] = self.clock() + lifetime
        logging.debug(f"Cache guardado para key: {key}")

    def get(self, key: str) -> Optional[Any]:
        """Devuelve los datos si existen y no están vencidos."""
        if key not in self._cache:
            return None

        if self.clock() >= self._expiry_times[key]:
            self.clear(key)
            logging.debug(f"Cache vencido para key: {key}")
            return None

        return self._cache[key]

    def sweep(self) -> int:
        """Elimina las entradas vencidas, se lean o no."""
        now = self.clock()
        expired = [key for key, expiry in self._expiry_times.items() if now >= expiry]
        for key in expired:
            self.clear(key)
        return len(expired)

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self, key: str) -> None:
        """Elimina una entrada."""
        if key in self._cache:
            del self._cache[key]
            del self._expiry_times[key]
            logging.debug(f"Cache limpiado para key: {key}")

    def clear_prefix(self, prefix: str) -> int:
        """Invalida todas las entradas cuyo key empieza con el prefijo."""
        keys = [key for key in self._cache if key.startswith(prefix)]
        for key in keys:
            self.clear(key)
        return len(keys)
