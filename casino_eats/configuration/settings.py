import logging
import os
from dotenv import load_dotenv

# Configuración de logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

# Carga las variables de entorno
load_dotenv(dotenv_path=".env", encoding="utf-8")

# Silencia logs de SQLAlchemy
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("apscheduler").setLevel(logging.WARNING)


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Configuration:
    def __init__(self):

        # Ambiente
        self.environment = os.getenv("ENVIRONMENT", "development").lower()

        # Base de datos (el almacén externo de pedidos y productos)
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./casino_eats.db")

        # Frescura de la vista de pedidos: stale time y polling en segundos
        self.orders_stale_seconds = int(os.getenv("ORDERS_STALE_SECONDS", 30))
        self.orders_poll_seconds = int(os.getenv("ORDERS_POLL_SECONDS", 30))
        self.products_stale_seconds = int(os.getenv("PRODUCTS_STALE_SECONDS", 30))

        # Reintentos contra el almacén (como máximo uno)
        self.store_retries = min(int(os.getenv("STORE_RETRIES", 1)), 1)

        # Máquina de estados: permisiva salvo que se pida avance estricto
        self.strict_order_transitions = _env_bool("STRICT_ORDER_TRANSITIONS", False)

        # Mesas válidas
        self.table_min = int(os.getenv("TABLE_MIN", 1))
        self.table_max = int(os.getenv("TABLE_MAX", 500))

        # Historial visible de pedidos entregados
        self.history_limit = int(os.getenv("HISTORY_LIMIT", 12))

        # Carritos inactivos se descartan después de este tiempo
        self.cart_idle_minutes = int(os.getenv("CART_IDLE_MINUTES", 120))

        self.currency_locale = os.getenv("CURRENCY_LOCALE", "es_CL")

        self.cors_origins = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
            if origin.strip()
        ]

    def connect_to_database(self):
        logging.info(f"BASE DE DATOS >>> Conectando al almacén ({self.environment})")
        return self.database_url
