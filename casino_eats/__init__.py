import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from casino_eats.cache.orders import OrderCacheManager
from casino_eats.cache.product import ProductCacheManager
from casino_eats.configuration.settings import Configuration
from casino_eats.core.exceptions.handlers import register_exception_handlers
from casino_eats.database.connection import init_db
from casino_eats.functions.scheduler.scheduler import start_scheduler
from casino_eats.helpers.cart.sessions import CartSessionRegistry

from casino_eats.routes.home import HomeRouter
from casino_eats.routes.cart.cart import CartRouter
from casino_eats.routes.order.order import OrderRouter
from casino_eats.routes.product.product import ProductRouter

configuration = Configuration()

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logging.info(f"SISTEMA >>> Ambiente cargado: {configuration.environment}")


def create_app(
    order_cache: Optional[OrderCacheManager] = None,
    product_cache: Optional[ProductCacheManager] = None,
    carts: Optional[CartSessionRegistry] = None,
    enable_scheduler: bool = True,
):
    """
    Crea y configura la aplicación FastAPI, incluyendo middlewares y rutas.
    """
    order_cache = order_cache or OrderCacheManager()
    product_cache = product_cache or ProductCacheManager()
    carts = carts or CartSessionRegistry()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        scheduler = None
        if enable_scheduler:
            scheduler = start_scheduler(order_cache, carts)
            logging.info(f"SISTEMA >>> Polling de pedidos cada {configuration.orders_poll_seconds}s")
        yield
        if scheduler:
            scheduler.shutdown(wait=False)

    app = FastAPI(title="Casino EATS", lifespan=lifespan)

    logging.info("SISTEMA >>> Inicializando la base de datos...")
    init_db()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=configuration.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(HomeRouter())
    app.include_router(ProductRouter(product_cache))
    app.include_router(CartRouter(carts, product_cache, order_cache))
    app.include_router(OrderRouter(order_cache))

    app.state.order_cache = order_cache
    app.state.product_cache = product_cache
    app.state.carts = carts

    return app
