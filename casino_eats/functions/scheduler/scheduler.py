# casino_eats/functions/scheduler/scheduler.py
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from casino_eats.cache.orders import OrderCacheManager
from casino_eats.configuration.settings import Configuration
from casino_eats.functions.cart.cart_jobs import expire_idle_carts
from casino_eats.helpers.cart.sessions import CartSessionRegistry

configuration = Configuration()

ORDERS_POLL_JOB_ID = "orders_poll"
CARTS_EXPIRE_JOB_ID = "carts_expire"


def build_scheduler(order_cache: OrderCacheManager, carts: CartSessionRegistry) -> AsyncIOScheduler:
    scheduler = AsyncIOScheduler(timezone="UTC")

    # Refresca la vista de pedidos observada cada ORDERS_POLL_SECONDS
    scheduler.add_job(
        order_cache.poll,
        "interval",
        seconds=configuration.orders_poll_seconds,
        id=ORDERS_POLL_JOB_ID,
        max_instances=1,
        coalesce=True,
    )

    # Descarta carritos abandonados cada 10 minutos
    scheduler.add_job(expire_idle_carts, "interval", minutes=10, args=[carts], id=CARTS_EXPIRE_JOB_ID)

    return scheduler


def start_scheduler(order_cache: OrderCacheManager, carts: CartSessionRegistry) -> AsyncIOScheduler:
    # Debe llamarse con el event loop corriendo
    scheduler = build_scheduler(order_cache, carts)
    scheduler.start()
    return scheduler
