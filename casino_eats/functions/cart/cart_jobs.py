from datetime import timedelta
import logging

from casino_eats.configuration.settings import Configuration
from casino_eats.helpers.cart.sessions import CartSessionRegistry

configuration = Configuration()


def expire_idle_carts(registry: CartSessionRegistry):
    expired = registry.expire_idle(timedelta(minutes=configuration.cart_idle_minutes))
    logging.info(f"CARRITO >>> Descartando {expired} carritos inactivos, quedan {len(registry.codes())}")
    return expired
