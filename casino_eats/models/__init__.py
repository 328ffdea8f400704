# casino_eats/models/__init__.py

from .order.order import Order
from .product.product import Product
