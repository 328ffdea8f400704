import os

# Base en memoria antes de importar la aplicación
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from casino_eats import create_app
from casino_eats.cache.orders import OrderCacheManager
from casino_eats.cache.product import ProductCacheManager
from casino_eats.database.connection import drop_db, engine, init_db
from casino_eats.helpers.cart.sessions import CartSessionRegistry
from casino_eats.models import Product
from casino_eats.storage.orders import OrderStore
from casino_eats.storage.products import ProductStore


@pytest.fixture(autouse=True)
def database():
    init_db()
    yield engine
    drop_db()


@pytest.fixture
def order_store():
    return OrderStore()


@pytest.fixture
def product_store():
    return ProductStore()


@pytest.fixture
def order_cache(order_store):
    return OrderCacheManager(store=order_store, strict_transitions=False, history_limit=12)


@pytest.fixture
def product_cache(product_store):
    return ProductCacheManager(store=product_store)


@pytest.fixture
def carts():
    return CartSessionRegistry()


@pytest.fixture
def client(order_cache, product_cache, carts):
    app = create_app(order_cache, product_cache, carts, enable_scheduler=False)
    return TestClient(app)


@pytest.fixture
def menu(database):
    products = [
        Product(id="1", name="Cerveza Corona", price=4500, category="bebidas"),
        Product(id="2", name="Café Americano", price=2800, category="bebidas"),
        Product(id="3", name="Hamburguesa Clásica", price=8900, category="alimentos"),
        Product(id="4", name="Torta de Chocolate", price=3900, category="postres"),
        Product(id="5", name="Agua Mineral", price=2000, category="bebidas", available=False),
        Product(id="6", name="Maní Salado", price=1500, category="snacks"),
    ]
    with Session(database) as session:
        session.add_all(products)
        session.commit()
    return {"cerveza": "1", "cafe": "2", "hamburguesa": "3", "torta": "4", "agua": "5", "mani": "6"}


def make_product(product_id, name, price, category="bebidas", available=True):
    return SimpleNamespace(id=product_id, name=name, price=price, category=category, available=available)


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def submitted_at():
    def _at(day, hour=12, minute=0, second=0):
        return datetime(2026, 10, day, hour, minute, second, tzinfo=timezone.utc)
    return _at
