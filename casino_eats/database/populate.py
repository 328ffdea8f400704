import logging
from sqlmodel import Session, select

from casino_eats.configuration.settings import Configuration
from casino_eats.database.connection import engine, init_db
from casino_eats.models import Product

configuration = Configuration()

DEFAULT_PRODUCTS = [
    {"name": "Cerveza Corona", "price": 4500, "category": "bebidas"},
    {"name": "Café Americano", "price": 2800, "category": "bebidas"},
    {"name": "Agua Mineral", "price": 2000, "category": "bebidas"},
    {"name": "Hamburguesa Clásica", "price": 8900, "category": "alimentos"},
    {"name": "Papas Fritas", "price": 3200, "category": "alimentos"},
    {"name": "Sandwich Club", "price": 7500, "category": "alimentos"},
    {"name": "Pollo a la Plancha", "price": 12500, "category": "alimentos"},
    {"name": "Ensalada César", "price": 6800, "category": "alimentos"},
]


def populate_database(session: Session) -> int:
    """Carga el menú inicial si la tabla de productos está vacía."""
    if session.exec(select(Product)).first():
        logging.info("BASE DE DATOS >>> Productos ya cargados, se omite el menú inicial")
        return 0

    session.add_all([Product(**data) for data in DEFAULT_PRODUCTS])
    session.commit()
    logging.info(f"BASE DE DATOS >>> {len(DEFAULT_PRODUCTS)} productos cargados")
    return len(DEFAULT_PRODUCTS)


if __name__ == "__main__":
    init_db()
    with Session(engine) as session:
        populate_database(session)
