from datetime import datetime, timezone
import logging
from typing import Any, Dict, List, Optional, Sequence
from sqlmodel import Session, select

from casino_eats.core.exceptions.errors import ProductNotFoundError
from casino_eats.database.connection import engine as default_engine
from casino_eats.models.product.product import Product
from casino_eats.schemas.product.product import ProductRead


class ProductStore:
    """Acceso a la tabla productos. Llamadas bloqueantes."""

    def __init__(self, engine=None):
        self.engine = engine or default_engine

    def fetch(self, categories: Optional[Sequence[str]] = None) -> List[ProductRead]:
        with Session(self.engine) as session:
            stmt = select(Product)
            if categories:
                stmt = stmt.where(Product.category.in_(list(categories)))
            stmt = stmt.order_by(Product.category, Product.name)

            products = session.exec(stmt).all()
            return [ProductRead.model_validate(product) for product in products]

    def get(self, product_id: str) -> ProductRead:
        with Session(self.engine) as session:
            product = session.get(Product, product_id)
            if not product:
                raise ProductNotFoundError(product_id)
            return ProductRead.model_validate(product)

    def insert(self, values: Dict[str, Any]) -> ProductRead:
        with Session(self.engine) as session:
            product = Product(**values)
            session.add(product)
            session.commit()
            session.refresh(product)
            logging.info(f"PRODUCTOS >>> Producto {product.name} creado en {product.category}")
            return ProductRead.model_validate(product)

    def update(self, product_id: str, values: Dict[str, Any]) -> ProductRead:
        with Session(self.engine) as session:
            product = session.get(Product, product_id)
            if not product:
                raise ProductNotFoundError(product_id)

            for key, value in values.items():
                setattr(product, key, value)
            product.updated_at = datetime.now(timezone.utc)

            session.add(product)
            session.commit()
            session.refresh(product)
            return ProductRead.model_validate(product)

    def delete(self, product_id: str) -> None:
        with Session(self.engine) as session:
            product = session.get(Product, product_id)
            if not product:
                raise ProductNotFoundError(product_id)

            session.delete(product)
            session.commit()
            logging.info(f"PRODUCTOS >>> Producto {product_id} eliminado")
