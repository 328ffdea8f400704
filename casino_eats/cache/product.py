import logging
from typing import Dict, List, Optional

from casino_eats.configuration.settings import Configuration
from casino_eats.core.exceptions.errors import ProductNotFoundError
from casino_eats.helpers.product.catalog import (
    ORDERABLE_CATEGORIES,
    filter_orderable,
    group_by_category,
    validate_category,
)
from casino_eats.schemas.product.product import MenuSection, ProductCreate, ProductRead, ProductStats, ProductUpdate
from casino_eats.storage.products import ProductStore
from casino_eats.utils.cache import DataCache
from casino_eats.utils.store_calls import call_store

configuration = Configuration()


class ProductCacheManager:
    _cache_key_prefix = "products_"

    def __init__(
        self,
        store: Optional[ProductStore] = None,
        cache: Optional[DataCache] = None,
        stale_seconds: Optional[int] = None,
        retries: Optional[int] = None,
    ):
        self.store = store or ProductStore()
        self.stale_seconds = configuration.products_stale_seconds if stale_seconds is None else stale_seconds
        self.cache = cache or DataCache(default_ttl=self.stale_seconds)
        self.retries = configuration.store_retries if retries is None else retries

    def get_cache_key(self, suffix: str = "") -> str:
        """Genera la clave de caché completa"""
        return f"{self._cache_key_prefix}{suffix}"

    def clear_products_cache(self) -> None:
        self.cache.clear_prefix(self._cache_key_prefix)
        logging.info("PRODUCTOS >>> Caché de productos limpiada")

    async def _cached_fetch(self, suffix: str, categories=None) -> List[ProductRead]:
        cache_key = self.get_cache_key(suffix)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        products = await call_store(self.store.fetch, categories, retries=self.retries, area="PRODUCTOS")
        self.cache.set(cache_key, products, ttl=self.stale_seconds)
        logging.info(f"PRODUCTOS >>> {len(products)} productos obtenidos ({suffix})")
        return products

    # --- catálogo completo (administración) ---

    async def list_products(self) -> List[ProductRead]:
        return await self._cached_fetch("all")

    async def stats(self) -> ProductStats:
        products = await self.list_products()
        available = [p for p in products if p.available]
        average = round(sum(p.price for p in products) / len(products)) if products else 0
        return ProductStats(
            total=len(products),
            available=len(available),
            unavailable=len(products) - len(available),
            categories=sorted({p.category for p in products}),
            average_price=average,
        )

    # --- menú (clientes y carrito) ---

    async def orderable_products(self) -> List[ProductRead]:
        # El filtro del almacén es solo una optimización; el gate se aplica igual
        products = await self._cached_fetch("orderable", list(ORDERABLE_CATEGORIES))
        return filter_orderable(products)

    async def get_menu(self) -> List[MenuSection]:
        grouped: Dict[str, List[ProductRead]] = group_by_category(await self.orderable_products())
        return [MenuSection(category=category, products=products) for category, products in grouped.items()]

    async def find_orderable(self, product_id: str) -> ProductRead:
        for product in await self.orderable_products():
            if product.id == product_id:
                return product
        raise ProductNotFoundError(product_id)

    # --- mutaciones (administración) ---

    async def create_product(self, data: ProductCreate) -> ProductRead:
        values = data.model_dump()
        values["category"] = validate_category(data.category)

        product = await call_store(self.store.insert, values, retries=self.retries, area="PRODUCTOS")
        self.clear_products_cache()
        return product

    async def update_product(self, product_id: str, data: ProductUpdate) -> ProductRead:
        values = data.model_dump(exclude_unset=True)
        if "category" in values:
            values["category"] = validate_category(values["category"])

        product = await call_store(self.store.update, product_id, values, retries=self.retries, area="PRODUCTOS")
        self.clear_products_cache()
        return product

    async def delete_product(self, product_id: str) -> None:
        await call_store(self.store.delete, product_id, retries=self.retries, area="PRODUCTOS")
        self.clear_products_cache()
