from typing import List
from fastapi import APIRouter, status

from casino_eats.cache.product import ProductCacheManager
from casino_eats.schemas.product.product import MenuSection, ProductCreate, ProductRead, ProductStats, ProductUpdate


class ProductRouter(APIRouter):
    def __init__(self, products: ProductCacheManager, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.products = products

        self.add_api_route("/menu/", self.get_menu, methods=["GET"], response_model=List[MenuSection])
        self.add_api_route("/products/", self.list_products, methods=["GET"], response_model=List[ProductRead])
        self.add_api_route("/products/", self.create_product, methods=["POST"], response_model=ProductRead, status_code=status.HTTP_201_CREATED)
        self.add_api_route("/products/stats", self.get_product_stats, methods=["GET"], response_model=ProductStats)
        self.add_api_route("/products/{product_id}", self.update_product, methods=["PUT"], response_model=ProductRead)
        self.add_api_route("/products/{product_id}", self.delete_product, methods=["DELETE"], response_model=dict)

    async def get_menu(self):
        return await self.products.get_menu()

    async def list_products(self):
        return await self.products.list_products()

    async def get_product_stats(self):
        return await self.products.stats()

    async def create_product(self, product_request: ProductCreate):
        return await self.products.create_product(product_request)

    async def update_product(self, product_id: str, product_update: ProductUpdate):
        return await self.products.update_product(product_id, product_update)

    async def delete_product(self, product_id: str):
        await self.products.delete_product(product_id)
        return {"message": "Producto eliminado con éxito"}
