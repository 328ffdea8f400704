import logging
from typing import Optional
from fastapi import APIRouter, Query, status

from casino_eats.cache.orders import OrderCacheManager
from casino_eats.cache.product import ProductCacheManager
from casino_eats.helpers.cart.cart_validate import validate_checkout
from casino_eats.helpers.cart.sessions import CartSessionRegistry
from casino_eats.helpers.table.table_resolver import TABLE_QUERY_PARAM
from casino_eats.schemas.cart.cart import CartRead, CheckoutRequest
from casino_eats.schemas.cart.cart_item import CartItemCreate, CartItemUpdate
from casino_eats.schemas.order.order import OrderCreate, OrderRead
from casino_eats.schemas.table.table_selection import TableEntryRequest


class CartRouter(APIRouter):
    def __init__(
        self,
        carts: CartSessionRegistry,
        products: ProductCacheManager,
        orders: OrderCacheManager,
        *args,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.carts = carts
        self.products = products
        self.orders = orders

        self.add_api_route("/cart/", self.create_cart, methods=["POST"], response_model=CartRead, status_code=status.HTTP_201_CREATED)
        self.add_api_route("/cart/{cart_code}", self.get_cart_by_code, methods=["GET"], response_model=CartRead)
        self.add_api_route("/cart/{cart_code}", self.delete_cart_by_code, methods=["DELETE"], response_model=dict)
        self.add_api_route("/cart/{cart_code}/table", self.set_table_by_code, methods=["PUT"], response_model=CartRead)
        self.add_api_route("/cart/{cart_code}/items/", self.add_item_by_code, methods=["POST"], response_model=CartRead)
        self.add_api_route("/cart/{cart_code}/items/", self.clear_items_by_code, methods=["DELETE"], response_model=CartRead)
        self.add_api_route("/cart/{cart_code}/items/{product_id}", self.update_item_by_code, methods=["PATCH"], response_model=CartRead)
        self.add_api_route("/cart/{cart_code}/items/{product_id}", self.remove_item_by_code, methods=["DELETE"], response_model=CartRead)
        self.add_api_route("/cart/{cart_code}/checkout", self.checkout_by_code, methods=["POST"], response_model=OrderRead, status_code=status.HTTP_201_CREATED)

    async def create_cart(self, mesa: Optional[str] = Query(default=None, alias=TABLE_QUERY_PARAM)):
        session = self.carts.create(mesa)
        return session.to_read()

    async def get_cart_by_code(self, cart_code: str):
        return self.carts.get(cart_code).to_read()

    async def delete_cart_by_code(self, cart_code: str):
        self.carts.get(cart_code)
        self.carts.discard(cart_code)
        return {"message": "Carrito eliminado con éxito"}

    async def set_table_by_code(self, cart_code: str, entry: TableEntryRequest):
        session = self.carts.get(cart_code)
        session.touch()
        session.table.enter_manual(entry.table_number)
        return session.to_read()

    async def add_item_by_code(self, cart_code: str, item_data: CartItemCreate):
        session = self.carts.get(cart_code)
        # Sin mesa se rechaza antes de consultar el catálogo
        session.cart.ensure_table()
        product = await self.products.find_orderable(item_data.product_id)
        session.cart.add_item(product)
        session.touch()
        return session.to_read()

    async def update_item_by_code(self, cart_code: str, product_id: str, item_data: CartItemUpdate):
        session = self.carts.get(cart_code)
        session.cart.update_quantity(product_id, item_data.quantity)
        session.touch()
        return session.to_read()

    async def remove_item_by_code(self, cart_code: str, product_id: str):
        session = self.carts.get(cart_code)
        session.cart.remove_item(product_id)
        session.touch()
        return session.to_read()

    async def clear_items_by_code(self, cart_code: str):
        session = self.carts.get(cart_code)
        session.cart.clear()
        session.touch()
        return session.to_read()

    async def checkout_by_code(self, cart_code: str, checkout: CheckoutRequest):
        session = self.carts.get(cart_code)
        validate_checkout(session.cart)

        submitted = session.cart.snapshot()
        order = await self.orders.submit_order(
            OrderCreate(
                table_number=session.cart.table_number,
                line_items=submitted,
                note=checkout.note or "",
            )
        )

        # Solo con el pedido confirmado, y solo lo que se envió
        session.cart.discard_submitted(submitted)
        session.touch()
        logging.info(f"CARRITO >>> Carrito {cart_code} enviado como pedido {order.id}")
        return order
