import logging
from typing import Any, Dict, List, Optional

from casino_eats.core.exceptions.errors import TableNotSelectedError
from casino_eats.helpers.table.table_resolver import TableAssignmentResolver
from casino_eats.schemas.cart.cart_item import LineItem
from casino_eats.schemas.table.table_selection import TableSelection


class Cart:
    """
    Carrito en memoria de una sesión de compra.

    Un LineItem por producto, en orden de llegada. Los totales se derivan
    siempre de los items; no se guarda ningún total.
    """

    def __init__(self, table_resolver: Optional[TableAssignmentResolver] = None):
        self._items: Dict[str, LineItem] = {}
        self.table_resolver = table_resolver
        if table_resolver is not None:
            table_resolver.subscribe(self._on_table_change)

    # --- lectura ---

    @property
    def items(self) -> List[LineItem]:
        return self.snapshot()

    @property
    def table_number(self) -> Optional[int]:
        if self.table_resolver is None:
            return None
        return self.table_resolver.selection.table_number

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items.values())

    @property
    def total_amount(self) -> int:
        return self.compute_total()

    def compute_total(self) -> int:
        return sum(item.unit_price * item.quantity for item in self._items.values())

    def quantity_of(self, product_id: str) -> int:
        item = self._items.get(product_id)
        return item.quantity if item else 0

    def snapshot(self) -> List[LineItem]:
        return [item.model_copy() for item in self._items.values()]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    # --- mutaciones ---

    def add_item(self, product: Any) -> LineItem:
        self.ensure_table()

        product_id = str(product.id)
        existing = self._items.get(product_id)
        if existing:
            existing.quantity += 1
        else:
            existing = LineItem(id=product_id, name=product.name, unit_price=product.price, quantity=1)
            self._items[product_id] = existing

        logging.info(f"CARRITO >>> {existing.name} x{existing.quantity}")
        return existing.model_copy()

    def update_quantity(self, product_id: str, quantity: int) -> Optional[LineItem]:
        self.ensure_table()

        if quantity <= 0:
            self.remove_item(product_id)
            return None

        item = self._items.get(product_id)
        if item is None:
            return None

        item.quantity = quantity
        return item.model_copy()

    def remove_item(self, product_id: str) -> None:
        self._items.pop(product_id, None)

    def clear(self) -> None:
        self._items.clear()

    def discard_submitted(self, submitted: List[LineItem]) -> None:
        """
        Descuenta del carrito lo que ya se envió como pedido.

        Lo agregado mientras el pedido estaba en camino se conserva.
        """
        for sent in submitted:
            item = self._items.get(sent.id)
            if item is None:
                continue
            remaining = item.quantity - sent.quantity
            if remaining <= 0:
                del self._items[sent.id]
            else:
                item.quantity = remaining

    # --- mesa ---

    def ensure_table(self) -> None:
        if self.table_resolver is None or not self.table_resolver.selection.is_resolved:
            raise TableNotSelectedError()

    def _on_table_change(self, selection: TableSelection) -> None:
        if not selection.is_resolved and self._items:
            logging.info(f"CARRITO >>> Mesa sin asignar, se descartan {len(self)} productos")
            self.clear()
