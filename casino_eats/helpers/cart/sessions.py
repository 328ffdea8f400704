from datetime import datetime, timedelta, timezone
import hashlib
import logging
from typing import Any, Dict, List, Optional
import uuid

from casino_eats.core.exceptions.errors import CartNotFoundError
from casino_eats.helpers.cart.cart import Cart
from casino_eats.helpers.order.formatters import format_currency
from casino_eats.helpers.table.table_resolver import TableAssignmentResolver
from casino_eats.schemas.cart.cart import CartRead
from casino_eats.schemas.table.table_selection import TableSelectionRead

CART_CODE_HASH_LENGTH = 10


def generate_cart_code() -> str:
    timestamp = datetime.now(timezone.utc).isoformat()
    raw = f"{timestamp}-{uuid.uuid4()}"
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()[:CART_CODE_HASH_LENGTH]


class CartSession:
    """Carrito + mesa de una sesión de navegación. Nunca se comparte."""

    def __init__(self, code: str, table_link_value: Any = None):
        self.code = code
        self.table = TableAssignmentResolver(table_link_value)
        self.cart = Cart(self.table)
        self.created_at = datetime.now(timezone.utc)
        self.updated_at = self.created_at

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def to_read(self) -> CartRead:
        selection = self.table.selection
        return CartRead(
            code=self.code,
            table=TableSelectionRead(
                table_number=selection.table_number,
                source=selection.source,
                manual_entry_enabled=self.table.manual_entry_enabled,
            ),
            items=self.cart.items,
            total_amount=self.cart.compute_total(),
            item_count=self.cart.item_count,
            formatted_total=format_currency(self.cart.compute_total()),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class CartSessionRegistry:
    def __init__(self):
        self._sessions: Dict[str, CartSession] = {}

    def create(self, table_link_value: Any = None) -> CartSession:
        session = CartSession(generate_cart_code(), table_link_value)
        self._sessions[session.code] = session
        logging.info(f"CARRITO >>> Sesión {session.code} creada (mesa: {session.table.selection.table_number})")
        return session

    def get(self, code: str) -> CartSession:
        session = self._sessions.get(code)
        if session is None:
            raise CartNotFoundError(code)
        return session

    def discard(self, code: str) -> None:
        self._sessions.pop(code, None)

    def codes(self) -> List[str]:
        return list(self._sessions)

    def expire_idle(self, max_idle: timedelta, now: Optional[datetime] = None) -> int:
        now = now or datetime.now(timezone.utc)
        threshold = now - max_idle
        expired = [code for code, session in self._sessions.items() if session.updated_at < threshold]
        for code in expired:
            del self._sessions[code]
        return len(expired)
