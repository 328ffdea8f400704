import logging
from datetime import date, datetime, time, timezone
from typing import List, Optional, Tuple

from casino_eats.configuration.settings import Configuration
from casino_eats.core.exceptions.errors import InvalidTableNumberError, PersistenceError
from casino_eats.enums.order_status import OrderStatus
from casino_eats.helpers.order.status_flow import build_status_update, coerce_status, validate_transition
from casino_eats.helpers.table.table_resolver import parse_table_number
from casino_eats.schemas.order.order import OrderCreate, OrderRead, OrderStats, OrderViewRead
from casino_eats.storage.orders import OrderStore
from casino_eats.utils.cache import DataCache
from casino_eats.utils.store_calls import call_store

configuration = Configuration()

DateRange = Tuple[Optional[date], Optional[date]]


def day_bounds(date_from: Optional[date], date_to: Optional[date]) -> Tuple[Optional[datetime], Optional[datetime]]:
    """[date_from 00:00:00, date_to 23:59:59] en UTC; un límite ausente no acota."""
    start = datetime.combine(date_from, time(0, 0, 0), tzinfo=timezone.utc) if date_from else None
    end = datetime.combine(date_to, time(23, 59, 59), tzinfo=timezone.utc) if date_to else None
    return start, end


def partition_orders(orders: List[OrderRead]) -> Tuple[List[OrderRead], List[OrderRead]]:
    active = [order for order in orders if order.status != OrderStatus.DELIVERED]
    history = [order for order in orders if order.status == OrderStatus.DELIVERED]
    return active, history


def count_by_status(orders: List[OrderRead]) -> OrderStats:
    stats = OrderStats()
    for order in orders:
        if order.status == OrderStatus.PENDING:
            stats.pending += 1
        elif order.status == OrderStatus.IN_PREPARATION:
            stats.in_preparation += 1
        elif order.status == OrderStatus.READY:
            stats.ready += 1
        elif order.status == OrderStatus.DELIVERED:
            stats.delivered += 1
    return stats


class OrderCacheManager:
    """
    Vista sincronizada de los pedidos.

    Combina dos mecanismos: la vista vence tras `stale_seconds` y un job
    de intervalo la vuelve a pedir (pull), y cada mutación exitosa invalida
    la caché y vuelve a pedir la vista observada (invalidate-on-write).
    Las respuestas que llegan tarde nunca pisan una vista más nueva.
    """

    _cache_key_prefix = "orders_"

    def __init__(
        self,
        store: Optional[OrderStore] = None,
        cache: Optional[DataCache] = None,
        stale_seconds: Optional[int] = None,
        retries: Optional[int] = None,
        strict_transitions: Optional[bool] = None,
        history_limit: Optional[int] = None,
    ):
        self.store = store or OrderStore()
        self.stale_seconds = configuration.orders_stale_seconds if stale_seconds is None else stale_seconds
        self.cache = cache or DataCache(default_ttl=self.stale_seconds)
        self.retries = configuration.store_retries if retries is None else retries
        self.strict_transitions = (
            configuration.strict_order_transitions if strict_transitions is None else strict_transitions
        )
        self.history_limit = configuration.history_limit if history_limit is None else history_limit

        self._watched: DateRange = (None, None)
        self._issued_ticket = 0
        self._applied_ticket = 0
        self._view: Optional[OrderViewRead] = None
        self._error: Optional[str] = None

    def get_cache_key(self, date_from: Optional[date], date_to: Optional[date]) -> str:
        """Una entrada de caché por rango de fechas"""
        return f"{self._cache_key_prefix}{date_from or '*'}_{date_to or '*'}"

    # --- lectura ---

    async def list_orders(self, date_from: Optional[date] = None, date_to: Optional[date] = None) -> List[OrderRead]:
        """Pedidos del rango, del más nuevo al más antiguo. Usa la caché mientras esté fresca."""
        cache_key = self.get_cache_key(date_from, date_to)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        start, end = day_bounds(date_from, date_to)
        orders = await call_store(self.store.fetch, start, end, retries=self.retries, area="PEDIDOS")
        # El orden es contrato: se garantiza aunque el almacén no lo respete
        orders = sorted(orders, key=lambda order: order.submitted_at, reverse=True)

        self.cache.set(cache_key, orders, ttl=self.stale_seconds)
        logging.info(f"PEDIDOS >>> {len(orders)} pedidos obtenidos ({date_from or '-'} a {date_to or '-'})")
        return orders

    async def load_view(
        self,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        force: bool = False,
    ) -> OrderViewRead:
        """
        Cambia el filtro observado y resuelve su vista.

        Cada llamada recibe un ticket; solo se aplica si es más nuevo que el
        último aplicado, así una respuesta lenta de un filtro anterior no
        reemplaza el resultado de un filtro más reciente.
        """
        self._watched = (date_from, date_to)
        self._issued_ticket += 1
        ticket = self._issued_ticket

        if force:
            self.cache.clear(self.get_cache_key(date_from, date_to))

        try:
            orders = await self.list_orders(date_from, date_to)
        except PersistenceError as e:
            # Un fallo del filtro más nuevo también cierra el paso a respuestas anteriores
            if ticket > self._applied_ticket:
                self._applied_ticket = ticket
                self._error = e.detail
            raise

        if ticket > self._applied_ticket:
            self._applied_ticket = ticket
            self._error = None
            self._view = self._build_view(orders, date_from, date_to)
        else:
            logging.info(f"PEDIDOS >>> Respuesta {ticket} descartada, ya se aplicó la {self._applied_ticket}")

        return self.current_view

    async def refresh(self) -> OrderViewRead:
        date_from, date_to = self._watched
        return await self.load_view(date_from, date_to, force=True)

    async def poll(self) -> None:
        """Job de intervalo: vuelve a pedir la vista observada."""
        try:
            await self.refresh()
        except PersistenceError as e:
            # Queda como estado de error en la vista; el próximo intervalo vuelve a intentar
            logging.warning(f"PEDIDOS >>> Polling sin respuesta -> {e.detail}")

    @property
    def watched_range(self) -> DateRange:
        return self._watched

    @property
    def current_view(self) -> OrderViewRead:
        if self._view is None:
            date_from, date_to = self._watched
            return OrderViewRead(date_from=date_from, date_to=date_to, is_loading=self._error is None, error=self._error)
        return self._view.model_copy(update={"error": self._error})

    def _build_view(self, orders: List[OrderRead], date_from: Optional[date], date_to: Optional[date]) -> OrderViewRead:
        active, history = partition_orders(orders)
        return OrderViewRead(
            date_from=date_from,
            date_to=date_to,
            orders=orders,
            active=active,
            history=history[: self.history_limit] if self.history_limit else history,
            history_total=len(history),
            stats=count_by_status(orders),
            fetched_at=datetime.now(timezone.utc),
        )

    def stats(self) -> OrderStats:
        return self.current_view.stats

    # --- escritura ---

    def invalidate(self) -> None:
        cleared = self.cache.clear_prefix(self._cache_key_prefix)
        logging.debug(f"PEDIDOS >>> {cleared} vistas invalidadas")

    async def _after_write(self) -> None:
        self.invalidate()
        try:
            await self.refresh()
        except PersistenceError as e:
            # La escritura ya se confirmó; la vista se recupera en el próximo polling
            logging.warning(f"PEDIDOS >>> No se pudo refrescar tras la escritura -> {e.detail}")

    async def get_order(self, order_id: str) -> OrderRead:
        return await call_store(self.store.get, order_id, retries=self.retries, area="PEDIDOS")

    async def submit_order(self, order: OrderCreate) -> OrderRead:
        table_number = parse_table_number(order.table_number)
        if table_number is None:
            raise InvalidTableNumberError(order.table_number, configuration.table_min, configuration.table_max)

        created = await call_store(
            self.store.insert,
            table_number,
            order.line_items,
            order.total_amount,
            order.note or "",
            retries=self.retries,
            area="PEDIDOS",
        )
        logging.info(f"PEDIDOS >>> Pedido {created.id} enviado: mesa {created.table_number}, total {created.total_amount}")

        await self._after_write()
        return created

    async def update_order_status(self, order_id: str, status) -> OrderRead:
        target = coerce_status(status)

        if self.strict_transitions:
            current = await self.get_order(order_id)
            validate_transition(current.status, target, strict=True)

        updated = await call_store(
            self.store.update,
            order_id,
            build_status_update(target),
            retries=self.retries,
            area="PEDIDOS",
        )
        logging.info(f"PEDIDOS >>> Pedido {order_id} -> {updated.status.value}")

        await self._after_write()
        return updated

    async def set_status(self, order_id: str, status) -> OrderRead:
        return await self.update_order_status(order_id, status)
