"""
Ciclo de vida de un pedido.

    Pendiente -> En Preparación -> Preparado -> Entregado

El panel siempre ofrece el estado siguiente, pero la operación acepta
cualquiera de los cuatro estados (modo permisivo). Con
STRICT_ORDER_TRANSITIONS solo se permite avanzar un paso.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from casino_eats.core.exceptions.errors import InvalidStatusError, InvalidTransitionError
from casino_eats.enums.order_status import OrderStatus

ORDER_FLOW: List[OrderStatus] = [
    OrderStatus.PENDING,
    OrderStatus.IN_PREPARATION,
    OrderStatus.READY,
    OrderStatus.DELIVERED,
]

INITIAL_STATUS = OrderStatus.PENDING
TERMINAL_STATUS = OrderStatus.DELIVERED


def coerce_status(value: Any) -> OrderStatus:
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus(value)
    except ValueError:
        # También se acepta el nombre: "DELIVERED", "in_preparation"
        name = str(value).strip().upper()
        if name in OrderStatus.__members__:
            return OrderStatus[name]
        raise InvalidStatusError(value, [s.value for s in ORDER_FLOW])


def next_status(status: OrderStatus) -> Optional[OrderStatus]:
    index = ORDER_FLOW.index(status)
    if index + 1 < len(ORDER_FLOW):
        return ORDER_FLOW[index + 1]
    return None


def is_terminal(status: OrderStatus) -> bool:
    return status == TERMINAL_STATUS


def available_transitions(status: OrderStatus, strict: bool = False) -> List[OrderStatus]:
    """Estados que el panel ofrece para un pedido; ninguno si ya fue entregado."""
    if is_terminal(status):
        return []
    if strict:
        return [next_status(status)]
    return [s for s in ORDER_FLOW if s != status]


def validate_transition(current: OrderStatus, target: Any, strict: bool = False) -> OrderStatus:
    target = coerce_status(target)
    if strict and target != next_status(current):
        raise InvalidTransitionError(current, target)
    return target


def build_status_update(target: Any, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Valores a escribir en el almacén para un cambio de estado.

    Entregado estampa delivered_at; cualquier otro estado deja delivered_at
    tal como estaba (no se limpia al retroceder).
    """
    target = coerce_status(target)
    now = now or datetime.now(timezone.utc)

    values: Dict[str, Any] = {"status": target, "updated_at": now}
    if target == OrderStatus.DELIVERED:
        values["delivered_at"] = now
    return values
