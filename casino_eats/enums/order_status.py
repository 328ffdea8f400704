from enum import Enum

# Pendiente -> En Preparación -> Preparado -> Entregado
class OrderStatus(str, Enum):
    PENDING = "Pendiente"
    IN_PREPARATION = "En Preparación"
    READY = "Preparado"
    DELIVERED = "Entregado"
