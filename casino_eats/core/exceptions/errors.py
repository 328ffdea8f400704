from typing import Any, Optional


class CasinoEatsError(Exception):
    """Base de los errores del núcleo de pedidos."""

    def __init__(self, detail: str, solution: Optional[str] = None, errors: Optional[Any] = None):
        super().__init__(detail)
        self.detail = detail
        self.solution = solution
        self.errors = errors


# --- Validación: se rechazan localmente, nunca llegan al almacén ---

class ValidationError(CasinoEatsError):
    pass


class TableNotSelectedError(ValidationError):
    def __init__(self):
        super().__init__(
            "No hay una mesa seleccionada",
            solution="Ingrese el número de mesa antes de agregar productos",
        )


class InvalidTableNumberError(ValidationError):
    def __init__(self, value: Any, minimum: int, maximum: int):
        super().__init__(
            f"Número de mesa inválido: {value!r}",
            solution=f"Use un número entero entre {minimum} y {maximum}",
        )
        self.value = value


class ManualEntryDisabledError(ValidationError):
    def __init__(self, table_number: int):
        super().__init__(
            f"La mesa {table_number} viene del enlace y no se puede modificar",
        )
        self.table_number = table_number


class InvalidCategoryError(ValidationError):
    def __init__(self, category: Any, allowed):
        super().__init__(
            f"Categoría inválida: {category!r}",
            solution=f"Categorías permitidas: {', '.join(allowed)}",
        )
        self.category = category


class InvalidStatusError(ValidationError):
    def __init__(self, status: Any, allowed):
        super().__init__(
            f"Estado inválido: {status!r}",
            solution=f"Estados permitidos: {', '.join(allowed)}",
        )
        self.status = status


class InvalidTransitionError(ValidationError):
    def __init__(self, current, target):
        super().__init__(f"No se puede pasar de '{current.value}' a '{target.value}'")
        self.current = current
        self.target = target


class EmptyCartError(ValidationError):
    def __init__(self):
        super().__init__("El carrito está vacío")


# --- Persistencia ---

class PersistenceError(CasinoEatsError):
    pass


class NotFoundError(CasinoEatsError):
    pass


class OrderNotFoundError(NotFoundError):
    def __init__(self, order_id: str):
        super().__init__("Pedido no encontrado")
        self.order_id = order_id


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: str):
        super().__init__("Producto no encontrado")
        self.product_id = product_id


class CartNotFoundError(NotFoundError):
    def __init__(self, code: str):
        super().__init__("Carrito no encontrado")
        self.code = code
