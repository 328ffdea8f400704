from typing import Any, Dict, Iterable, List, Sequence, TypeVar

from casino_eats.core.exceptions.errors import InvalidCategoryError
from casino_eats.enums.product_category import ProductCategory

P = TypeVar("P")

# Solo estas categorías llegan al menú y al carrito, en este orden
ORDERABLE_CATEGORIES: Sequence[str] = (ProductCategory.ALIMENTOS.value, ProductCategory.BEBIDAS.value)

# Categorías que el administrador puede asignar a un producto
ADMIN_CATEGORIES: Sequence[str] = tuple(category.value for category in ProductCategory)


def _category_of(product: Any) -> str:
    category = product.category
    return category.value if isinstance(category, ProductCategory) else category


def is_orderable(product: Any, allowed: Sequence[str] = ORDERABLE_CATEGORIES) -> bool:
    return bool(product.available) and _category_of(product) in allowed


def filter_orderable(products: Iterable[P], allowed: Sequence[str] = ORDERABLE_CATEGORIES) -> List[P]:
    """
    Productos disponibles de categorías permitidas.

    Se aplica aunque la consulta al almacén ya haya filtrado por categoría.
    """
    return [product for product in products if is_orderable(product, allowed)]


def group_by_category(products: Iterable[P], allowed: Sequence[str] = ORDERABLE_CATEGORIES) -> Dict[str, List[P]]:
    grouped: Dict[str, List[P]] = {category: [] for category in allowed}
    for product in filter_orderable(products, allowed):
        grouped[_category_of(product)].append(product)
    return grouped


def validate_category(category: Any, allowed: Sequence[str] = ADMIN_CATEGORIES) -> str:
    if isinstance(category, ProductCategory):
        category = category.value
    if category not in allowed:
        raise InvalidCategoryError(category, allowed)
    return category
