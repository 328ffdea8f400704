import pytest

from casino_eats.core.exceptions.errors import InvalidCategoryError
from casino_eats.enums.product_category import ProductCategory
from casino_eats.helpers.product.catalog import (
    ORDERABLE_CATEGORIES,
    filter_orderable,
    group_by_category,
    is_orderable,
    validate_category,
)


@pytest.fixture
def products(product_factory):
    return [
        product_factory("1", "Cerveza Corona", 4500, "bebidas"),
        product_factory("2", "Hamburguesa", 8900, "alimentos"),
        product_factory("3", "Torta de Chocolate", 3500, "postres"),
        product_factory("4", "Agua Mineral", 1500, "bebidas", available=False),
        product_factory("5", "Maní Salado", 1200, "snacks"),
        product_factory("6", "Café Americano", 2800, ProductCategory.BEBIDAS),
    ]


def test_allow_list_order():
    assert ORDERABLE_CATEGORIES == ("alimentos", "bebidas")


def test_filter_keeps_available_allowed_products(products):
    kept = filter_orderable(products)

    assert [product.id for product in kept] == ["1", "2", "6"]


def test_filter_applies_even_to_prefiltered_input(products):
    # Simula una respuesta del almacén que ignoró el filtro de categorías
    leaked = [products[2], products[4]]

    assert filter_orderable(leaked) == []


def test_unavailable_product_is_not_orderable(product_factory):
    assert not is_orderable(product_factory("9", "Jugo", 2000, "bebidas", available=False))


def test_group_follows_allow_list_order(products):
    grouped = group_by_category(products)

    assert list(grouped) == ["alimentos", "bebidas"]
    assert [product.name for product in grouped["alimentos"]] == ["Hamburguesa"]
    assert [product.name for product in grouped["bebidas"]] == ["Cerveza Corona", "Café Americano"]


def test_group_keeps_empty_categories(product_factory):
    grouped = group_by_category([product_factory("1", "Cerveza", 4500, "bebidas")])

    assert grouped["alimentos"] == []


class TestValidateCategory:
    @pytest.mark.parametrize("category", ["alimentos", "bebidas", "postres", "snacks", ProductCategory.POSTRES])
    def test_admin_categories(self, category):
        assert validate_category(category) in ("alimentos", "bebidas", "postres", "snacks")

    @pytest.mark.parametrize("category", ["cocteles", "", None, "Bebidas"])
    def test_unknown_category_is_rejected(self, category):
        with pytest.raises(InvalidCategoryError):
            validate_category(category)

    def test_custom_allow_list(self):
        with pytest.raises(InvalidCategoryError):
            validate_category("postres", allowed=ORDERABLE_CATEGORIES)
