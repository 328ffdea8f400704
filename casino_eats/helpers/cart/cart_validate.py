# casino_eats/helpers/cart/cart_validate.py

from casino_eats.core.exceptions.errors import EmptyCartError, TableNotSelectedError
from casino_eats.helpers.cart.cart import Cart


def validate_not_empty(cart: Cart):
    if cart.is_empty():
        raise EmptyCartError()


def validate_table_selected(cart: Cart):
    if cart.table_number is None:
        raise TableNotSelectedError()


def validate_checkout(cart: Cart):
    validate_table_selected(cart)
    validate_not_empty(cart)
