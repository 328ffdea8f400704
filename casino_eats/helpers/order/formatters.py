from datetime import datetime
from typing import Optional
from babel.numbers import format_decimal as babel_format_decimal
from babel.dates import format_datetime as babel_format_datetime

from casino_eats.configuration.settings import Configuration

configuration = Configuration()


def format_number(value: float, locale_str: Optional[str] = None) -> str:
    # Entero con separador de miles "." y sin decimales: 1500 -> "1.500"
    formatted = babel_format_decimal(round(value), format="#,##0", locale=locale_str or configuration.currency_locale)
    return formatted.replace(",", ".")


def format_currency(value: float, locale_str: Optional[str] = None) -> str:
    return f"${format_number(value, locale_str)}"


def format_order_date(date: datetime, locale_str: Optional[str] = None) -> str:
    return babel_format_datetime(date, "dd/MM/yyyy HH:mm", locale=locale_str or configuration.currency_locale)

