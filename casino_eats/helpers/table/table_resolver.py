import logging
import re
from typing import Any, Callable, List, Optional

from casino_eats.configuration.settings import Configuration
from casino_eats.core.exceptions.errors import InvalidTableNumberError, ManualEntryDisabledError
from casino_eats.enums.table_source import TableSource
from casino_eats.schemas.table.table_selection import TableSelection

configuration = Configuration()

TABLE_QUERY_PARAM = "mesa"

_DIGITS = re.compile(r"\d+", re.ASCII)


def parse_table_number(
    raw: Any,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> Optional[int]:
    """
    Interpreta un número de mesa de forma defensiva.

    Devuelve el entero si es válido y está dentro de [minimum, maximum];
    cualquier otra cosa (texto, decimales, negativos, fuera de rango) es None.
    """
    minimum = configuration.table_min if minimum is None else minimum
    maximum = configuration.table_max if maximum is None else maximum

    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not _DIGITS.fullmatch(text):
            return None
        value = int(text)

    if minimum <= value <= maximum:
        return value
    return None


class TableAssignmentResolver:
    """
    Resuelve la mesa activa de una sesión.

    La mesa del enlace (QR) es autoritativa y bloquea el ingreso manual.
    Si no llega en el enlace, la escribe el cliente. Cada vez que la
    selección queda vacía se avisa a los suscriptores (el carrito se vacía).
    """

    def __init__(self, link_value: Any = None, minimum: Optional[int] = None, maximum: Optional[int] = None):
        self.minimum = configuration.table_min if minimum is None else minimum
        self.maximum = configuration.table_max if maximum is None else maximum
        self.selection = TableSelection()
        self._listeners: List[Callable[[TableSelection], None]] = []
        self.resolve_from_link(link_value)

    @property
    def manual_entry_enabled(self) -> bool:
        return self.selection.source != TableSource.FROM_LINK

    def subscribe(self, listener: Callable[[TableSelection], None]) -> None:
        self._listeners.append(listener)

    def resolve_from_link(self, raw: Any) -> TableSelection:
        number = parse_table_number(raw, self.minimum, self.maximum)
        if number is None:
            if raw not in (None, ""):
                logging.warning(f"MESA >>> Valor de mesa inválido en el enlace: {raw!r}")
            return self.selection

        logging.info(f"MESA >>> Mesa {number} tomada del enlace")
        return self._set(TableSelection(table_number=number, source=TableSource.FROM_LINK))

    def enter_manual(self, raw: Any) -> TableSelection:
        if not self.manual_entry_enabled:
            raise ManualEntryDisabledError(self.selection.table_number)

        number = parse_table_number(raw, self.minimum, self.maximum)
        if number is None:
            self._set(TableSelection())
            raise InvalidTableNumberError(raw, self.minimum, self.maximum)

        return self._set(TableSelection(table_number=number, source=TableSource.MANUAL_ENTRY))

    def _set(self, selection: TableSelection) -> TableSelection:
        self.selection = selection
        for listener in self._listeners:
            listener(selection)
        return selection
