from typing import Optional, Union
from pydantic import BaseModel

from casino_eats.enums.table_source import TableSource


class TableSelection(BaseModel):
    table_number: Optional[int] = None
    source: Optional[TableSource] = None

    @property
    def is_resolved(self) -> bool:
        return self.table_number is not None


class TableSelectionRead(TableSelection):
    manual_entry_enabled: bool


class TableEntryRequest(BaseModel):
    # Se acepta texto tal como llega del formulario
    table_number: Union[int, str, None] = None
