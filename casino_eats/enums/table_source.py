from enum import Enum

class TableSource(str, Enum):
    FROM_LINK = "link"        # Mesa incluida en el enlace / QR
    MANUAL_ENTRY = "manual"   # Mesa escrita por el cliente
