from enum import Enum

class ProductCategory(str, Enum):
    ALIMENTOS = "alimentos"
    BEBIDAS = "bebidas"
    POSTRES = "postres"
    SNACKS = "snacks"
