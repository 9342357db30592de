# Database modules

from .document import JsonDocument
from .products import ProductDatabase
from .accounts import AccountDatabase
from .carts import CartDatabase

__all__ = [
    "JsonDocument",
    "ProductDatabase",
    "AccountDatabase",
    "CartDatabase",
]
