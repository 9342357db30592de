"""Store providers for route injection; tests swap these via app.dependency_overrides"""

from .core.config import get_settings
from .database.accounts import AccountDatabase
from .database.carts import CartDatabase
from .database.document import JsonDocument, open_database
from .database.products import ProductDatabase


def get_database() -> JsonDocument:
    """User/cart database document"""
    return open_database(get_settings().db_path)


def get_product_db() -> ProductDatabase:
    return ProductDatabase(JsonDocument(get_settings().get_products_path()))


def get_account_db() -> AccountDatabase:
    return AccountDatabase(get_database())


def get_cart_db() -> CartDatabase:
    return CartDatabase(get_database())
