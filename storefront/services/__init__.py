# Storefront services

from .cart_engine import add_item, add_product, remove_item

__all__ = ["add_item", "add_product", "remove_item"]
