# Storefront Models

from .product import Product
from .account import Account, Credentials, AuthResponse
from .cart import Cart, CartItem, CartUpdateRequest, AddToCartRequest, CartResponse

__all__ = [
    "Product",
    "Account",
    "Credentials",
    "AuthResponse",
    "Cart",
    "CartItem",
    "CartUpdateRequest",
    "AddToCartRequest",
    "CartResponse",
]
