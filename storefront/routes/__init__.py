# API Routes

from .products import router as products_router
from .auth import router as auth_router
from .cart import router as cart_router
from .debug import router as debug_router

__all__ = ["products_router", "auth_router", "cart_router", "debug_router"]
