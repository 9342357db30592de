# Core configuration and errors

from .config import Settings, get_settings
from .errors import (
    StorefrontError,
    AccountExistsError,
    InvalidCredentialsError,
    MissingIdentityError,
    OutOfStockError,
    ProductNotFoundError,
    StorageError,
)

__all__ = [
    "Settings",
    "get_settings",
    "StorefrontError",
    "AccountExistsError",
    "InvalidCredentialsError",
    "MissingIdentityError",
    "OutOfStockError",
    "ProductNotFoundError",
    "StorageError",
]
