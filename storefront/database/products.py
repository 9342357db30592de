"""Product catalog backed by a read-only JSON document"""

from typing import Optional

from pydantic import ValidationError

from ..core.errors import StorageError
from ..models.product import Product
from .document import JsonDocument


class ProductDatabase:
    """Read-only catalog, reloaded from disk on every call"""

    def __init__(self, document: JsonDocument):
        self.document = document

    def get_all_products(self) -> list[Product]:
        """Get all products in catalog order"""
        raw = self.document.read()
        if not isinstance(raw, list):
            raise StorageError("Catalog must be a JSON list", self.document.path)
        try:
            return [Product.model_validate(entry) for entry in raw]
        except ValidationError as e:
            raise StorageError(f"Invalid catalog entry: {e}", self.document.path) from e

    def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by ID"""
        return next(
            (product for product in self.get_all_products() if product.id == product_id),
            None,
        )
