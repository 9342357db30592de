"""Cart storage for the storefront"""

import logging

from pydantic import ValidationError

from ..core.errors import StorageError
from ..models.cart import Cart
from .document import JsonDocument

logger = logging.getLogger(__name__)


class CartDatabase:
    """Carts kept in the "carts" mapping of the database document, keyed by email"""

    def __init__(self, document: JsonDocument):
        self.document = document

    def get_cart(self, email: str) -> Cart:
        """Get the cart for an email, empty if none is stored"""
        db = self.document.read()
        record = db.get("carts", {}).get(email)
        if not record:
            return Cart()
        try:
            return Cart.model_validate(record)
        except ValidationError as e:
            raise StorageError(f"Invalid cart stored for {email}", self.document.path) from e

    def replace_cart(self, email: str, cart: Cart) -> None:
        """Overwrite the whole cart for an email; last writer wins"""
        db = self.document.read()
        db.setdefault("carts", {})[email] = cart.model_dump()
        self.document.write(db)
        logger.debug(f"Cart saved for {email}: {len(cart.items)} line(s)")
