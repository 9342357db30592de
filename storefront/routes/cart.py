"""Cart API routes for the storefront"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from ..core.errors import MissingIdentityError, ProductNotFoundError
from ..models.cart import Cart, CartUpdateRequest, AddToCartRequest, CartResponse
from ..database.carts import CartDatabase
from ..database.products import ProductDatabase
from ..dependencies import get_cart_db, get_product_db
from ..security.identity import require_identity, optional_identity
from ..services import cart_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@router.get("", response_model=Cart)
def get_cart(
    email: str = Depends(require_identity),
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """Cart of the asserted user, empty if none is stored"""
    return cart_db.get_cart(email)


@router.post("")
def replace_cart(
    request: CartUpdateRequest,
    email: Optional[str] = Depends(optional_identity),
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """
    Overwrite the whole cart with a client-supplied one.

    Accepts {"cart": {...}} or a bare cart. The identity may also be given
    as an email field in the body. Quantities must be at least 1, but stock
    is not checked here; use the /items routes for validated changes.
    """
    email = email or (request.email.strip() if request.email else None)
    if not email:
        raise MissingIdentityError()

    cart_db.replace_cart(email, request.to_cart())
    return {"success": True}


@router.post("/items", response_model=CartResponse)
def add_to_cart(
    request: AddToCartRequest,
    email: str = Depends(require_identity),
    cart_db: CartDatabase = Depends(get_cart_db),
    product_db: ProductDatabase = Depends(get_product_db),
):
    """Add one unit of a product, checked against current catalog stock"""
    product = product_db.get_product(request.product_id)
    if not product:
        raise ProductNotFoundError(request.product_id)

    cart = cart_db.get_cart(email)
    # OutOfStockError propagates before anything is written
    updated_cart = cart_engine.add_product(cart, product)
    cart_db.replace_cart(email, updated_cart)

    logger.info(f"{email} added product {product.id}")
    return CartResponse.for_cart(updated_cart, message=f"Added {product.title} to cart")


@router.delete("/items/{product_id}", response_model=CartResponse)
def remove_from_cart(
    product_id: int,
    email: str = Depends(require_identity),
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """Remove one unit of a product; the line goes away at zero"""
    cart = cart_db.get_cart(email)
    if cart.find_item(product_id) is None:
        return CartResponse.for_cart(cart, message="Item not in cart")

    updated_cart = cart_engine.remove_item(cart, product_id)
    cart_db.replace_cart(email, updated_cart)

    logger.info(f"{email} removed product {product_id}")
    return CartResponse.for_cart(updated_cart, message="Item removed")
