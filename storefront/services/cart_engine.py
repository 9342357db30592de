"""
Cart mutation rules.

Pure functions from (current cart, product, operation) to the next cart.
Nothing here reads or writes storage, and the cart passed in is never
modified: each call returns a new Cart for the caller to persist.

Line items keep insertion order. A line is never left at quantity zero;
removing its last unit drops it from the cart.
"""

from ..core.errors import OutOfStockError
from ..models.cart import Cart, CartItem
from ..models.product import Product


def add_item(
    cart: Cart,
    product_id: int,
    title: str,
    price: float,
    image: str,
    stock: int,
) -> Cart:
    """
    Add one unit of a product.

    Args:
        cart: Current cart
        product_id: Product to add
        title: Title snapshot, used only when a new line is created
        price: Price snapshot, used only when a new line is created
        image: Image snapshot, used only when a new line is created
        stock: Current stock of the product

    Returns:
        The next cart

    Raises:
        OutOfStockError: if one more unit would exceed stock
    """
    existing = cart.find_item(product_id)
    current_qty = existing.quantity if existing else 0

    if current_qty + 1 > stock:
        raise OutOfStockError(product_id, stock)

    updated = cart.model_copy(deep=True)
    if existing:
        updated.find_item(product_id).quantity += 1
    else:
        updated.items.append(
            CartItem(id=product_id, title=title, price=price, image=image, quantity=1)
        )
    return updated


def add_product(cart: Cart, product: Product) -> Cart:
    """Add one unit of a catalog product, using its current stock"""
    return add_item(
        cart,
        product_id=product.id,
        title=product.title,
        price=product.price,
        image=product.image,
        stock=product.stock,
    )


def remove_item(cart: Cart, product_id: int) -> Cart:
    """
    Remove one unit of a product.

    Removing a product that is not in the cart is a no-op, not an error.
    """
    updated = cart.model_copy(deep=True)
    item = updated.find_item(product_id)
    if item is None:
        return updated

    if item.quantity - 1 <= 0:
        updated.items = [i for i in updated.items if i is not item]
    else:
        item.quantity -= 1
    return updated
