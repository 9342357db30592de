"""Cart models for the storefront"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional


class CartItem(BaseModel):
    """Line item in a cart.

    title, price and image are a snapshot taken when the product was first
    added; they are not refreshed from the catalog afterwards.
    """
    id: int
    title: str
    price: float = Field(ge=0)
    image: str
    quantity: int = Field(ge=1)


def check_unique_ids(items: Optional[list[CartItem]]) -> None:
    """A cart holds at most one line per product id"""
    seen = set()
    for item in items or []:
        if item.id in seen:
            raise ValueError(f"Duplicate line for product {item.id}")
        seen.add(item.id)


class Cart(BaseModel):
    """Shopping cart, one per account"""
    items: list[CartItem] = []

    @model_validator(mode="after")
    def one_line_per_product(self) -> "Cart":
        check_unique_ids(self.items)
        return self

    def find_item(self, product_id: int) -> Optional[CartItem]:
        return next((item for item in self.items if item.id == product_id), None)

    def total_price(self) -> float:
        """Sum of price * quantity over all lines"""
        return round(sum(item.price * item.quantity for item in self.items), 2)

    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)


class CartUpdateRequest(BaseModel):
    """Whole-cart write, either wrapped as {"cart": ...} or a bare cart"""
    cart: Optional[Cart] = None
    items: Optional[list[CartItem]] = None
    email: Optional[str] = None

    @model_validator(mode="after")
    def one_line_per_product(self) -> "CartUpdateRequest":
        check_unique_ids(self.items)
        return self

    def to_cart(self) -> Cart:
        if self.cart is not None:
            return self.cart
        return Cart(items=self.items or [])


class AddToCartRequest(BaseModel):
    """Request to add one unit of a product to the cart"""
    product_id: int


class CartResponse(BaseModel):
    """Cart mutation API response"""
    cart: Cart
    total: float
    item_count: int
    message: Optional[str] = None

    @classmethod
    def for_cart(cls, cart: Cart, message: Optional[str] = None) -> "CartResponse":
        return cls(cart=cart, total=cart.total_price(), item_count=cart.item_count(), message=message)
