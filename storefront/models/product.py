"""Product models for the storefront"""

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Product in the catalog"""
    id: int
    title: str
    price: float = Field(ge=0)
    image: str
    stock: int = Field(ge=0)
