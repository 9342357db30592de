"""Product API routes for the storefront"""

from fastapi import APIRouter, Depends

from ..models.product import Product
from ..database.products import ProductDatabase
from ..dependencies import get_product_db

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=list[Product])
def list_products(product_db: ProductDatabase = Depends(get_product_db)):
    """Full catalog, no authentication"""
    return product_db.get_all_products()
