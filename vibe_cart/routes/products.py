"""Product API routes"""

from fastapi import APIRouter, Depends

from ..database.base import CartStore
from ..models.product import Product
from .deps import get_store

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[Product])
async def list_products(store: CartStore = Depends(get_store)):
    """List the catalog in insertion order"""
    return store.list_products()
