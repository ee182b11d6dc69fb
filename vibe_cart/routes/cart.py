"""Cart API routes"""

import logging

from fastapi import APIRouter, Depends

from ..database.base import CartStore
from ..models.cart import AddToCartRequest, CartView
from ..services.cart_view import CartAggregator
from .deps import get_aggregator, get_store, get_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get("", response_model=CartView)
async def get_cart(
    user_id: str = Depends(get_user_id),
    aggregator: CartAggregator = Depends(get_aggregator),
):
    """Get the priced cart"""
    return aggregator.view(user_id)


@router.post("", response_model=CartView)
async def set_cart_item(
    request: AddToCartRequest,
    user_id: str = Depends(get_user_id),
    store: CartStore = Depends(get_store),
    aggregator: CartAggregator = Depends(get_aggregator),
):
    """
    Set the quantity of a product in the cart.

    Posting the same product again replaces its quantity.
    """
    line = store.upsert(user_id, request.product_id, request.qty)
    logger.debug(f"Cart {user_id}: {line.product_id} x{line.qty}")
    return aggregator.view(user_id)


@router.delete("/{product_id}", response_model=CartView)
async def remove_from_cart(
    product_id: str,
    user_id: str = Depends(get_user_id),
    store: CartStore = Depends(get_store),
    aggregator: CartAggregator = Depends(get_aggregator),
):
    """Remove a product from the cart. Removing an absent product is not an error."""
    store.remove(user_id, product_id)
    return aggregator.view(user_id)
