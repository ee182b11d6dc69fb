"""Checkout API routes"""

from fastapi import APIRouter, Depends

from ..models.checkout import Receipt
from ..services.checkout import CheckoutProcessor
from .deps import get_checkout_processor, get_user_id

router = APIRouter(prefix="/checkout", tags=["Checkout"])


@router.post("", response_model=Receipt)
async def checkout(
    user_id: str = Depends(get_user_id),
    processor: CheckoutProcessor = Depends(get_checkout_processor),
):
    """
    Mock checkout.

    Returns a receipt for the current cart and empties it. Any request body
    is ignored; there is no payment step.
    """
    return processor.checkout(user_id)
