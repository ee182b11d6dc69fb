# Cart services

from .cart_view import CartAggregator
from .checkout import CheckoutProcessor, generate_receipt_id

__all__ = ["CartAggregator", "CheckoutProcessor", "generate_receipt_id"]
