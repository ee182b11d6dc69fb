# Vibe Cart Models

from .product import Product
from .cart import CartLine, CartItem, CartView, AddToCartRequest
from .checkout import Receipt, ErrorResponse, HealthResponse

__all__ = [
    "Product",
    "CartLine",
    "CartItem",
    "CartView",
    "AddToCartRequest",
    "Receipt",
    "ErrorResponse",
    "HealthResponse",
]
