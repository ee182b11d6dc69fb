"""Cart store contract shared by the durable and in-memory backends"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..core.errors import ValidationError
from ..models.cart import CartLine
from ..models.product import Product

INVALID_LINE_MESSAGE = "productId and qty>0 required"

# Largest value an SQLite INTEGER column holds
MAX_QTY = 2**63 - 1


def validate_line(product_id: Any, qty: Any) -> int:
    """
    Check upsert input before any store access.

    Returns:
        qty as an int

    Raises:
        ValidationError: product_id empty or qty not a positive integer
    """
    if not isinstance(product_id, str) or not product_id:
        raise ValidationError(INVALID_LINE_MESSAGE)

    # bool is an int subclass but never a quantity
    if isinstance(qty, bool) or not isinstance(qty, (int, float)):
        raise ValidationError(INVALID_LINE_MESSAGE)

    if isinstance(qty, float) and not qty.is_integer():
        raise ValidationError(INVALID_LINE_MESSAGE)

    if qty <= 0 or qty > MAX_QTY:
        raise ValidationError(INVALID_LINE_MESSAGE)

    return int(qty)


class CartStore(ABC):
    """
    Catalog lookups plus per-user cart lines keyed by (user_id, product_id).

    Implementations must behave identically so callers never need to know
    which backend was selected at startup.
    """

    name: str = "abstract"

    # Catalog

    @abstractmethod
    def list_products(self) -> list[Product]:
        """All products in insertion order"""

    @abstractmethod
    def get_product(self, product_id: str) -> Optional[Product]:
        """Product by id, or None"""

    # Cart

    @abstractmethod
    def upsert(self, user_id: str, product_id: str, qty: int) -> CartLine:
        """
        Set the quantity of a product in the user's cart.

        Replaces the quantity of an existing line instead of adding to it.

        Raises:
            ValidationError: invalid product_id or qty
            NotFoundError: product does not exist
        """

    @abstractmethod
    def remove(self, user_id: str, product_id: str) -> None:
        """Delete a line; missing lines are ignored"""

    @abstractmethod
    def get(self, user_id: str) -> list[CartLine]:
        """All lines for the user in insertion order"""

    @abstractmethod
    def clear(self, user_id: str) -> None:
        """Delete every line for the user"""

    def close(self) -> None:
        """Release backend resources"""
