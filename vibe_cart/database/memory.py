"""In-memory cart storage"""

from typing import Optional

from ..core.errors import NotFoundError
from ..models.cart import CartLine
from ..models.product import Product
from .base import CartStore, validate_line
from .catalog import DEFAULT_PRODUCTS


class MemoryCartStore(CartStore):
    """In-memory cart storage. State is lost when the process exits."""

    name = "memory"

    def __init__(self, products: Optional[list[Product]] = None):
        seed = DEFAULT_PRODUCTS if products is None else products
        self.products: dict[str, Product] = {p.id: p for p in seed}
        self.lines: list[CartLine] = []

    def list_products(self) -> list[Product]:
        return list(self.products.values())

    def get_product(self, product_id: str) -> Optional[Product]:
        return self.products.get(product_id)

    def upsert(self, user_id: str, product_id: str, qty: int) -> CartLine:
        qty = validate_line(product_id, qty)
        if self.get_product(product_id) is None:
            raise NotFoundError("Product not found")

        existing = self._find(user_id, product_id)
        if existing is not None:
            existing.qty = qty
            return existing.model_copy()

        line = CartLine(user_id=user_id, product_id=product_id, qty=qty)
        self.lines.append(line)
        return line.model_copy()

    def remove(self, user_id: str, product_id: str) -> None:
        self.lines = [
            line for line in self.lines
            if not (line.user_id == user_id and line.product_id == product_id)
        ]

    def get(self, user_id: str) -> list[CartLine]:
        return [line.model_copy() for line in self.lines if line.user_id == user_id]

    def clear(self, user_id: str) -> None:
        self.lines = [line for line in self.lines if line.user_id != user_id]

    def _find(self, user_id: str, product_id: str) -> Optional[CartLine]:
        return next(
            (
                line for line in self.lines
                if line.user_id == user_id and line.product_id == product_id
            ),
            None,
        )
