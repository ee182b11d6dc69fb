"""Priced cart view built from store lines and the catalog"""

import logging

from ..database.base import CartStore
from ..models.cart import CartItem, CartView

logger = logging.getLogger(__name__)


class CartAggregator:
    """Joins cart lines with catalog products and totals them"""

    def __init__(self, store: CartStore):
        self.store = store

    def view(self, user_id: str) -> CartView:
        """
        Build the cart view from the store's current state.

        Lines whose product has left the catalog are skipped rather than
        failing the whole cart.
        """
        lines = self.store.get(user_id)
        products = {p.id: p for p in self.store.list_products()}
        items = []

        for line in lines:
            product = products.get(line.product_id)
            if product is None:
                logger.warning(f"Dropping cart line for unknown product {line.product_id}")
                continue
            items.append(
                CartItem(
                    id=product.id,
                    name=product.name,
                    price=product.price,
                    image=product.image,
                    qty=line.qty,
                )
            )

        total = sum(item.price * item.qty for item in items)
        return CartView(items=items, total=total)
