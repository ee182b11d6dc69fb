"""Mock checkout: snapshot the cart, issue a receipt, clear the cart"""

import logging
import secrets
import string
from datetime import datetime, timezone
from typing import Callable, Optional

from ..core.errors import StoreError
from ..database.base import CartStore
from ..models.checkout import Receipt
from .cart_view import CartAggregator

logger = logging.getLogger(__name__)

RECEIPT_ALPHABET = string.ascii_lowercase + string.digits


def generate_receipt_id() -> str:
    """Short random receipt id, e.g. ``rcpt_k3x9a2``"""
    return "rcpt_" + "".join(secrets.choice(RECEIPT_ALPHABET) for _ in range(6))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix"""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CheckoutProcessor:
    """
    Turns the current cart into a receipt and empties it.

    No stock checks, payment or rollback: checkout is snapshot plus clear.
    """

    def __init__(
        self,
        store: CartStore,
        aggregator: Optional[CartAggregator] = None,
        id_factory: Callable[[], str] = generate_receipt_id,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.aggregator = aggregator or CartAggregator(store)
        self.id_factory = id_factory
        self.clock = clock

    def checkout(self, user_id: str) -> Receipt:
        """
        Process checkout for a user.

        Raises:
            StoreError: the cart could not be read or cleared
        """
        try:
            cart = self.aggregator.view(user_id)
            receipt = Receipt(
                id=self.id_factory(),
                total=cart.total,
                items=cart.items,
                timestamp=format_timestamp(self.clock()),
            )
            self.store.clear(user_id)
        except StoreError as e:
            raise StoreError("Checkout failed") from e

        logger.info(f"Receipt {receipt.id} issued: {receipt.total} for {len(receipt.items)} item(s)")
        return receipt
