"""Tests for the cart aggregator and checkout processor."""

from datetime import datetime, timedelta, timezone

import pytest

from vibe_cart.core.errors import StoreError
from vibe_cart.database import MemoryCartStore
from vibe_cart.services import CartAggregator, CheckoutProcessor, generate_receipt_id
from vibe_cart.services.checkout import format_timestamp

from .conftest import USER

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


class FailingClearStore(MemoryCartStore):
    def clear(self, user_id):
        raise StoreError("Failed to clear cart")


class FailingReadStore(MemoryCartStore):
    def get(self, user_id):
        raise StoreError("Failed to get cart")


def _processor(store, receipt_id="rcpt_fixed"):
    return CheckoutProcessor(store, id_factory=lambda: receipt_id, clock=lambda: FIXED_TIME)


class TestCartAggregator:
    def test_empty_cart(self, store):
        view = CartAggregator(store).view(USER)

        assert view.items == []
        assert view.total == 0

    def test_joins_products_and_totals(self, store):
        store.upsert(USER, "p1", 1)
        store.upsert(USER, "p2", 2)

        view = CartAggregator(store).view(USER)

        assert [(i.id, i.name, i.qty) for i in view.items] == [
            ("p1", "Bluetooth Headphones", 1),
            ("p2", "Wireless Mouse", 2),
        ]
        assert view.items[1].image == "🖱️"
        assert view.total == 1999 + 699 * 2
        assert view.total == sum(i.price * i.qty for i in view.items)

    def test_reflects_every_mutation(self, store):
        aggregator = CartAggregator(store)

        store.upsert(USER, "p4", 3)
        assert aggregator.view(USER).total == 299 * 3

        store.upsert(USER, "p4", 1)
        assert aggregator.view(USER).total == 299

        store.remove(USER, "p4")
        assert aggregator.view(USER).total == 0

    def test_drops_lines_for_missing_products(self):
        store = MemoryCartStore()
        store.upsert(USER, "p1", 1)
        store.upsert(USER, "p2", 1)
        del store.products["p2"]

        view = CartAggregator(store).view(USER)

        assert [i.id for i in view.items] == ["p1"]
        assert view.total == 1999


class TestCheckoutProcessor:
    def test_receipt_and_cart_cleared(self, store):
        store.upsert(USER, "p1", 1)
        store.upsert(USER, "p2", 2)

        receipt = _processor(store).checkout(USER)

        assert receipt.id == "rcpt_fixed"
        assert receipt.total == 3397
        assert [(i.id, i.qty) for i in receipt.items] == [("p1", 1), ("p2", 2)]
        assert receipt.timestamp == "2024-01-02T03:04:05.678Z"
        assert store.get(USER) == []

    def test_empty_cart_checkout(self, store):
        receipt = _processor(store).checkout(USER)

        assert receipt.items == []
        assert receipt.total == 0

    def test_leaves_other_users_alone(self, store):
        store.upsert(USER, "p1", 1)
        store.upsert("other", "p2", 1)

        _processor(store).checkout(USER)

        assert len(store.get("other")) == 1

    def test_clear_failure_fails_checkout(self):
        store = FailingClearStore()
        store.upsert(USER, "p1", 1)

        with pytest.raises(StoreError) as exc_info:
            _processor(store).checkout(USER)

        assert exc_info.value.message == "Checkout failed"

    def test_read_failure_fails_checkout(self):
        with pytest.raises(StoreError, match="Checkout failed"):
            _processor(FailingReadStore()).checkout(USER)

    def test_default_id_factory(self, store):
        receipt = CheckoutProcessor(store).checkout(USER)

        assert receipt.id.startswith("rcpt_")
        assert receipt.timestamp.endswith("Z")


class TestReceiptHelpers:
    def test_receipt_id_shape(self):
        receipt_id = generate_receipt_id()

        assert receipt_id.startswith("rcpt_")
        suffix = receipt_id[len("rcpt_"):]
        assert len(suffix) == 6
        assert suffix.isalnum() and suffix == suffix.lower()

    def test_receipt_ids_differ(self):
        assert len({generate_receipt_id() for _ in range(50)}) > 45

    def test_timestamp_converts_to_utc(self):
        local = FIXED_TIME.astimezone(timezone(timedelta(hours=5, minutes=30)))

        assert format_timestamp(local) == "2024-01-02T03:04:05.678Z"
