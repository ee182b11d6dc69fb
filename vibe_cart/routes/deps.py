"""FastAPI dependencies shared by the routers"""

from fastapi import Request

from ..database.base import CartStore
from ..services.cart_view import CartAggregator
from ..services.checkout import CheckoutProcessor


def get_user_id(request: Request) -> str:
    """
    Cart owner for this request.

    There is no authentication yet, so every request acts for the demo user.
    """
    return request.app.state.settings.demo_user_id


def get_store(request: Request) -> CartStore:
    return request.app.state.store


def get_aggregator(request: Request) -> CartAggregator:
    return request.app.state.aggregator


def get_checkout_processor(request: Request) -> CheckoutProcessor:
    return request.app.state.checkout
