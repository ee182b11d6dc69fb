"""Checkout models"""

from typing import Union

from pydantic import BaseModel

from .cart import CartItem


class Receipt(BaseModel):
    """Result of a mock checkout. Returned once, never stored."""
    id: str
    total: Union[int, float]
    items: list[CartItem]
    timestamp: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    ok: bool = True
