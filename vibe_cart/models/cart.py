"""Cart models"""

from typing import Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt


class CartLine(BaseModel):
    """Stored cart row: one per (user, product)"""
    user_id: str
    product_id: str
    qty: int = Field(gt=0)


class CartItem(BaseModel):
    """Cart line joined with its product"""
    id: str
    name: str
    price: Union[int, float]
    image: Optional[str] = None
    qty: int


class CartView(BaseModel):
    """Priced cart as returned to the client"""
    items: list[CartItem] = []
    total: Union[int, float] = 0


class AddToCartRequest(BaseModel):
    """Request to set the quantity of a product in the cart"""
    product_id: Optional[str] = Field(default=None, alias="productId")
    qty: Optional[Union[StrictInt, StrictFloat]] = None

    class Config:
        populate_by_name = True
