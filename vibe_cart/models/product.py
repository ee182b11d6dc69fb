"""Product models for the catalog"""

from typing import Optional, Union

from pydantic import BaseModel, NonNegativeFloat, NonNegativeInt


class Product(BaseModel):
    """Product in the catalog"""
    id: str
    name: str
    # whole prices stay ints so they serialise without ".0"
    price: Union[NonNegativeInt, NonNegativeFloat]
    image: Optional[str] = None

    class Config:
        frozen = True
