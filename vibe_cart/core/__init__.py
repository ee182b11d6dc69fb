# Core configuration and errors

from .config import Settings, get_settings
from .errors import ShopError, ValidationError, NotFoundError, StoreError

__all__ = [
    "Settings",
    "get_settings",
    "ShopError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
]
