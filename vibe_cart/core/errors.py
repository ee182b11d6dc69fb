"""
Error taxonomy.

Every error carries a client-safe message and the HTTP status it maps to.
Handlers in ``vibe_cart.main`` render them as ``{"error": message}``.
"""


class ShopError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ShopError):
    """Malformed or missing input"""

    status_code = 400


class NotFoundError(ShopError):
    """Referenced product does not exist"""

    status_code = 404


class StoreError(ShopError):
    """Backend I/O failure while serving a request"""

    status_code = 500
