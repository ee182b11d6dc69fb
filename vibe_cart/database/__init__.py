"""
Cart storage backends.

``init_store`` picks the backend once per process: SQLite when it opens
cleanly, otherwise the in-memory store for the rest of the process lifetime.
"""

import logging

from ..core.config import Settings
from .base import CartStore, validate_line
from .catalog import DEFAULT_PRODUCTS
from .memory import MemoryCartStore
from .sqlite import SqliteCartStore

logger = logging.getLogger(__name__)


def init_store(settings: Settings) -> CartStore:
    """Open the configured backend, falling back to memory on any failure"""
    if settings.storage_backend == "memory":
        logger.info("Using in-memory store")
        return MemoryCartStore()

    try:
        store = SqliteCartStore.open(settings.db_path)
    except Exception as e:
        logger.error(f"SQLite failed, switching to in-memory store: {e}", exc_info=True)
        return MemoryCartStore()

    logger.info(f"SQLite ready at {settings.db_path}")
    return store


__all__ = [
    "CartStore",
    "MemoryCartStore",
    "SqliteCartStore",
    "DEFAULT_PRODUCTS",
    "init_store",
    "validate_line",
]
