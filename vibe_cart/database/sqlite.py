"""SQLite-backed cart storage"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional

from ..core.errors import NotFoundError, StoreError
from ..models.cart import CartLine
from ..models.product import Product
from .base import CartStore, validate_line
from .catalog import DEFAULT_PRODUCTS

logger = logging.getLogger(__name__)

# NUMERIC keeps whole prices as integers and fractional ones as REAL
SCHEMA = """
CREATE TABLE IF NOT EXISTS products (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    price NUMERIC NOT NULL,
    image TEXT
);
CREATE TABLE IF NOT EXISTS cart (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id TEXT NOT NULL,
    product_id TEXT NOT NULL,
    qty INTEGER NOT NULL DEFAULT 1,
    UNIQUE(user_id, product_id),
    FOREIGN KEY(product_id) REFERENCES products(id) ON DELETE CASCADE
);
"""


class SqliteCartStore(CartStore):
    """Durable cart storage in a local SQLite file"""

    name = "sqlite"

    def __init__(self, conn: sqlite3.Connection, path: str):
        self.conn = conn
        self.path = path

    @classmethod
    def open(cls, path: str, products: Optional[list[Product]] = None) -> "SqliteCartStore":
        """
        Open the database, create the schema and seed the catalog.

        Raises whatever sqlite3 or the filesystem raises; the caller decides
        whether to fall back to memory.
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        # Opened in the lifespan; callers off the event loop thread may still
        # use or close it
        conn = sqlite3.connect(path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("PRAGMA foreign_keys = ON")
            conn.executescript(SCHEMA)
            cls._seed(conn, DEFAULT_PRODUCTS if products is None else products)
        except BaseException:
            conn.close()
            raise

        return cls(conn, path)

    @staticmethod
    def _seed(conn: sqlite3.Connection, products: list[Product]) -> None:
        count = conn.execute("SELECT COUNT(*) FROM products").fetchone()[0]
        if count:
            return

        with conn:
            conn.executemany(
                "INSERT INTO products (id, name, price, image) VALUES (?, ?, ?, ?)",
                [(p.id, p.name, p.price, p.image) for p in products],
            )
        logger.info(f"Seeded {len(products)} products")

    @contextmanager
    def _guard(self, message: str) -> Iterator[None]:
        """Turn driver errors into a StoreError with a client-safe message"""
        try:
            yield
        except sqlite3.Error as e:
            logger.error(f"{message}: {e}")
            raise StoreError(message) from e
        except StoreError as e:
            # nested lookups report under the outer operation
            raise StoreError(message) from e

    def list_products(self) -> list[Product]:
        with self._guard("Failed to fetch products"):
            rows = self.conn.execute(
                "SELECT id, name, price, image FROM products ORDER BY rowid"
            ).fetchall()
        return [Product(**dict(row)) for row in rows]

    def get_product(self, product_id: str) -> Optional[Product]:
        with self._guard("Failed to fetch products"):
            row = self.conn.execute(
                "SELECT id, name, price, image FROM products WHERE id = ?",
                (product_id,),
            ).fetchone()
        return Product(**dict(row)) if row else None

    def upsert(self, user_id: str, product_id: str, qty: int) -> CartLine:
        qty = validate_line(product_id, qty)
        with self._guard("Failed to update cart"):
            if self.get_product(product_id) is None:
                raise NotFoundError("Product not found")

            with self.conn:
                self.conn.execute(
                    "INSERT INTO cart (user_id, product_id, qty) VALUES (?, ?, ?) "
                    "ON CONFLICT(user_id, product_id) DO UPDATE SET qty = excluded.qty",
                    (user_id, product_id, qty),
                )
        return CartLine(user_id=user_id, product_id=product_id, qty=qty)

    def remove(self, user_id: str, product_id: str) -> None:
        with self._guard("Failed to remove item"), self.conn:
            self.conn.execute(
                "DELETE FROM cart WHERE user_id = ? AND product_id = ?",
                (user_id, product_id),
            )

    def get(self, user_id: str) -> list[CartLine]:
        with self._guard("Failed to get cart"):
            rows = self.conn.execute(
                "SELECT user_id, product_id, qty FROM cart WHERE user_id = ? ORDER BY id",
                (user_id,),
            ).fetchall()
        return [CartLine(**dict(row)) for row in rows]

    def clear(self, user_id: str) -> None:
        with self._guard("Failed to clear cart"), self.conn:
            self.conn.execute("DELETE FROM cart WHERE user_id = ?", (user_id,))

    def close(self) -> None:
        self.conn.close()
        logger.info(f"Closed SQLite store at {self.path}")
