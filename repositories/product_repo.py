"""
repositories/product_repo.py
-----------------------------
Data access layer for catalogue products.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from models.product import Product
from utils.logger import get_logger

logger = get_logger(__name__)


class ProductRepository:
    """Repository for CRUD operations on the products table."""

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, product: Product) -> Product:
        """
        Insert a new product or update an existing one.

        Args:
            product: The Product to persist.

        Returns:
            The same Product with its `id` populated.
        """
        if product.id is None:
            sql = """
                INSERT INTO products (name, price, picture_url)
                VALUES (%s, %s, %s)
                RETURNING id;
            """
            params: tuple = (product.name, product.price, product.picture_url)
        else:
            sql = """
                UPDATE products SET name = %s, price = %s, picture_url = %s
                WHERE id = %s
                RETURNING id;
            """
            params = (product.name, product.price, product.picture_url, product.id)

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            conn.commit()
            if row is None:
                raise LookupError(f"Product #{product.id} does not exist")
            product.id = row[0]
            logger.info(f"Saved product '{product.name}' #{product.id}")
            return product
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to save product '{product.name}': {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, product_id: int) -> Optional[Product]:
        sql = "SELECT id, name, price, picture_url FROM products WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (product_id,))
                row = cur.fetchone()
                return self._row_to_product(row) if row else None
        finally:
            release_connection(conn)

    def find_all(self) -> list[Product]:
        sql = "SELECT id, name, price, picture_url FROM products ORDER BY id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_product(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    def exists_by_id(self, product_id: int) -> bool:
        return self.find_by_id(product_id) is not None

    def count(self) -> int:
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("SELECT COUNT(*) FROM products;")
                return int(cur.fetchone()[0])
        finally:
            release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, product_id: int) -> bool:
        sql = "DELETE FROM products WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (product_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted product #{product_id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete product #{product_id}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_product(row: tuple) -> Product:
        """Convert a database row tuple to a Product domain object."""
        return Product(
            id=row[0],
            name=row[1],
            price=float(row[2]),
            picture_url=row[3],
        )
