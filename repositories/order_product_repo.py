"""
repositories/order_product_repo.py
-----------------------------------
Data access layer for order lines, keyed by (order_id, product_id).
"""

from typing import Optional

from db.connection import get_connection, release_connection
from models.order import OrderProduct, OrderProductPK
from models.product import Product
from utils.logger import get_logger

logger = get_logger(__name__)

_SELECT_SQL = """
    SELECT op.order_id, op.product_id, op.quantity,
           p.name, p.price, p.picture_url
    FROM order_products op
    JOIN products p ON p.id = op.product_id
"""


class OrderProductRepository:
    """Repository for CRUD operations on the order_products table."""

    def save(self, line: OrderProduct) -> OrderProduct:
        """
        Insert an order line, or overwrite the quantity of an existing one.

        Raises:
            psycopg2.errors.ForeignKeyViolation: If the order or product is missing.
        """
        sql = """
            INSERT INTO order_products (order_id, product_id, quantity)
            VALUES (%s, %s, %s)
            ON CONFLICT (order_id, product_id)
            DO UPDATE SET quantity = EXCLUDED.quantity;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (line.order_id, line.product_id, line.quantity))
            conn.commit()
            logger.info(f"Saved line {line.pk} x{line.quantity}")
            return line
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to save order line {line.pk}: {e}")
            raise
        finally:
            release_connection(conn)

    def find_by_id(self, pk: OrderProductPK) -> Optional[OrderProduct]:
        sql = _SELECT_SQL + " WHERE op.order_id = %s AND op.product_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (pk.order_id, pk.product_id))
                row = cur.fetchone()
                return self._row_to_line(row) if row else None
        finally:
            release_connection(conn)

    def find_by_order(self, order_id: int) -> list[OrderProduct]:
        """All lines of one order, with their products loaded."""
        sql = _SELECT_SQL + " WHERE op.order_id = %s ORDER BY op.product_id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (order_id,))
                return [self._row_to_line(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    def find_all(self) -> list[OrderProduct]:
        sql = _SELECT_SQL + " ORDER BY op.order_id, op.product_id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_line(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    def exists_by_id(self, pk: OrderProductPK) -> bool:
        return self.find_by_id(pk) is not None

    def count(self) -> int:
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("SELECT COUNT(*) FROM order_products;")
                return int(cur.fetchone()[0])
        finally:
            release_connection(conn)

    def delete(self, pk: OrderProductPK) -> bool:
        sql = "DELETE FROM order_products WHERE order_id = %s AND product_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (pk.order_id, pk.product_id))
                deleted = cur.rowcount > 0
            conn.commit()
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete order line {pk}: {e}")
            raise
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_line(row: tuple) -> OrderProduct:
        return OrderProduct(
            order_id=row[0],
            product_id=row[1],
            quantity=row[2],
            product=Product(id=row[1], name=row[3], price=float(row[4]), picture_url=row[5]),
        )
