"""
repositories/order_repo.py
---------------------------
Data access layer for orders.
Saving an order writes only its header row; lines are written through
OrderProductRepository. Reads load the lines together with their products.
"""

from collections import defaultdict
from typing import Optional

from db.connection import get_connection, release_connection
from models.order import Order, OrderProduct
from repositories.order_product_repo import OrderProductRepository, _SELECT_SQL
from utils.logger import get_logger

logger = get_logger(__name__)


class OrderRepository:
    """Repository for CRUD operations on the orders table."""

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, order: Order) -> Order:
        """
        Insert a new order or update the status/date of an existing one.

        Returns:
            The same Order with its `id` populated.
        """
        if order.id is None:
            sql = """
                INSERT INTO orders (date_created, status)
                VALUES (%s, %s)
                RETURNING id;
            """
            params: tuple = (order.date_created, order.status)
        else:
            sql = """
                UPDATE orders SET date_created = %s, status = %s
                WHERE id = %s
                RETURNING id;
            """
            params = (order.date_created, order.status, order.id)

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            conn.commit()
            if row is None:
                raise LookupError(f"Order #{order.id} does not exist")
            order.id = row[0]
            logger.info(f"Saved order #{order.id} ({order.status})")
            return order
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to save order: {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """
        Fetch one order with its lines.

        Returns:
            An Order, or None if not found.
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT id, date_created, status FROM orders WHERE id = %s;",
                    (order_id,),
                )
                row = cur.fetchone()
                if not row:
                    return None
                order = self._row_to_order(row)
                cur.execute(_SELECT_SQL + " WHERE op.order_id = %s ORDER BY op.product_id;", (order_id,))
                order.order_products = [OrderProductRepository._row_to_line(r) for r in cur.fetchall()]
                return order
        finally:
            release_connection(conn)

    def find_all(self) -> list[Order]:
        """Fetch every order (ordered by id) with its lines."""
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("SELECT id, date_created, status FROM orders ORDER BY id;")
                orders = [self._row_to_order(r) for r in cur.fetchall()]
                cur.execute(_SELECT_SQL + " ORDER BY op.order_id, op.product_id;")
                lines: dict[int, list[OrderProduct]] = defaultdict(list)
                for r in cur.fetchall():
                    lines[r[0]].append(OrderProductRepository._row_to_line(r))
            for order in orders:
                order.order_products = lines.get(order.id, [])
            return orders
        finally:
            release_connection(conn)

    def exists_by_id(self, order_id: int) -> bool:
        return self.find_by_id(order_id) is not None

    def count(self) -> int:
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("SELECT COUNT(*) FROM orders;")
                return int(cur.fetchone()[0])
        finally:
            release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, order_id: int) -> bool:
        """Delete an order; its lines go with it (ON DELETE CASCADE)."""
        sql = "DELETE FROM orders WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (order_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted order #{order_id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete order #{order_id}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_order(row: tuple) -> Order:
        return Order(id=row[0], date_created=row[1], status=row[2])
