"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def save(self, user: User) -> User:
        """
        Insert a new user, or update the name/email of an existing one.

        Returns:
            The same User with `id` and `created_at` populated.
        """
        if user.id is None:
            sql = """
                INSERT INTO users (name, email)
                VALUES (%s, %s)
                RETURNING id, created_at;
            """
            params: tuple = (user.name, user.email)
        else:
            sql = """
                UPDATE users SET name = %s, email = %s
                WHERE id = %s
                RETURNING id, created_at;
            """
            params = (user.name, user.email, user.id)

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            conn.commit()
            if row is None:
                raise LookupError(f"User #{user.id} does not exist")
            user.id, user.created_at = row[0], row[1]
            return user
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to save user '{user.name}': {e}")
            raise
        finally:
            release_connection(conn)

    def find_by_id(self, user_id: int) -> Optional[User]:
        sql = "SELECT id, name, email, created_at FROM users WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                row = cur.fetchone()
                return self._row_to_user(row) if row else None
        finally:
            release_connection(conn)

    def find_all(self) -> list[User]:
        sql = "SELECT id, name, email, created_at FROM users ORDER BY id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_user(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    def exists_by_id(self, user_id: int) -> bool:
        return self.find_by_id(user_id) is not None

    def count(self) -> int:
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("SELECT COUNT(*) FROM users;")
                return int(cur.fetchone()[0])
        finally:
            release_connection(conn)

    def delete(self, user_id: int) -> bool:
        """Delete a user by ID. Returns True if a row was removed."""
        sql = "DELETE FROM users WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete user #{user_id}: {e}")
            raise
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        return User(id=row[0], name=row[1], email=row[2], created_at=row[3])
