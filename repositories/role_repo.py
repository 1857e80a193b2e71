"""
repositories/role_repo.py
-------------------------
Data access layer for roles.
All SQL queries related to the `roles` table live here.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from models.role import ERole, Role
from utils.logger import get_logger

logger = get_logger(__name__)


class RoleRepository:
    """Repository for CRUD operations on the roles table."""

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, role: Role) -> Role:
        """
        Persist a role: INSERT when it has no id yet, UPDATE otherwise.

        Args:
            role: The Role to persist.

        Returns:
            The same Role with its `id` populated.

        Raises:
            psycopg2.errors.UniqueViolation: If a role with this name exists.
        """
        if role.id is None:
            sql = "INSERT INTO roles (name) VALUES (%s) RETURNING id;"
            params: tuple = (role.name.value,)
        else:
            sql = "UPDATE roles SET name = %s WHERE id = %s RETURNING id;"
            params = (role.name.value, role.id)

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            conn.commit()
            if row is None:
                raise LookupError(f"Role #{role.id} does not exist")
            role.id = row[0]
            logger.debug(f"Saved {role}")
            return role
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to save role {role.name.value}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def find_all(self) -> list[Role]:
        """Return every stored role, ordered by id."""
        sql = "SELECT id, name FROM roles ORDER BY id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_role(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    def find_by_id(self, role_id: int) -> Optional[Role]:
        sql = "SELECT id, name FROM roles WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (role_id,))
                row = cur.fetchone()
                return self._row_to_role(row) if row else None
        finally:
            release_connection(conn)

    def find_by_name(self, name: ERole) -> Optional[Role]:
        """
        Look up a role by its kind.

        Args:
            name: The role kind to find.

        Returns:
            The matching Role, or None when no such row is stored.
        """
        sql = "SELECT id, name FROM roles WHERE name = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (ERole(name).value,))
                row = cur.fetchone()
                return self._row_to_role(row) if row else None
        finally:
            release_connection(conn)

    def exists_by_id(self, role_id: int) -> bool:
        return self.find_by_id(role_id) is not None

    def count(self) -> int:
        sql = "SELECT COUNT(*) FROM roles;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return int(cur.fetchone()[0])
        finally:
            release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, role_id: int) -> bool:
        """
        Delete a role by ID.

        Returns:
            True if a row was deleted, False otherwise.
        """
        sql = "DELETE FROM roles WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (role_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted role #{role_id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete role #{role_id}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_role(row: tuple) -> Role:
        """Convert a database row tuple to a Role domain object."""
        return Role(id=row[0], name=ERole(row[1]))
