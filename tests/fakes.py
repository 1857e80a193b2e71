"""In-memory stand-ins for the database-backed repositories."""

from typing import Optional

from psycopg2 import errors

from models.role import ERole, Role


class InMemoryRoleStore:
    """Role store kept in a dict, with an optional unique constraint on name."""

    def __init__(self, unique_names: bool = True):
        self.unique_names = unique_names
        self.rows: dict[int, Role] = {}
        self.saved: list[ERole] = []
        self._next_id = 1

    def save(self, role: Role) -> Role:
        self.saved.append(role.name)
        if self.unique_names and any(r.name == role.name for r in self.rows.values()):
            raise errors.UniqueViolation(
                f'duplicate key value violates unique constraint "roles_name_key": {role.name.value}'
            )
        if role.id is None:
            role.id = self._next_id
            self._next_id += 1
        self.rows[role.id] = Role(id=role.id, name=role.name)
        return role

    def find_all(self) -> list[Role]:
        return [self.rows[k] for k in sorted(self.rows)]

    def find_by_name(self, name: ERole) -> Optional[Role]:
        return next((r for r in self.rows.values() if r.name == name), None)

