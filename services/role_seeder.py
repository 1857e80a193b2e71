"""
services/role_seeder.py
-----------------------
Startup routine that writes the canonical roles to the role store.

The default run is not idempotent: against a store that already holds the
roles, the unique constraint on `roles.name` rejects the first insert and
the error propagates to the caller, aborting startup. Each insert commits
on its own, so roles written before a failure stay written.
"""

from models.role import ERole, Role
from repositories.role_repo import RoleRepository
from utils.logger import get_logger

logger = get_logger(__name__)

CANONICAL_ROLES: tuple[ERole, ...] = (
    ERole.ROLE_USER,
    ERole.ROLE_MODERATOR,
    ERole.ROLE_ADMIN,
)


class RoleSeeder:
    """Inserts the canonical roles, then logs what the store holds."""

    def __init__(self, role_repo: RoleRepository):
        self.role_repo = role_repo

    def run(self, skip_existing: bool = False) -> None:
        """
        Save one Role per canonical name, in order, then log every stored role.

        Args:
            skip_existing: Look each name up first and leave existing rows alone.
                Off by default, in which case duplicates reach the store.

        Raises:
            Whatever the store raises on a failed write (not caught here).
        """
        for name in CANONICAL_ROLES:
            if skip_existing and self.role_repo.find_by_name(name) is not None:
                logger.info(f"Role {name.value} already present, skipping.")
                continue
            self.role_repo.save(Role(name=name))

        for role in self.role_repo.find_all():
            logger.info(str(role))
