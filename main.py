"""
main.py
-------
Entry point for LabStore.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Run the startup hooks (role seeding) once, before anything is served.
"""

from typing import Callable

from config import SEED_ROLES_ON_STARTUP, SEED_SKIP_EXISTING
from db.connection import init_pool, close_pool
from db.init_db import create_tables
from repositories.role_repo import RoleRepository
from services.role_seeder import RoleSeeder
from utils.logger import get_logger

logger = get_logger(__name__)


def seed_roles() -> None:
    """Startup hook: write the canonical roles and log the stored set."""
    RoleSeeder(RoleRepository()).run(skip_existing=SEED_SKIP_EXISTING)


def startup_hooks() -> list[Callable[[], None]]:
    """Hooks to run after the database is wired, in order."""
    hooks: list[Callable[[], None]] = []
    if SEED_ROLES_ON_STARTUP:
        hooks.append(seed_roles)
    return hooks


def main() -> None:
    """Prepare the database and run the startup hooks."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()

    try:
        create_tables()

        # ── 2. Startup hooks ──────────────────────────────
        # Failures propagate and abort startup.
        for hook in startup_hooks():
            logger.info(f"Running startup hook {hook.__name__}")
            hook()

        logger.info("LabStore is ready.")
    finally:
        # ── 3. Cleanup ────────────────────────────────────
        close_pool()


if __name__ == "__main__":
    main()
