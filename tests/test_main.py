from unittest.mock import MagicMock

import pytest
from psycopg2 import errors

import main


@pytest.fixture
def wiring(monkeypatch):
    calls = MagicMock()
    monkeypatch.setattr(main, "init_pool", calls.init_pool)
    monkeypatch.setattr(main, "create_tables", calls.create_tables)
    monkeypatch.setattr(main, "close_pool", calls.close_pool)
    return calls


def test_startup_hooks_include_seeding_by_default(monkeypatch):
    monkeypatch.setattr(main, "SEED_ROLES_ON_STARTUP", True)

    assert main.startup_hooks() == [main.seed_roles]


def test_seeding_can_be_disabled(monkeypatch):
    monkeypatch.setattr(main, "SEED_ROLES_ON_STARTUP", False)

    assert main.startup_hooks() == []


def test_main_runs_hooks_after_schema(monkeypatch, wiring):
    monkeypatch.setattr(main, "startup_hooks", lambda: [wiring.hook])
    wiring.hook.__name__ = "hook"

    main.main()

    assert [c[0] for c in wiring.mock_calls] == ["init_pool", "create_tables", "hook", "close_pool"]


def test_seeding_failure_aborts_startup_but_closes_pool(monkeypatch, wiring):
    def failing_hook():
        raise errors.UniqueViolation("duplicate key")

    monkeypatch.setattr(main, "startup_hooks", lambda: [failing_hook])

    with pytest.raises(errors.UniqueViolation):
        main.main()
    wiring.close_pool.assert_called_once()


def test_seed_roles_passes_skip_flag(monkeypatch):
    seeder = MagicMock()
    monkeypatch.setattr(main, "RoleSeeder", seeder)
    monkeypatch.setattr(main, "RoleRepository", MagicMock())
    monkeypatch.setattr(main, "SEED_SKIP_EXISTING", True)

    main.seed_roles()

    seeder.return_value.run.assert_called_once_with(skip_existing=True)
