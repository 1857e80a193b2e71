"""Shared fixtures: an in-memory role store and mocked pool connections."""

from unittest.mock import MagicMock

import pytest

from tests.fakes import InMemoryRoleStore


@pytest.fixture
def role_store():
    return InMemoryRoleStore()


@pytest.fixture
def mock_db(monkeypatch):
    """
    Route a repository module's pool calls to a MagicMock connection.

    Usage:
        conn, cur = mock_db(role_repo_module)
    """
    def _install(module):
        conn = MagicMock(name="connection")
        cur = MagicMock(name="cursor")
        conn.cursor.return_value.__enter__.return_value = cur
        conn.released = False

        def _release(c):
            c.released = True

        monkeypatch.setattr(module, "get_connection", lambda: conn)
        monkeypatch.setattr(module, "release_connection", _release)
        return conn, cur

    return _install
