import logging
from unittest.mock import MagicMock

import psycopg2
import pytest

import db.connection as connection_module
from db.connection import close_pool, get_connection, init_pool


@pytest.fixture(autouse=True)
def fresh_pool(monkeypatch):
    monkeypatch.setattr(connection_module, "_pool", None)


@pytest.fixture
def pool_factory(monkeypatch):
    factory = MagicMock(name="SimpleConnectionPool")
    monkeypatch.setattr(connection_module.pool, "SimpleConnectionPool", factory)
    return factory


def test_get_connection_before_init_raises():
    with pytest.raises(RuntimeError, match="init_pool"):
        get_connection()


def test_get_connection_after_close_raises(pool_factory):
    init_pool()
    close_pool()

    with pytest.raises(RuntimeError):
        get_connection()


def test_unreachable_database_is_logged_and_reraised(monkeypatch, caplog):
    def refuse(*args, **kwargs):
        raise psycopg2.OperationalError("connection refused")

    monkeypatch.setattr(connection_module.pool, "SimpleConnectionPool", refuse)
    caplog.set_level(logging.ERROR, logger="db.connection")

    with pytest.raises(psycopg2.OperationalError):
        init_pool()

    assert connection_module._pool is None
    assert any(
        r.levelno == logging.ERROR and "connection refused" in r.getMessage()
        for r in caplog.records
    )


def test_init_pool_twice_opens_one_pool_and_close_resets(pool_factory):
    init_pool(1, 3)
    init_pool(1, 3)

    pool_factory.assert_called_once_with(1, 3, connection_module.DATABASE_URL)
    opened = connection_module._pool

    close_pool()

    opened.closeall.assert_called_once()
    assert connection_module._pool is None


def test_connections_are_borrowed_and_returned(pool_factory):
    init_pool()
    conn = get_connection()

    connection_module.release_connection(conn)

    pool_factory.return_value.putconn.assert_called_once_with(conn)
