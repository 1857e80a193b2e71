import re

import pytest
from psycopg2 import errors

import db.init_db as init_db_module
from db.init_db import SCHEMA_SQL, create_tables
from models.role import ERole


def _table_ddl(table: str) -> str:
    match = re.search(
        rf"CREATE TABLE IF NOT EXISTS {table} \((.*?)\n\);", SCHEMA_SQL, re.DOTALL
    )
    assert match, f"no DDL for {table}"
    return match.group(1)


def test_role_names_are_unique_in_schema():
    # A second seeding run relies on this constraint to fail instead of duplicating rows.
    roles = _table_ddl("roles")

    assert re.search(r"\bname\s+VARCHAR\(\d+\)\s+NOT NULL\s+UNIQUE\b", roles)


def test_role_names_are_limited_to_the_enum():
    roles = _table_ddl("roles")
    check = re.search(r"CHECK \(name IN \(([^)]*)\)\)", roles)

    assert check
    allowed = {v.strip().strip("'") for v in check.group(1).split(",")}
    assert allowed == {r.value for r in ERole}


def test_order_lines_keyed_by_order_and_product():
    assert "PRIMARY KEY (order_id, product_id)" in _table_ddl("order_products")


def test_create_tables_commits(mock_db):
    conn, cur = mock_db(init_db_module)

    create_tables()

    cur.execute.assert_called_once_with(SCHEMA_SQL)
    conn.commit.assert_called_once()
    conn.rollback.assert_not_called()
    assert conn.released


def test_create_tables_rolls_back_and_reraises(mock_db):
    conn, cur = mock_db(init_db_module)
    cur.execute.side_effect = errors.InsufficientPrivilege("permission denied for schema public")

    with pytest.raises(errors.InsufficientPrivilege):
        create_tables()

    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()
    assert conn.released
