"""Integration test for mapping SQLite query results.

Covers: building result tables from real cursors, typed mapping, record
mapping and duplicate column names against an in-memory SQLite database.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

import table_mapper
from table_mapper.core.exceptions import DuplicateKeyError, MultipleRowsError
from table_mapper.core.table import ResultTable
from table_mapper.mapping.model import ModelMapper

# --- Test models ---


@dataclass
class User:
    id: int
    name: str
    email: str | None
    active: bool = True


class Order(BaseModel):
    id: int
    user_id: int
    amount: float
    note: str | None = None


# --- Fixtures ---


@pytest.fixture(params=[None, sqlite3.Row], ids=["tuple_rows", "sqlite_rows"])
def connection(request: pytest.FixtureRequest) -> Iterator[sqlite3.Connection]:
    """In-memory database with users and orders."""
    conn = sqlite3.connect(":memory:")
    if request.param is not None:
        conn.row_factory = request.param
    conn.execute(
        "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL, "
        "email TEXT, active INTEGER NOT NULL DEFAULT 1)"
    )
    conn.execute(
        "CREATE TABLE orders (id INTEGER PRIMARY KEY, user_id INTEGER NOT NULL, "
        "amount REAL NOT NULL)"
    )
    conn.executemany(
        "INSERT INTO users (id, name, email, active) VALUES (?, ?, ?, ?)",
        [(1, "Alice", "alice@test.com", 1), (2, "Bob", None, 0)],
    )
    conn.executemany(
        "INSERT INTO orders (id, user_id, amount) VALUES (?, ?, ?)",
        [(10, 1, 99.5), (11, 1, 20), (12, 2, 5.25)],
    )
    conn.commit()
    yield conn
    conn.close()


def query(conn: sqlite3.Connection, sql: str, params: tuple = ()) -> ResultTable:
    return ResultTable.from_cursor(conn.execute(sql, params))


# --- Integration Tests ---


@pytest.mark.integration
class TestSqliteResultTable:
    def test_columns_and_rows(self, connection: sqlite3.Connection) -> None:
        table = query(connection, "SELECT id, name FROM users ORDER BY id")
        assert table.column_names == ["id", "name"]
        assert table.rows == ((1, "Alice"), (2, "Bob"))

    def test_no_match_is_empty(self, connection: sqlite3.Connection) -> None:
        table = query(connection, "SELECT * FROM users WHERE id = ?", (999,))
        assert table_mapper.is_empty(table)
        assert table.column_names == ["id", "name", "email", "active"]

    def test_non_select_statement(self, connection: sqlite3.Connection) -> None:
        table = query(connection, "UPDATE users SET active = 1 WHERE id = 2")
        assert table_mapper.is_empty(table)


@pytest.mark.integration
class TestSqliteTypedMapping:
    def test_users_to_dataclass(self, connection: sqlite3.Connection) -> None:
        table = query(connection, "SELECT * FROM users ORDER BY id")
        users = table_mapper.to_objects(table, User)
        assert users == [
            User(1, "Alice", "alice@test.com", True),
            User(2, "Bob", None, False),
        ]

    def test_first_user(self, connection: sqlite3.Connection) -> None:
        table = query(connection, "SELECT id, name, email FROM users ORDER BY id")
        user = table_mapper.to_object(table, User)
        assert user.name == "Alice"
        assert user.active is True

    def test_orders_to_pydantic(self, connection: sqlite3.Connection) -> None:
        table = query(connection, "SELECT id, user_id, amount FROM orders ORDER BY id")
        orders = ModelMapper(Order).map_many(table)
        assert [o.amount for o in orders] == [99.5, 20.0, 5.25]
        assert all(o.note is None for o in orders)

    def test_aliased_join(self, connection: sqlite3.Connection) -> None:
        table = query(
            connection,
            "SELECT o.id AS order_id, u.id AS user_id, o.amount FROM orders o "
            "JOIN users u ON u.id = o.user_id WHERE u.name = ? ORDER BY o.id",
            ("Alice",),
        )
        orders = ModelMapper(Order, aliases={"order_id": "id"}).map_many(table)
        assert [o.id for o in orders] == [10, 11]


@pytest.mark.integration
class TestSqliteRecordMapping:
    def test_single_row_dynamic(self, connection: sqlite3.Connection) -> None:
        table = query(connection, "SELECT name, email FROM users WHERE id = 2")
        record = table_mapper.to_dynamic(table)
        assert record.name == "Bob"
        assert record.email is None

    def test_multiple_rows_rejected(self, connection: sqlite3.Connection) -> None:
        table = query(connection, "SELECT name FROM users")
        with pytest.raises(MultipleRowsError):
            table_mapper.to_dict(table)

    def test_aggregate_to_dicts(self, connection: sqlite3.Connection) -> None:
        table = query(
            connection,
            "SELECT user_id, COUNT(*) AS orders FROM orders GROUP BY user_id ORDER BY user_id",
        )
        assert table_mapper.to_dict_list(table) == [
            {"user_id": 1, "orders": 2},
            {"user_id": 2, "orders": 1},
        ]

    def test_duplicate_column_names(self, connection: sqlite3.Connection) -> None:
        table = query(connection, "SELECT 1 AS x, 2 AS x")
        assert table_mapper.to_dynamic(table) == {"x": 2}
        with pytest.raises(DuplicateKeyError):
            table_mapper.to_dict(table)
