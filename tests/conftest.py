"""Shared test fixtures."""

from __future__ import annotations

import pytest

from table_mapper.core.table import ColumnDescriptor, ResultTable


@pytest.fixture
def user_table() -> ResultTable:
    """Three users with typed columns; Carol has no email."""
    return ResultTable(
        columns=(
            ColumnDescriptor("id", int),
            ColumnDescriptor("name", str),
            ColumnDescriptor("email", str),
        ),
        rows=(
            (1, "Alice", "alice@ex.com"),
            (2, "Bob", "bob@ex.com"),
            (3, "Carol", None),
        ),
    )


@pytest.fixture
def empty_table() -> ResultTable:
    """Columns but no rows."""
    return ResultTable(columns=("id", "name"), rows=())


@pytest.fixture
def make_table():
    """Helper to build a table from column names and rows.

    Usage:
        make_table(["a", "b"], [(1, None)])
    """

    def _make(columns: list[str], rows: list[tuple]) -> ResultTable:
        return ResultTable(tuple(columns), tuple(rows))

    return _make
