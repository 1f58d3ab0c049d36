"""Result table data model.

A ResultTable is the in-memory tabular input of every mapper: an ordered
tuple of column descriptors and an ordered tuple of rows. Tables are built
upstream from an executed cursor or from row dicts; the mappers only read
them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from table_mapper.core.exceptions import InvalidInputError


@dataclass(frozen=True)
class ColumnDescriptor:
    """A named column with its declared type (None when not reported)."""

    name: str
    type: Any = None


@dataclass(frozen=True)
class ResultTable:
    """Ordered columns and rows of a relational query result.

    Columns may be passed as plain strings. Every row must hold exactly one
    value per column; None is the database null.
    """

    columns: tuple[ColumnDescriptor, ...] = ()
    rows: tuple[tuple[Any, ...], ...] = ()
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        columns = tuple(
            col if isinstance(col, ColumnDescriptor) else ColumnDescriptor(str(col))
            for col in self.columns
        )
        width = len(columns)
        rows = tuple(tuple(row) for row in self.rows)
        for position, row in enumerate(rows):
            if len(row) != width:
                raise InvalidInputError(
                    "rows",
                    f"row {position} has {len(row)} values for {width} columns",
                )
        # Later columns shadow earlier ones with the same name
        index = {col.name: i for i, col in enumerate(columns)}

        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_cursor(cls, cursor: Any) -> ResultTable:
        """Build a table from an executed DB-API 2.0 cursor.

        Handles both tuple-like rows and dict-like rows from different drivers.
        A cursor without a description (non-SELECT statement) gives an empty
        table.
        """
        if cursor.description is None:
            return cls()
        columns = tuple(ColumnDescriptor(desc[0], desc[1]) for desc in cursor.description)
        names = [col.name for col in columns]
        fetched = cursor.fetchall()

        rows: list[tuple[Any, ...]] = []
        for row in fetched:
            if isinstance(row, Mapping):
                rows.append(tuple(row[name] for name in names))
            else:
                rows.append(tuple(row))
        return cls(columns, tuple(rows))

    @classmethod
    def from_dicts(cls, rows: Sequence[Mapping[str, Any]]) -> ResultTable:
        """Build a table from row dicts; columns come from the first row."""
        if not rows:
            return cls()
        names = list(rows[0].keys())
        try:
            values = tuple(tuple(row[name] for name in names) for row in rows)
        except KeyError as e:
            raise InvalidInputError("rows", f"row is missing column {e.args[0]!r}") from e
        return cls(tuple(ColumnDescriptor(name) for name in names), values)

    @property
    def column_names(self) -> list[str]:
        return [col.name for col in self.columns]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def index_of(self, name: str) -> int | None:
        """Position of the last column called ``name``, or None."""
        return self._index.get(name)

    def has_duplicate_columns(self) -> bool:
        return len(self._index) != len(self.columns)

    def head(self, count: int = 1) -> ResultTable:
        """A new table holding only the first ``count`` rows."""
        return ResultTable(self.columns, self.rows[:count])

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return iter(self.rows)


def iter_items(table: ResultTable, row: Iterable[Any]) -> Iterator[tuple[str, Any]]:
    """Yield (column name, value) pairs of a row in column order."""
    for column, value in zip(table.columns, row, strict=True):
        yield column.name, value
