"""Key/value record mapping.

Maps each row of a result table to a string-keyed record. Two flavours:
dynamic records, which tolerate duplicate column names (last value wins),
and plain dicts, which reject them.
"""

from __future__ import annotations

from typing import Any

from table_mapper.core.enums import RecordKind
from table_mapper.core.exceptions import DuplicateKeyError, MultipleRowsError
from table_mapper.core.logging import get_logger
from table_mapper.core.table import ResultTable, iter_items

logger = get_logger(__name__)


class DynamicRecord(dict[str, Any]):
    """Ordered row record whose keys are also readable as attributes."""

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"


class RecordMapper:
    """Maps result tables to DynamicRecord or dict rows.

    Null or empty tables never raise: map_one returns an empty record and
    map_many an empty list.
    """

    def __init__(self, kind: RecordKind = RecordKind.DYNAMIC) -> None:
        self._kind = kind

    @property
    def kind(self) -> RecordKind:
        return self._kind

    def _empty(self) -> dict[str, Any]:
        return DynamicRecord() if self._kind is RecordKind.DYNAMIC else {}

    def _check_keys(self, table: ResultTable) -> None:
        if self._kind is RecordKind.DICT and table.has_duplicate_columns():
            seen: set[str] = set()
            for name in table.column_names:
                if name in seen:
                    raise DuplicateKeyError(name)
                seen.add(name)

    def _build(self, table: ResultTable, row: tuple[Any, ...]) -> dict[str, Any]:
        record = self._empty()
        for name, value in iter_items(table, row):
            if name in record:
                logger.debug("Duplicate column '%s' overwrites earlier value", name)
            record[name] = value
        return record

    def map_one(self, table: ResultTable | None) -> dict[str, Any]:
        """Map a table holding exactly one row.

        Raises:
            MultipleRowsError: If the table has more than one row.
            DuplicateKeyError: For dict records with repeated column names.
        """
        if table is None or table.is_empty:
            return self._empty()
        if table.row_count != 1:
            raise MultipleRowsError(table.row_count)
        self._check_keys(table)
        return self._build(table, table.rows[0])

    def map_many(self, table: ResultTable | None) -> list[dict[str, Any]]:
        """Map every row in row order."""
        if table is None or table.is_empty:
            return []
        self._check_keys(table)
        return [self._build(table, row) for row in table.rows]
