"""Static conversion helpers.

Functional entry points over ModelMapper and RecordMapper, plus the list and
text utilities.
"""

from __future__ import annotations

from typing import Any, TypeVar

from table_mapper.core.config import MapperConfig
from table_mapper.core.enums import RecordKind
from table_mapper.core.sequences import is_list, to_list
from table_mapper.core.table import ResultTable
from table_mapper.core.text import has_extended_characters
from table_mapper.mapping.model import ModelMapper
from table_mapper.mapping.record import DynamicRecord, RecordMapper

T = TypeVar("T")

_DYNAMIC_MAPPER = RecordMapper(RecordKind.DYNAMIC)
_DICT_MAPPER = RecordMapper(RecordKind.DICT)

__all__ = [
    "is_empty",
    "is_list",
    "to_list",
    "to_object",
    "to_objects",
    "to_dynamic",
    "to_dynamic_list",
    "to_dict",
    "to_dict_list",
    "has_extended_characters",
]


def is_empty(table: ResultTable | None) -> bool:
    """True when the table is None or has no rows."""
    return table is None or table.is_empty


def to_object(
    table: ResultTable | None, target_class: type[T], config: MapperConfig | None = None
) -> T:
    """Convert the first row of a table to an instance of target_class.

    Raises:
        InvalidInputError: If table is None.
        EmptyTableError: If table has no rows.
        MissingColumnError: If a field cannot be matched to a column.
        TypeCoercionError: If a value cannot be converted to its field type.
    """
    return ModelMapper(target_class, config).map_one(table)


def to_objects(
    table: ResultTable | None, target_class: type[T], config: MapperConfig | None = None
) -> list[T]:
    """Convert every row of a table to an instance of target_class."""
    return ModelMapper(target_class, config).map_many(table)


def to_dynamic(table: ResultTable | None) -> DynamicRecord:
    """Convert a single-row table to a DynamicRecord.

    None or empty tables give an empty record. Duplicate column names keep
    the last value.
    """
    return _DYNAMIC_MAPPER.map_one(table)  # type: ignore[return-value]


def to_dynamic_list(table: ResultTable | None) -> list[DynamicRecord]:
    """Convert every row of a table to a DynamicRecord."""
    return _DYNAMIC_MAPPER.map_many(table)  # type: ignore[return-value]


def to_dict(table: ResultTable | None) -> dict[str, Any]:
    """Convert a single-row table to a dict; duplicate column names raise."""
    return _DICT_MAPPER.map_one(table)


def to_dict_list(table: ResultTable | None) -> list[dict[str, Any]]:
    """Convert every row of a table to a dict."""
    return _DICT_MAPPER.map_many(table)
