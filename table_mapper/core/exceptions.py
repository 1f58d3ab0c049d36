"""TableMapper exception hierarchy.

All exceptions are TableMapper-specific. Pydantic and driver exceptions are
wrapped, never exposed to callers.
"""

from __future__ import annotations

from typing import Any


class TableMapperError(Exception):
    """Base exception for all TableMapper errors."""


# --- Input ---


class InvalidInputError(TableMapperError, ValueError):
    """Raised when a required argument is None or malformed."""

    def __init__(self, argument: str, detail: str | None = None) -> None:
        self.argument = argument
        message = f"Invalid input '{argument}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class EmptyTableError(TableMapperError, ValueError):
    """Raised when a table has no rows but at least one is required."""

    def __init__(self) -> None:
        super().__init__("No rows in result table")


class MultipleRowsError(TableMapperError, ValueError):
    """Raised when a single-row conversion encounters more than one row."""

    def __init__(self, row_count: int) -> None:
        self.row_count = row_count
        super().__init__(f"Result table must contain only one row, got {row_count}")


class NotIterableError(TableMapperError, TypeError):
    """Raised when a value offers no iteration capability."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Object of type {type(value).__name__} is not iterable")


# --- Mapping ---


class MappingError(TableMapperError):
    """Base for mapping errors."""


class MissingColumnError(MappingError):
    """Raised when declared fields have no matching column."""

    def __init__(self, target_class: str, missing_fields: list[str]) -> None:
        self.target_class = target_class
        self.missing_fields = missing_fields
        super().__init__(f"Cannot map to {target_class}: missing columns {missing_fields}")


class TypeCoercionError(MappingError):
    """Raised when a column value cannot be converted to the field type."""

    def __init__(self, target_class: str, field_name: str, value: Any, detail: str) -> None:
        self.target_class = target_class
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Cannot coerce {value!r} for {target_class}.{field_name}: {detail}"
        )


class DuplicateKeyError(MappingError):
    """Raised when two columns share a name where unique keys are required."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Duplicate column name '{key}'")
