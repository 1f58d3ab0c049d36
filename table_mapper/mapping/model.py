"""Table-to-model mapper.

Supports dataclasses, Pydantic models, and plain classes. Columns are matched
to fields by exact name (after alias translation); values are coerced to the
field's declared type. Null values are assigned through unchanged.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from table_mapper.core.config import DEFAULT_CONFIG, MapperConfig
from table_mapper.core.enums import MissingColumnPolicy
from table_mapper.core.exceptions import (
    EmptyTableError,
    InvalidInputError,
    MissingColumnError,
    TypeCoercionError,
)
from table_mapper.core.logging import get_logger
from table_mapper.core.table import ResultTable
from table_mapper.mapping.shape import FieldPlan, coerce_value, compile_shape

T = TypeVar("T")

logger = get_logger(__name__)


def _first_error(error: ValidationError) -> tuple[str, Any, str]:
    """Extract (field, input, message) from a pydantic validation error."""
    details = error.errors()
    if not details:
        return "", None, str(error)
    first = details[0]
    loc = first.get("loc") or ("",)
    return str(loc[0]), first.get("input"), first.get("msg", str(error))


class ModelMapper(Generic[T]):
    """Result-table-to-model mapper.

    Detection order:
    1. Pydantic BaseModel -> model_validate(values)
    2. dataclass -> target_class(**values)
    3. Plain class -> target_class(**values), or attribute assignment when
       its __init__ takes no named parameters

    Args:
        target_class: The class to construct from each row.
        config: Mapping policy; defaults to MapperConfig().
        aliases: Optional column-name to field-name mapping. Overrides
            config.aliases when given.
    """

    def __init__(
        self,
        target_class: type[T],
        config: MapperConfig | None = None,
        *,
        aliases: dict[str, str] | None = None,
    ) -> None:
        self._target_class = target_class
        self._config = config if config is not None else DEFAULT_CONFIG
        self._aliases = aliases if aliases is not None else self._config.aliases
        self._plan = compile_shape(target_class)
        # field name -> aliased column name; later aliases win
        self._columns_by_field = {field: column for column, field in self._aliases.items()}

    def _check_table(self, table: ResultTable | None) -> ResultTable:
        if table is None:
            raise InvalidInputError("table", "result table is None")
        if table.is_empty:
            raise EmptyTableError()
        return table

    def _position(self, table: ResultTable, field_name: str) -> int | None:
        """Column position for a field: its aliased column first, then its own name."""
        column = self._columns_by_field.get(field_name)
        if column is not None:
            position = table.index_of(column)
            if position is not None:
                return position
        return table.index_of(field_name)

    def _bind(self, table: ResultTable) -> list[tuple[FieldPlan, int]]:
        """Pair each mapped field with its column position.

        Raises MissingColumnError for required fields without a column, and
        for every unmatched field under MissingColumnPolicy.ERROR.
        """
        strict = self._config.missing_columns is MissingColumnPolicy.ERROR
        bound: list[tuple[FieldPlan, int]] = []
        missing: list[str] = []
        for field in self._plan.fields:
            position = self._position(table, field.name)
            if position is None:
                if strict or field.required:
                    missing.append(field.name)
                else:
                    logger.debug(
                        "No column for %s.%s, keeping default",
                        self._target_class.__name__,
                        field.name,
                    )
                continue
            bound.append((field, position))

        if missing:
            raise MissingColumnError(self._target_class.__name__, missing)
        return bound

    def _coerce(self, field: FieldPlan, value: Any) -> Any:
        try:
            return coerce_value(value, field.annotation)
        except ValidationError as e:
            _, _, message = _first_error(e)
            raise TypeCoercionError(
                self._target_class.__name__, field.name, value, message
            ) from e

    def _map_row(self, row: tuple[Any, ...], bound: list[tuple[FieldPlan, int]]) -> T:
        values: dict[str, Any] = {}
        for field, position in bound:
            value = row[position]
            if value is not None and self._config.coerce:
                value = self._coerce(field, value)
            values[field.name] = value

        try:
            return self._plan.build(values)  # type: ignore[no-any-return]
        except ValidationError as e:
            field_name, value, message = _first_error(e)
            raise TypeCoercionError(
                self._target_class.__name__, field_name, value, message
            ) from e

    def map_one(self, table: ResultTable | None) -> T:
        """Map the first row of the table; any further rows are ignored."""
        table = self._check_table(table)
        if table.row_count > 1:
            logger.debug(
                "Mapping first of %d rows to %s, ignoring the rest",
                table.row_count,
                self._target_class.__name__,
            )
        return self._map_row(table.rows[0], self._bind(table))

    def map_many(self, table: ResultTable | None) -> list[T]:
        """Map every row, preserving row order."""
        table = self._check_table(table)
        bound = self._bind(table)
        return [self._map_row(row, bound) for row in table.rows]
