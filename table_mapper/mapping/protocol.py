"""Mapper protocol.

All mappers implement this interface. map_one converts a single-row result,
map_many converts every row of a result table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from table_mapper.core.table import ResultTable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Mapper(Protocol[T_co]):
    """Base mapper protocol."""

    def map_one(self, table: ResultTable | None) -> T_co:
        """Map one row of a result table to a target object."""
        ...

    def map_many(self, table: ResultTable | None) -> list[T_co]:
        """Map all rows of a result table to a list of target objects."""
        ...
