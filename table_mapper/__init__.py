"""TableMapper - map relational result tables to Python objects."""

from __future__ import annotations

from table_mapper.core.config import MapperConfig
from table_mapper.core.enums import MissingColumnPolicy, RecordKind
from table_mapper.core.exceptions import (
    DuplicateKeyError,
    EmptyTableError,
    InvalidInputError,
    MappingError,
    MissingColumnError,
    MultipleRowsError,
    NotIterableError,
    TableMapperError,
    TypeCoercionError,
)
from table_mapper.core.table import ColumnDescriptor, ResultTable
from table_mapper.helpers import (
    has_extended_characters,
    is_empty,
    is_list,
    to_dict,
    to_dict_list,
    to_dynamic,
    to_dynamic_list,
    to_list,
    to_object,
    to_objects,
)
from table_mapper.mapping.model import ModelMapper
from table_mapper.mapping.record import DynamicRecord, RecordMapper

__all__ = [
    # Data model
    "ColumnDescriptor",
    "ResultTable",
    # Config
    "MapperConfig",
    "MissingColumnPolicy",
    "RecordKind",
    # Mappers
    "ModelMapper",
    "RecordMapper",
    "DynamicRecord",
    # Helpers
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
    # Exceptions
    "TableMapperError",
    "InvalidInputError",
    "EmptyTableError",
    "MultipleRowsError",
    "NotIterableError",
    "MappingError",
    "MissingColumnError",
    "TypeCoercionError",
    "DuplicateKeyError",
]
