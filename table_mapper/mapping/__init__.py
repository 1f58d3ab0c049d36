"""Mapping layer - transform result tables into objects and records."""

from __future__ import annotations

from table_mapper.mapping.model import ModelMapper
from table_mapper.mapping.protocol import Mapper
from table_mapper.mapping.record import DynamicRecord, RecordMapper
from table_mapper.mapping.shape import FieldPlan, ShapePlan, compile_shape

__all__ = [
    "Mapper",
    "ModelMapper",
    "RecordMapper",
    "DynamicRecord",
    "ShapePlan",
    "FieldPlan",
    "compile_shape",
]
