"""Mapper configuration.

MapperConfig is a Pydantic model for type-safe mapper settings.
"""

from __future__ import annotations

from pydantic import BaseModel

from table_mapper.core.enums import MissingColumnPolicy


class MapperConfig(BaseModel):
    """Configuration for typed table mapping."""

    missing_columns: MissingColumnPolicy = MissingColumnPolicy.SKIP
    aliases: dict[str, str] = {}
    coerce: bool = True


DEFAULT_CONFIG = MapperConfig()
