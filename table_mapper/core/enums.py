"""Mapping enumerations."""

from __future__ import annotations

from enum import Enum


class MissingColumnPolicy(Enum):
    """What to do when a declared field has no matching column."""

    SKIP = "skip"
    ERROR = "error"


class RecordKind(Enum):
    """Output type of key/value record mapping."""

    DYNAMIC = "dynamic"
    DICT = "dict"
