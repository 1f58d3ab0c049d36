"""List detection and materialization helpers."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from table_mapper.core.exceptions import NotIterableError

_TEXT_TYPES = (str, bytes, bytearray)


def is_list(value: Any) -> bool:
    """Check whether a value is a list-like ordered collection.

    Mutable sequences (list, UserList, deque) qualify. Strings, bytes,
    mappings, sets, tuples and scalars do not.
    """
    if value is None or isinstance(value, _TEXT_TYPES):
        return False
    return isinstance(value, MutableSequence)


def to_list(value: Any) -> list[Any] | None:
    """Materialize any iterable into a new list, preserving order.

    None stays None so that "no information" is kept distinct from "empty".
    Strings iterate per character.

    Raises:
        NotIterableError: If the value does not support iteration.
    """
    if value is None:
        return None
    try:
        iterator = iter(value)
    except TypeError as e:
        raise NotIterableError(value) from e
    return list(iterator)
