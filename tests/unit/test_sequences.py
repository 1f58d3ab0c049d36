"""Unit tests for list detection and materialization."""

from __future__ import annotations

from collections import UserList, deque

import pytest

from table_mapper.core.exceptions import NotIterableError
from table_mapper.core.sequences import is_list, to_list


class TestIsList:
    @pytest.mark.parametrize("value", [[1, 2], [], UserList([1]), deque([1, 2])])
    def test_list_like(self, value: object) -> None:
        assert is_list(value) is True

    @pytest.mark.parametrize(
        "value",
        [None, "abc", b"abc", bytearray(b"abc"), {"a": 1}, (1, 2), {1, 2}, 5, 1.5],
    )
    def test_not_list_like(self, value: object) -> None:
        assert is_list(value) is False


class TestToList:
    def test_none_stays_none(self) -> None:
        assert to_list(None) is None

    def test_list_is_copied(self) -> None:
        source = [1, 2, 3]
        result = to_list(source)
        assert result == [1, 2, 3]
        assert result is not source

    def test_string_iterates_characters(self) -> None:
        assert to_list("abc") == ["a", "b", "c"]

    def test_generator_consumed_in_order(self) -> None:
        assert to_list(i * i for i in range(4)) == [0, 1, 4, 9]

    def test_mapping_yields_keys(self) -> None:
        assert to_list({"a": 1, "b": 2}) == ["a", "b"]

    def test_empty_iterable(self) -> None:
        assert to_list(()) == []

    def test_not_iterable_raises(self) -> None:
        with pytest.raises(NotIterableError) as exc_info:
            to_list(5)
        assert exc_info.value.value == 5
        assert isinstance(exc_info.value, TypeError)
