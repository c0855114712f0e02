"""Tests for the indexable List value."""

from __future__ import annotations

import pytest

from termline.values import (
    IndexOutOfRange,
    List,
    ListIndexError,
    NeedIntegerIndex,
    int_index,
    quote,
)


class TestIndexOne:
    def test_non_negative_index(self) -> None:
        lst = List(["a", "b", "c"])
        assert lst.index_one(0) == "a"
        assert lst.index_one(2) == "c"

    def test_negative_index_counts_from_end(self) -> None:
        lst = List(["a", "b", "c"])
        assert lst.index_one(-1) == "c"
        assert lst.index_one(-3) == "a"

    def test_string_index(self) -> None:
        lst = List(["a", "b", "c"])
        assert lst.index_one("1") == "b"
        assert lst.index_one("-1") == "c"

    def test_out_of_range(self) -> None:
        for n in range(0, 5):
            lst = List(range(n))
            with pytest.raises(IndexOutOfRange):
                lst.index_one(n)
            with pytest.raises(IndexOutOfRange):
                lst.index_one(-n - 1)

    @pytest.mark.parametrize("idx", ["x", "1.5", "", " 1", 1.0, None, True])
    def test_need_integer_index(self, idx: object) -> None:
        with pytest.raises(NeedIntegerIndex):
            List(["a"]).index_one(idx)

    def test_errors_share_a_base_class(self) -> None:
        assert issubclass(IndexOutOfRange, ListIndexError)
        assert issubclass(NeedIntegerIndex, ListIndexError)

    def test_out_of_range_carries_details(self) -> None:
        with pytest.raises(IndexOutOfRange) as excinfo:
            List(["a"]).index_one(5)
        assert excinfo.value.index == 5
        assert excinfo.value.length == 1
        assert str(excinfo.value) == "index out of range"


class TestIndexSet:
    def test_set_then_get(self) -> None:
        for n in range(1, 5):
            for i in list(range(n)) + list(range(-n, 0)):
                lst = List(range(n))
                lst.index_set(i, "v")
                assert lst.index_one(i) == "v"

    def test_out_of_range(self) -> None:
        lst = List(["a"])
        with pytest.raises(IndexOutOfRange):
            lst.index_set(1, "v")
        assert list(lst) == ["a"]

    def test_item_syntax(self) -> None:
        lst = List(["a", "b"])
        lst[-1] = "z"
        assert lst[1] == "z"
        with pytest.raises(IndexOutOfRange):
            lst[2]


class TestSharedStorage:
    def test_alias_sees_mutations(self) -> None:
        lst = List(["a", "b"])
        alias = lst.alias()
        alias.index_set(0, "x")
        assert lst.index_one(0) == "x"
        lst.append_strings(["c"])
        assert len(alias) == 3
        assert alias.shares_storage(lst)

    def test_separate_lists_do_not_share(self) -> None:
        values = ["a"]
        a = List(values)
        b = List(values)
        a.index_set(0, "x")
        assert b.index_one(0) == "a"
        assert not a.shares_storage(b)


class TestRepr:
    def test_kind(self) -> None:
        assert List().kind() == "list"

    def test_empty(self) -> None:
        assert List().repr() == "[]"

    def test_bare_words_and_quoted(self) -> None:
        assert List(["a", "b c", "it's", ""]).repr() == "[a 'b c' 'it''s' '']"

    def test_nested(self) -> None:
        assert List(["a", List(["b"])]).repr() == "[a [b]]"

    def test_quote(self) -> None:
        assert quote("foo/bar.txt") == "foo/bar.txt"
        assert quote("$x") == "'$x'"


class TestIntIndex:
    def test_accepts_ints_and_digit_strings(self) -> None:
        assert int_index(3) == 3
        assert int_index("+3") == 3
        assert int_index("-12") == -12
