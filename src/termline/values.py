"""Indexable list values shared with the evaluator.

A ``List`` is a handle onto shared storage: handles made with
:meth:`List.alias` see each other's mutations.  Indexing follows the shell's
rules: indices may be ints or strings of decimal digits, negative indices
count from the end, and anything else is an error rather than being clamped.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Iterator

_BAREWORD_RE = re.compile(r"^[\w\-./:@%+,~=]+$")


class ListIndexError(Exception):
    """Base class for errors indexing a :class:`List`."""


class IndexOutOfRange(ListIndexError):
    def __init__(self, index: object = None, length: int | None = None) -> None:
        super().__init__("index out of range")
        self.index = index
        self.length = length


class NeedIntegerIndex(ListIndexError):
    def __init__(self, index: object = None) -> None:
        super().__init__("need integer index")
        self.index = index


def int_index(idx: object) -> int:
    """Convert *idx* to an int, raising :class:`NeedIntegerIndex` if it is not one."""
    if isinstance(idx, bool):
        raise NeedIntegerIndex(idx)
    if isinstance(idx, int):
        return idx
    if isinstance(idx, str) and re.fullmatch(r"[+-]?[0-9]+", idx):
        return int(idx)
    raise NeedIntegerIndex(idx)


def int_index_within(idx: object, n: int) -> int:
    """Resolve *idx* against a container of length *n*."""
    i = int_index(idx)
    if i < 0:
        i += n
    if i < 0 or i >= n:
        raise IndexOutOfRange(idx, n)
    return i


class List:
    """A list of values."""

    __slots__ = ("_inner",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._inner: list[Any] = list(values)

    @classmethod
    def _sharing(cls, inner: list[Any]) -> List:
        lst = cls.__new__(cls)
        lst._inner = inner
        return lst

    def alias(self) -> List:
        """Another handle onto the same storage."""
        return List._sharing(self._inner)

    def shares_storage(self, other: List) -> bool:
        return self._inner is other._inner

    def kind(self) -> str:
        return "list"

    def append_strings(self, strings: Iterable[str]) -> None:
        self._inner.extend(strings)

    # -- indexing -----------------------------------------------------------

    def index_one(self, idx: object) -> Any:
        return self._inner[int_index_within(idx, len(self._inner))]

    def index_set(self, idx: object, value: Any) -> None:
        self._inner[int_index_within(idx, len(self._inner))] = value

    def __getitem__(self, idx: object) -> Any:
        return self.index_one(idx)

    def __setitem__(self, idx: object, value: Any) -> None:
        self.index_set(idx, value)

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._inner)

    # -- representation -----------------------------------------------------

    def repr(self) -> str:
        b = ListReprBuilder()
        for v in self._inner:
            b.write_elem(repr_value(v))
        return b.string()

    def __repr__(self) -> str:
        return f"List({self.repr()})"


class ListReprBuilder:
    """Builds the ``[a b c]`` representation of list-like values."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write_elem(self, v: str) -> None:
        self._parts.append(v)

    def string(self) -> str:
        return "[" + " ".join(self._parts) + "]"


def quote(s: str) -> str:
    """Quote *s* unless it can be written as a bare word."""
    if s and _BAREWORD_RE.match(s):
        return s
    return "'" + s.replace("'", "''") + "'"


def repr_value(v: Any) -> str:
    if isinstance(v, List):
        return v.repr()
    if isinstance(v, str):
        return quote(v)
    return quote(str(v))
