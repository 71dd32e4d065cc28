# core/enumerator.py
# Lazy enumeration of discrete action spaces.
# Enumerator is a cursor over the integers whose dereference casts the counter to
# the action type; ActionRange is the half-open [begin, end) sequence of such
# cursors, so N actions are exposed without building a container.
from __future__ import annotations
from collections.abc import Sequence
from functools import total_ordering
from numbers import Integral
from typing import Any, Callable, Iterator, Union


@total_ordering
class Enumerator:
    """Cursor j over 0, 1, 2, ... dereferencing to cast(j)."""

    __slots__ = ("j", "cast")

    def __init__(self, j: int = 0, cast: Callable[[int], Any] = int):
        self.j = int(j)
        self.cast = cast

    @property
    def value(self) -> Any:
        return self.cast(self.j)

    def next(self) -> "Enumerator":
        return Enumerator(self.j + 1, self.cast)

    def prev(self) -> "Enumerator":
        return Enumerator(self.j - 1, self.cast)

    def __add__(self, diff: int) -> "Enumerator":
        if not isinstance(diff, Integral):
            return NotImplemented
        return Enumerator(self.j + int(diff), self.cast)

    __radd__ = __add__

    def __sub__(self, other: Union["Enumerator", int]):
        # cursor - cursor is a distance, cursor - int is a cursor
        if isinstance(other, Enumerator):
            return self.j - other.j
        if not isinstance(other, Integral):
            return NotImplemented
        return Enumerator(self.j - int(other), self.cast)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Enumerator):
            return NotImplemented
        return self.j == other.j

    def __lt__(self, other: "Enumerator") -> bool:
        if not isinstance(other, Enumerator):
            return NotImplemented
        return self.j < other.j

    def __hash__(self) -> int:
        return hash(self.j)

    def __repr__(self) -> str:
        return f"Enumerator({self.j}, cast={getattr(self.cast, '__name__', self.cast)})"


class ActionRange(Sequence):
    """Immutable sequence of the values of the cursors in [begin, end)."""

    __slots__ = ("begin", "end")

    def __init__(self, begin: Enumerator, end: Enumerator):
        if begin.cast is not end.cast:
            raise ValueError("begin and end cursors must dereference to the same type")
        if end - begin < 0:
            raise ValueError(f"end cursor {end.j} precedes begin cursor {begin.j}")
        self.begin = begin
        self.end = end

    @property
    def cast(self) -> Callable[[int], Any]:
        return self.begin.cast

    def __len__(self) -> int:
        return self.end - self.begin

    def __getitem__(self, idx):
        r = range(self.begin.j, self.end.j)[idx]
        if isinstance(r, range):
            if r.step == 1:
                return ActionRange(Enumerator(r.start, self.cast),
                                   Enumerator(max(r.start, r.stop), self.cast))
            return tuple(self.cast(j) for j in r)
        return self.cast(r)

    def __iter__(self) -> Iterator[Any]:
        cast = self.cast
        for j in range(self.begin.j, self.end.j):
            yield cast(j)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionRange):
            return NotImplemented
        return (self.begin, self.end, self.cast) == (other.begin, other.end, other.cast)

    def __hash__(self) -> int:
        return hash((self.begin.j, self.end.j))

    def __repr__(self) -> str:
        name = getattr(self.cast, "__name__", repr(self.cast))
        return f"ActionRange({self.begin.j}, {self.end.j}, cast={name})"


def actions(n: int, cast: Callable[[int], Any] = int) -> ActionRange:
    """The n actions cast(0), ..., cast(n-1)."""
    return ActionRange(Enumerator(0, cast), Enumerator(n, cast))
