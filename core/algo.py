# core/algo.py
# Scan-based extremum utilities over any iterable, given an evaluator f(element).
# Each function makes a single pass with one call to f per element.
from __future__ import annotations
from typing import Callable, Iterable, Iterator, Tuple, TypeVar

E = TypeVar("E")
V = TypeVar("V")


def _first(seq: Iterable[E]) -> Tuple[E, Iterator[E]]:
    it = iter(seq)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("extremum of an empty sequence is undefined") from None
    return first, it


def min_of(f: Callable[[E], V], seq: Iterable[E]) -> V:
    """Smallest value of f over seq."""
    first, it = _first(seq)
    m = f(first)
    for e in it:
        v = f(e)
        if v < m:
            m = v
    return m


def max_of(f: Callable[[E], V], seq: Iterable[E]) -> V:
    """Largest value of f over seq."""
    first, it = _first(seq)
    m = f(first)
    for e in it:
        v = f(e)
        if v > m:
            m = v
    return m


def range_of(f: Callable[[E], V], seq: Iterable[E]) -> Tuple[V, V]:
    """(min, max) of f over seq, computed in one pass.

    A value that raises the running max is not also compared to the running
    min in the same step; both bounds are seeded by the first element so the
    result still equals (min_of, max_of).
    """
    first, it = _first(seq)
    lo = hi = f(first)
    for e in it:
        v = f(e)
        if v > hi:
            hi = v
        elif v < lo:
            lo = v
    return lo, hi


def argmax(f: Callable[[E], V], seq: Iterable[E]) -> Tuple[E, V]:
    """(element, value) maximising f. The first maximiser wins ties."""
    best, it = _first(seq)
    best_v = f(best)
    for e in it:
        v = f(e)
        if v > best_v:
            best, best_v = e, v
    return best, best_v


def argmin(f: Callable[[E], V], seq: Iterable[E]) -> Tuple[E, V]:
    """(element, value) minimising f. The first minimiser wins ties."""
    best, it = _first(seq)
    best_v = f(best)
    for e in it:
        v = f(e)
        if v < best_v:
            best, best_v = e, v
    return best, best_v
