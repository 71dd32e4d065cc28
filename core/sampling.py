# core/sampling.py
# Stochastic sampling primitives: uniform draws, Bernoulli tosses, uniform picks,
# inverse-CDF ("density") sampling and softmax sampling.
#
# Every primitive takes an optional numpy Generator. Without one, draws come from
# a process-wide default generator reseeded by seed(). That default is shared
# mutable state with no locking: threads must each pass their own generator.
from __future__ import annotations
import numpy as np
from typing import Callable, Optional, Sequence, TypeVar

from core.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E")

_default_rng: np.random.Generator = np.random.default_rng()


def seed(s: int) -> None:
    """Reseed the process-wide default generator."""
    global _default_rng
    _default_rng = np.random.default_rng(s)


def get_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return rng if given, else the process-wide default generator."""
    return _default_rng if rng is None else rng


def uniform(low: float = 0.0, high: float = 1.0,
            rng: Optional[np.random.Generator] = None) -> float:
    """A value in [low, high)."""
    return low + (high - low) * float(get_rng(rng).random())


def toss(proba: float, rng: Optional[np.random.Generator] = None) -> bool:
    """True with probability proba."""
    if not 0.0 <= proba <= 1.0:
        raise ValueError(f"toss probability must be in [0, 1], got {proba}")
    return uniform(rng=rng) < proba


def _require_nonempty(seq: Sequence) -> int:
    n = len(seq)
    if n == 0:
        raise ValueError("cannot sample from an empty sequence")
    return n


def select(seq: Sequence[E], rng: Optional[np.random.Generator] = None) -> E:
    """Uniform pick among the elements of seq."""
    n = _require_nonempty(seq)
    return seq[int(uniform(rng=rng) * n)]


def _sample_index(weights: np.ndarray, rng: Optional[np.random.Generator]) -> int:
    """Inverse-CDF draw: index of the first cumulative weight strictly above u."""
    if not np.all(np.isfinite(weights)):
        raise ValueError("sampling weights must be finite")
    if np.any(weights < 0.0):
        raise ValueError(f"sampling weights must be non-negative, got {weights.tolist()}")
    top = float(weights.max())
    if top <= 0.0:
        raise ValueError("sampling weights must have a positive sum")
    # rescaled so the running sum stays <= len(weights) and cannot overflow
    weights = weights / top
    cum = np.cumsum(weights)
    total = float(cum[-1])

    u = uniform(0.0, total, rng=rng)
    i = int(np.searchsorted(cum, u, side="right"))  # first i with u < cum[i]
    if i == len(cum):
        # u rounded up to the total: fall back on the last element that has weight
        i = int(np.flatnonzero(weights > 0.0)[-1])
        logger.debug("density draw hit the upper boundary u=%r, using index %d", u, i)
    return i


def density(f: Callable[[E], float], seq: Sequence[E],
            rng: Optional[np.random.Generator] = None) -> E:
    """Draw an element of seq with probability proportional to f(element).

    f must be non-negative on seq and positive somewhere. Zero-weight elements
    are never returned.
    """
    _require_nonempty(seq)
    weights = np.fromiter((f(e) for e in seq), dtype=float, count=len(seq))
    return seq[_sample_index(weights, rng)]


def _softmax_weights(f: Callable[[E], float], temperature: float,
                     seq: Sequence[E]) -> np.ndarray:
    if not temperature > 0.0:
        raise ValueError(f"softmax temperature must be positive, got {temperature}")
    _require_nonempty(seq)
    values = np.fromiter((f(e) for e in seq), dtype=float, count=len(seq))
    # shifting by the max leaves the distribution unchanged and keeps exp() <= 1
    return np.exp((values - values.max()) / temperature)


def softmax(f: Callable[[E], float], temperature: float, seq: Sequence[E],
            rng: Optional[np.random.Generator] = None) -> E:
    """Draw an element with probability proportional to exp(f(element)/temperature)."""
    return seq[_sample_index(_softmax_weights(f, temperature, seq), rng)]


def softmax_probabilities(f: Callable[[E], float], temperature: float,
                          seq: Sequence[E]) -> np.ndarray:
    """Exact softmax distribution over seq, in sequence order."""
    w = _softmax_weights(f, temperature, seq)
    return w / w.sum()
