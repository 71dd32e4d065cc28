# core/sa.py
# State-action pairs, so that estimators written for V(state) can learn Q(state, action)
# by treating (s, a) as an opaque composite state.
from __future__ import annotations
import numpy as np
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

S = TypeVar("S")
A = TypeVar("A")


@dataclass(frozen=True)
class Pair(Generic[S, A]):
    s: S
    a: A


def pair(s: S, a: A) -> Pair[S, A]:
    return Pair(s, a)


def v_of_q(q: Callable[[S, A], float]) -> Callable[[Pair[S, A]], float]:
    """Rewrites q(s, a) as v((s, a))."""
    return lambda sa: q(sa.s, sa.a)


def vparam_of_qparam(q: Callable[[np.ndarray, S, A], float]
                     ) -> Callable[[np.ndarray, Pair[S, A]], float]:
    """Rewrites q(theta, s, a) as v(theta, (s, a))."""
    return lambda theta, sa: q(theta, sa.s, sa.a)


def gradvparam_of_gradqparam(gq: Callable[[np.ndarray, np.ndarray, S, A], Any]
                             ) -> Callable[[np.ndarray, np.ndarray, Pair[S, A]], None]:
    """Rewrites grad_q(theta, grad, s, a) as grad_v(theta, grad, (s, a)).

    grad is written in place by gq, as the estimators expect.
    """
    def grad_v(theta: np.ndarray, grad: np.ndarray, sa: Pair[S, A]) -> None:
        gq(theta, grad, sa.s, sa.a)
    return grad_v
