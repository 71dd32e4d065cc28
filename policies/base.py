# policies/base.py
# Helpers shared by the policy classes.
from __future__ import annotations
import numpy as np
from typing import Any, Callable, Sequence

from core.enumerator import ActionRange

# Action-value function: q(state, action) -> reward-like value
QFunction = Callable[[Any, Any], float]


def as_action_sequence(actions: Sequence) -> Sequence:
    """Snapshot actions for a policy; lazy immutable ranges are kept as is."""
    if not isinstance(actions, (ActionRange, range)):
        actions = tuple(actions)
    if len(actions) == 0:
        raise ValueError("a policy needs at least one action")
    return actions


def check_epsilon(epsilon: float) -> float:
    if not 0.0 <= epsilon <= 1.0:
        raise ValueError(f"epsilon must be in [0, 1], got {epsilon}")
    return float(epsilon)


def check_temperature(temperature: float) -> float:
    if not temperature > 0.0:
        raise ValueError(f"temperature must be positive, got {temperature}")
    return float(temperature)


def first_argmax_onehot(values: np.ndarray) -> np.ndarray:
    """One-hot vector on the first maximum of values."""
    p = np.zeros(len(values), dtype=float)
    p[int(np.argmax(values))] = 1.0
    return p
