# policies/greedy.py
# Greedy policy built from an action-value function Q(s, a).
from __future__ import annotations
import numpy as np
from functools import partial
from typing import Any, Sequence

from core.algo import argmax
from core.logging import get_logger
from policies.base import QFunction, as_action_sequence, first_argmax_onehot

logger = get_logger(__name__)


class Greedy:
    """pi(s) = argmax_a Q(s, a); the first action in sequence order wins ties."""

    def __init__(self, q: QFunction, actions: Sequence):
        self.q = q
        self.actions = as_action_sequence(actions)
        logger.debug("Greedy policy over %d actions", len(self.actions))

    def __call__(self, s: Any) -> Any:
        return argmax(partial(self.q, s), self.actions)[0]

    def action_probabilities(self, s: Any) -> np.ndarray:
        values = np.array([self.q(s, a) for a in self.actions], dtype=float)
        return first_argmax_onehot(values)


def greedy(q: QFunction, actions: Sequence) -> Greedy:
    return Greedy(q, actions)
