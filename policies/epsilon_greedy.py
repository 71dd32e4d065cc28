# policies/epsilon_greedy.py
# Epsilon-greedy policy ("epsilon dithering") built from Q(s, a).
from __future__ import annotations
import numpy as np
from functools import partial
from typing import Any, Optional, Sequence

from core.algo import argmax
from core.logging import get_logger
from core.sampling import select, toss
from policies.base import QFunction, as_action_sequence, check_epsilon, first_argmax_onehot

logger = get_logger(__name__)


class EpsilonGreedy:
    """With probability epsilon a uniformly random action, otherwise the greedy one.

    epsilon may be changed between calls (e.g. for a decay schedule). Draws use
    rng when given, else the shared default generator of core.sampling.
    """

    def __init__(self, q: QFunction, epsilon: float, actions: Sequence,
                 rng: Optional[np.random.Generator] = None):
        self.q = q
        self.actions = as_action_sequence(actions)
        self.rng = rng
        self.epsilon = epsilon
        logger.debug("EpsilonGreedy policy over %d actions, epsilon=%g",
                     len(self.actions), self.epsilon)

    @property
    def epsilon(self) -> float:
        return self._epsilon

    @epsilon.setter
    def epsilon(self, value: float) -> None:
        self._epsilon = check_epsilon(value)

    def __call__(self, s: Any) -> Any:
        if toss(self._epsilon, rng=self.rng):
            return select(self.actions, rng=self.rng)
        return argmax(partial(self.q, s), self.actions)[0]

    def action_probabilities(self, s: Any) -> np.ndarray:
        values = np.array([self.q(s, a) for a in self.actions], dtype=float)
        n = len(values)
        return self._epsilon / n + (1.0 - self._epsilon) * first_argmax_onehot(values)


def epsilon_greedy(q: QFunction, epsilon: float, actions: Sequence,
                   rng: Optional[np.random.Generator] = None) -> EpsilonGreedy:
    return EpsilonGreedy(q, epsilon, actions, rng=rng)
