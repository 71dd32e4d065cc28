# policies/softmax.py
# Softmax (Boltzmann) policy built from Q(s, a).
from __future__ import annotations
import numpy as np
from functools import partial
from typing import Any, Optional, Sequence

from core import sampling
from core.logging import get_logger
from policies.base import QFunction, as_action_sequence, check_temperature

logger = get_logger(__name__)


class SoftMax:
    """pi(a | s) proportional to exp(Q(s, a) / temperature).

    High temperatures approach uniform selection, low ones approach greedy.
    """

    def __init__(self, q: QFunction, temperature: float, actions: Sequence,
                 rng: Optional[np.random.Generator] = None):
        self.q = q
        self.actions = as_action_sequence(actions)
        self.rng = rng
        self.temperature = temperature
        logger.debug("SoftMax policy over %d actions, temperature=%g",
                     len(self.actions), self.temperature)

    @property
    def temperature(self) -> float:
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        self._temperature = check_temperature(value)

    def __call__(self, s: Any) -> Any:
        return sampling.softmax(partial(self.q, s), self._temperature, self.actions, rng=self.rng)

    def action_probabilities(self, s: Any) -> np.ndarray:
        return sampling.softmax_probabilities(partial(self.q, s), self._temperature, self.actions)


def softmax(q: QFunction, temperature: float, actions: Sequence,
            rng: Optional[np.random.Generator] = None) -> SoftMax:
    return SoftMax(q, temperature, actions, rng=rng)
