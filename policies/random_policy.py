# policies/random_policy.py
# Uniformly random policy; ignores the state.
from __future__ import annotations
import numpy as np
from typing import Any, Optional, Sequence

from core.logging import get_logger
from core.sampling import select
from policies.base import as_action_sequence

logger = get_logger(__name__)


class Random:
    def __init__(self, actions: Sequence, rng: Optional[np.random.Generator] = None):
        self.actions = as_action_sequence(actions)
        self.rng = rng
        logger.debug("Random policy over %d actions", len(self.actions))

    def __call__(self, s: Any) -> Any:
        return select(self.actions, rng=self.rng)

    def action_probabilities(self, s: Any) -> np.ndarray:
        n = len(self.actions)
        return np.full(n, 1.0 / n)


def random(actions: Sequence, rng: Optional[np.random.Generator] = None) -> Random:
    return Random(actions, rng=rng)
