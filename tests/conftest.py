"""Shared fixtures for the policy toolkit tests."""

import os

import numpy as np
import pytest


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Seeded numpy generator; override the seed with TEST_RNG_SEED when debugging."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)
