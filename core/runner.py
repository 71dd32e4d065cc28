# core/runner.py
# Experiment driver: builds policies from config over a tabular Q and compares
# their empirical action frequencies with their exact selection distributions.
from __future__ import annotations
import numpy as np
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from core.enumerator import actions as action_range
from core.logging import get_logger
from policies.epsilon_greedy import EpsilonGreedy
from policies.greedy import Greedy
from policies.random_policy import Random
from policies.softmax import SoftMax

logger = get_logger(__name__)

POLICY_NAMES = ("Greedy", "EpsilonGreedy", "SoftMax", "Random")


@dataclass
class PolicyConfig:
    name: str
    epsilon: float = 0.1         # EpsilonGreedy only
    temperature: float = 1.0     # SoftMax only


@dataclass
class ExperimentConfig:
    q_table: List[List[float]]                 # q_table[s][a]
    policies: List[PolicyConfig] = field(default_factory=list)
    draws: int = 10_000                        # actions drawn per (policy, state)
    seed: int = 0
    plot_path: str = "outputs/figures/policy_frequencies.png"
    csv_prefix: str = "outputs/csv/policy_frequencies"
    log_level: str = "INFO"


def tabular_q(q_table: Sequence[Sequence[float]]):
    """Q(s, a) backed by a (S, A) table."""
    table = np.asarray(q_table, dtype=float)
    if table.ndim != 2 or table.shape[1] == 0:
        raise ValueError(f"q_table must be a non-empty (S, A) table, got shape {table.shape}")
    return lambda s, a: float(table[s, a])


def make_policy(cfg: PolicyConfig, q, actions: Sequence,
                rng: Optional[np.random.Generator] = None):
    if cfg.name == "Greedy":
        return Greedy(q, actions)
    elif cfg.name == "EpsilonGreedy":
        return EpsilonGreedy(q, cfg.epsilon, actions, rng=rng)
    elif cfg.name == "SoftMax":
        return SoftMax(q, cfg.temperature, actions, rng=rng)
    elif cfg.name == "Random":
        return Random(actions, rng=rng)
    else:
        raise ValueError(f"Unknown policy {cfg.name}")


def config_from_dict(raw: Dict[str, Any]) -> ExperimentConfig:
    return ExperimentConfig(
        q_table=[list(map(float, row)) for row in raw["q_table"]],
        policies=[PolicyConfig(**p) for p in raw.get("policies", [])],
        draws=int(raw.get("draws", 10_000)),
        seed=int(raw.get("seed", 0)),
        plot_path=raw.get("plot_path", ExperimentConfig.plot_path),
        csv_prefix=raw.get("csv_prefix", ExperimentConfig.csv_prefix),
        log_level=raw.get("log_level", ExperimentConfig.log_level),
    )


def load_config(path: str) -> ExperimentConfig:
    with open(path, "r") as f:
        return config_from_dict(yaml.safe_load(f))


def total_variation(p: np.ndarray, q: np.ndarray) -> float:
    """Total variation distance between two distributions on the same support."""
    return 0.5 * float(np.abs(np.asarray(p) - np.asarray(q)).sum())


def run_frequencies(cfg: ExperimentConfig) -> Dict[str, Any]:
    """Draw cfg.draws actions per state from every configured policy.

    Returns
        names:     policy names, in config order
        empirical: (P, S, A) empirical action frequencies
        exact:     (P, S, A) exact selection probabilities
    """
    if cfg.draws <= 0:
        raise ValueError(f"draws must be positive, got {cfg.draws}")
    q = tabular_q(cfg.q_table)
    S, A = np.asarray(cfg.q_table).shape
    acts = action_range(A)
    rng = np.random.default_rng(cfg.seed)

    P = len(cfg.policies)
    empirical = np.zeros((P, S, A), dtype=float)
    exact = np.zeros((P, S, A), dtype=float)

    for i, pcfg in enumerate(cfg.policies):
        policy = make_policy(pcfg, q, acts, rng)
        for s in range(S):
            counts = np.zeros(A, dtype=int)
            for _ in range(cfg.draws):
                counts[policy(s)] += 1
            empirical[i, s] = counts / cfg.draws
            exact[i, s] = policy.action_probabilities(s)
        tv = max(total_variation(empirical[i, s], exact[i, s]) for s in range(S))
        logger.info("%s: %d draws/state over %d states, max TV distance %.4f",
                    pcfg.name, cfg.draws, S, tv)

    return {
        "cfg": cfg,
        "names": [p.name for p in cfg.policies],
        "empirical": empirical,
        "exact": exact,
    }
