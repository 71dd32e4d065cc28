"""Tests for the experiment config, policy factory and frequency runner."""

import numpy as np
import pytest
import yaml

from core.enumerator import actions
from core.runner import (
    ExperimentConfig,
    PolicyConfig,
    config_from_dict,
    load_config,
    make_policy,
    run_frequencies,
    tabular_q,
    total_variation,
)
from policies.epsilon_greedy import EpsilonGreedy
from policies.greedy import Greedy
from policies.random_policy import Random
from policies.softmax import SoftMax

RAW = {
    "seed": 3,
    "draws": 4000,
    "plot_path": "outputs/figures/x.png",
    "q_table": [[0.0, 1.0, 0.5], [2.0, 0.0, 2.0]],
    "policies": [
        {"name": "Greedy"},
        {"name": "EpsilonGreedy", "epsilon": 0.3},
        {"name": "SoftMax", "temperature": 0.5},
        {"name": "Random"},
    ],
}


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump(RAW))
    cfg = load_config(str(path))
    assert cfg.seed == 3
    assert cfg.draws == 4000
    assert cfg.q_table == [[0.0, 1.0, 0.5], [2.0, 0.0, 2.0]]
    assert cfg.policies[1] == PolicyConfig(name="EpsilonGreedy", epsilon=0.3)
    assert cfg.policies[2].temperature == 0.5


def test_make_policy_dispatch():
    q = tabular_q(RAW["q_table"])
    acts = actions(3)
    assert isinstance(make_policy(PolicyConfig("Greedy"), q, acts), Greedy)
    eg = make_policy(PolicyConfig("EpsilonGreedy", epsilon=0.4), q, acts)
    assert isinstance(eg, EpsilonGreedy) and eg.epsilon == 0.4
    sm = make_policy(PolicyConfig("SoftMax", temperature=2.0), q, acts)
    assert isinstance(sm, SoftMax) and sm.temperature == 2.0
    assert isinstance(make_policy(PolicyConfig("Random"), q, acts), Random)
    with pytest.raises(ValueError, match="Unknown policy"):
        make_policy(PolicyConfig("Boltzmann"), q, acts)


def test_tabular_q_rejects_bad_tables():
    with pytest.raises(ValueError):
        tabular_q([1.0, 2.0])
    assert tabular_q([[1.0, 2.0]])(0, 1) == 2.0


def test_total_variation():
    assert total_variation([1.0, 0.0], [0.0, 1.0]) == 1.0
    assert total_variation([0.5, 0.5], [0.5, 0.5]) == 0.0


def test_run_frequencies_shapes_and_accuracy():
    out = run_frequencies(config_from_dict(RAW))
    assert out["names"] == ["Greedy", "EpsilonGreedy", "SoftMax", "Random"]
    assert out["empirical"].shape == out["exact"].shape == (4, 2, 3)
    np.testing.assert_allclose(out["empirical"].sum(axis=-1), 1.0)
    np.testing.assert_allclose(out["exact"].sum(axis=-1), 1.0)
    # greedy picks the first of the tied actions in state 1
    np.testing.assert_array_equal(out["empirical"][0, 1], [1.0, 0.0, 0.0])
    np.testing.assert_allclose(out["empirical"], out["exact"], atol=0.04)


def test_run_frequencies_is_reproducible():
    cfg = config_from_dict(RAW)
    a = run_frequencies(cfg)["empirical"]
    b = run_frequencies(cfg)["empirical"]
    np.testing.assert_array_equal(a, b)


def test_run_frequencies_rejects_non_positive_draws():
    cfg = ExperimentConfig(q_table=[[0.0]], policies=[PolicyConfig("Greedy")], draws=0)
    with pytest.raises(ValueError):
        run_frequencies(cfg)


def test_config_carries_output_settings(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump(dict(RAW, csv_prefix="out/csv/run", log_level="DEBUG")))
    cfg = load_config(str(path))
    assert cfg.plot_path == "outputs/figures/x.png"
    assert cfg.csv_prefix == "out/csv/run"
    assert cfg.log_level == "DEBUG"
    defaults = config_from_dict({"q_table": [[0.0]]})
    assert defaults.csv_prefix == "outputs/csv/policy_frequencies"
    assert defaults.log_level == "INFO"
