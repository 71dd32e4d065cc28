"""Tests for the state-action adaptation layer."""

import dataclasses

import numpy as np
import pytest

from core.sa import Pair, gradvparam_of_gradqparam, pair, v_of_q, vparam_of_qparam

N_STATES, N_ACTIONS = 3, 2


def phi(s, a):
    f = np.zeros(N_STATES * N_ACTIONS)
    f[s * N_ACTIONS + a] = 1.0
    f[-1] += 0.5 * s
    return f


def q_param(theta, s, a):
    return float(theta @ phi(s, a))


def grad_q_param(theta, grad, s, a):
    grad[:] = phi(s, a)


def test_pair_is_immutable_and_hashable():
    sa = pair(1, 0)
    assert sa == Pair(1, 0)
    assert {sa: 3.0}[Pair(1, 0)] == 3.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        sa.s = 2


def test_vparam_reproduces_q(rng):
    theta = rng.normal(size=N_STATES * N_ACTIONS)
    v = vparam_of_qparam(q_param)
    for s in range(N_STATES):
        for a in range(N_ACTIONS):
            assert v(theta, pair(s, a)) == q_param(theta, s, a)


def test_gradv_writes_same_gradient(rng):
    theta = rng.normal(size=N_STATES * N_ACTIONS)
    gv = gradvparam_of_gradqparam(grad_q_param)
    for s in range(N_STATES):
        for a in range(N_ACTIONS):
            expected = np.empty_like(theta)
            got = np.full_like(theta, np.nan)
            grad_q_param(theta, expected, s, a)
            gv(theta, got, pair(s, a))
            np.testing.assert_array_equal(got, expected)


def test_adaptor_sees_parameter_updates():
    theta = np.zeros(N_STATES * N_ACTIONS)
    v = vparam_of_qparam(q_param)
    theta[1 * N_ACTIONS + 1] = 2.0
    assert v(theta, pair(1, 1)) == 2.0


def test_v_of_q():
    v = v_of_q(lambda s, a: 10 * s + a)
    assert v(pair(3, 4)) == 34
