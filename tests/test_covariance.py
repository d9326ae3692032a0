import logging
from unittest import mock

import pytest

import gpcov as gc
import gpcov.num as gnp
from gpcov.core import build_covariance, upper_triangle_pairs, covariance_diagnostics
from gpcov.kernel import Radial, Periodic, Linear


def full_double_loop(x, kernel):
    n = len(x)
    K = gnp.zeros((n, n))
    for i in range(n):
        for j in range(n):
            K[i, j] = kernel.apply(x[i], x[j])
    return K


def test_constant_inputs_give_ones():
    K = build_covariance([0.5] * 5, Radial(length_scale=1.0))
    assert K.shape == (5, 5)
    assert gnp.array_equal(K, gnp.ones((5, 5)))


def test_far_corner_is_filled():
    kernel = Periodic(length_scale=1.0, period=2.0)
    K = build_covariance([0.0, 1.0, 2.0], kernel)
    assert K[0, 2] == kernel.apply(0.0, 2.0)
    assert K[2, 0] == kernel.apply(2.0, 0.0)
    assert K[0, 1] == pytest.approx(gnp.exp(-1.0))
    assert K[1, 2] == pytest.approx(gnp.exp(-1.0))


@pytest.mark.parametrize(
    "kernel",
    [
        Radial(length_scale=0.7),
        Periodic(length_scale=1.2, period=1.5),
        Linear(offset=0.3, variance=0.1),
    ],
)
def test_matches_full_double_loop(kernel):
    x = [-1.3, 0.0, 0.25, 0.9, 2.0, 3.7]
    K = build_covariance(x, kernel)
    assert gnp.array_equal(K, full_double_loop(x, kernel))
    assert gnp.is_symmetric(K)
    for i in range(len(x)):
        assert K[i, i] == kernel.apply(x[i], x[i])


def test_single_point():
    K = build_covariance([2.0], Linear(offset=1.0, variance=0.5))
    assert K.shape == (1, 1)
    assert K[0, 0] == 1.5


def test_one_evaluation_per_unordered_pair():
    x = [0.0, 0.4, 1.1, 1.5, 3.0]
    n = len(x)
    with mock.patch.object(Radial, "apply", autospec=True, side_effect=Radial.apply) as m:
        build_covariance(x, Radial(length_scale=1.0))
    assert m.call_count == n * (n + 1) // 2
    seen = {(c.args[1], c.args[2]) for c in m.call_args_list}
    expected = {(x[i], x[j]) for i, j in upper_triangle_pairs(n)}
    assert seen == expected


def test_upper_triangle_pairs():
    pairs = list(upper_triangle_pairs(3))
    assert pairs == [(0, 0), (0, 1), (0, 2), (1, 1), (1, 2), (2, 2)]
    assert len(list(upper_triangle_pairs(10))) == 55
    assert list(upper_triangle_pairs(0)) == []


def test_result_is_read_only():
    K = build_covariance([0.0, 1.0], Radial(length_scale=1.0))
    assert not K.flags.writeable
    with pytest.raises(ValueError):
        K[0, 1] = 0.0


def test_column_input():
    x = gnp.array([[0.0], [1.0], [2.0]])
    K = build_covariance(x, Radial(length_scale=1.0))
    assert K.shape == (3, 3)


def test_empty_training_set():
    with pytest.raises(gc.EmptyTrainingSet):
        build_covariance([], Radial(length_scale=1.0))


def test_multidimensional_inputs_rejected():
    with pytest.raises(ValueError):
        build_covariance(gnp.ones((4, 2)), Radial(length_scale=1.0))


def test_non_finite_inputs_rejected():
    with pytest.raises(gc.NonFiniteInput):
        build_covariance([0.0, float("nan")], Radial(length_scale=1.0))
    with pytest.raises(gc.NonFiniteInput):
        build_covariance([float("inf")], Linear(offset=0.0, variance=1.0))


def test_overflow_rejected():
    with pytest.raises(gc.NonFiniteInput):
        build_covariance([1e200, 2e200], Linear(offset=0.0, variance=1.0))


def test_bad_kernel():
    with pytest.raises(TypeError):
        build_covariance([0.0, 1.0], "radial")


def test_debug_log():
    logger = logging.getLogger("gpcov")
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    try:
        with mock.patch.object(logger, "debug") as debug:
            build_covariance([0.0, 1.0, 2.0], Radial(length_scale=1.0))
    finally:
        logger.setLevel(previous)
    debug.assert_called_once()
    assert debug.call_args.args[1:4] == (3, 3, Radial(length_scale=1.0))
    assert debug.call_args.args[4] == 6


def test_diagnostics_positive_semidefinite():
    x = gnp.linspace(0.0, 3.0, 12)
    for kernel in [
        Radial(length_scale=0.5),
        Periodic(length_scale=1.0, period=2.0),
        Linear(offset=1.0, variance=0.2),
    ]:
        d = covariance_diagnostics(build_covariance(x, kernel))
        assert d.size == 12
        assert d.is_positive_semidefinite()


def test_diagnostics_detects_indefinite_matrix():
    d = covariance_diagnostics(gnp.array([[1.0, 2.0], [2.0, 1.0]]))
    assert d.min_eigenvalue == pytest.approx(-1.0)
    assert not d.is_positive_semidefinite()


def test_diagnostics_rejects_asymmetric_matrix():
    with pytest.raises(ValueError):
        covariance_diagnostics(gnp.array([[1.0, 0.5], [0.0, 1.0]]))
