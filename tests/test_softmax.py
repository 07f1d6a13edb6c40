import logging

import numpy as np
import pytest

from activations import (
    forward_softmax, softmax_jacobian, backward_softmax,
    JacobianInputError, ShapeMismatchError,
)


def test_softmax_known_row():
    out = forward_softmax([[1.0, 2.0, 3.0]])
    np.testing.assert_allclose(out, [[0.0900, 0.2447, 0.6652]], atol=1e-4)
    assert out.sum() == pytest.approx(1.0)


def test_softmax_rows_sum_to_one():
    rng = np.random.RandomState(1)
    x = rng.randn(6, 4) * 5
    out = forward_softmax(x)
    assert out.shape == x.shape
    np.testing.assert_allclose(out.sum(axis=1), np.ones(6))


def test_softmax_rows_are_independent():
    x = np.array([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0]])
    out = forward_softmax(x)
    np.testing.assert_allclose(out[0], forward_softmax(x[:1])[0])
    np.testing.assert_allclose(out[1], [1 / 3, 1 / 3, 1 / 3])


def test_softmax_degenerate_row_is_zero(caplog):
    x = np.array([[-1000.0, -1000.0], [0.0, 0.0]])
    with caplog.at_level(logging.WARNING, logger="activations.softmax"):
        out = forward_softmax(x)
    np.testing.assert_array_equal(out[0], [0.0, 0.0])
    np.testing.assert_allclose(out[1], [0.5, 0.5])
    assert "zero exponential sum" in caplog.text


def test_softmax_overflow_propagates():
    with np.errstate(over="ignore", invalid="ignore"):
        out = forward_softmax([[1000.0, 0.0]])
    assert not np.all(np.isfinite(out))


def test_jacobian_known_row():
    out = forward_softmax([[1.0, 2.0, 3.0]])
    jacobian = softmax_jacobian(out)
    assert jacobian.shape == (3, 3)
    np.testing.assert_allclose(np.diag(jacobian), [0.0819, 0.1848, 0.2227], atol=1e-4)


def test_jacobian_symmetric_with_expected_diagonal():
    rng = np.random.RandomState(2)
    r = forward_softmax(rng.randn(1, 5))
    jacobian = softmax_jacobian(r)
    np.testing.assert_allclose(jacobian, jacobian.T)
    np.testing.assert_allclose(np.diag(jacobian), r[0] * (1 - r[0]))


def test_jacobian_off_diagonal():
    r = np.array([[0.2, 0.3, 0.5]])
    jacobian = softmax_jacobian(r)
    assert jacobian[0, 1] == pytest.approx(-0.06)
    assert jacobian[2, 0] == pytest.approx(-0.1)


@pytest.mark.parametrize("bad", [np.zeros((2, 3)), np.zeros(3), np.zeros((0, 3))])
def test_jacobian_requires_single_row(bad):
    with pytest.raises(JacobianInputError):
        softmax_jacobian(bad)


def test_backward_matches_row_vector_times_jacobian():
    rng = np.random.RandomState(3)
    out = forward_softmax(rng.randn(3, 4))
    grad = rng.randn(3, 4)
    result = backward_softmax(out, grad)
    for i in range(3):
        expected = grad[i:i + 1] @ softmax_jacobian(out[i:i + 1])
        np.testing.assert_allclose(result[i], expected[0])


def test_backward_uniform_gradient_vanishes():
    # 每行雅可比矩阵的行和为0
    out = forward_softmax([[1.0, 2.0, 3.0], [0.5, -0.5, 0.0]])
    np.testing.assert_allclose(backward_softmax(out, np.ones((2, 3))), np.zeros((2, 3)), atol=1e-12)


def test_backward_rejects_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        backward_softmax(np.full((2, 3), 1 / 3), np.ones((2, 2)))


def test_backward_does_not_mutate_inputs():
    out = forward_softmax([[1.0, 2.0, 3.0]])
    grad = np.array([[1.0, -1.0, 0.5]])
    out_copy, grad_copy = out.copy(), grad.copy()
    backward_softmax(out, grad)
    np.testing.assert_array_equal(out, out_copy)
    np.testing.assert_array_equal(grad, grad_copy)
