import pytest

from numlib.approximation import (
    ApproximationError,
    evaluate_polynomial,
    polynomial_approximation,
)


def test_linear_fit_exact():
    coeffs = polynomial_approximation([0, 1, 2], [1, 3, 5], 1)
    assert coeffs == pytest.approx([1.0, 2.0], abs=1e-9)


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        polynomial_approximation([0, 1], [1, 3, 5], 2)


def test_too_few_points_raises():
    with pytest.raises(ValueError):
        polynomial_approximation([0, 1], [1, 3], 2)


def test_quadratic_fit_exact():
    coeffs = polynomial_approximation([0, 1, 2], [1, 3, 7], 2)
    assert coeffs == pytest.approx([1.0, 1.0, 1.0], abs=1e-9)


def test_degenerate_points_raise():
    with pytest.raises(ApproximationError):
        polynomial_approximation([1, 1], [1, 2], 1)


def test_noisy_linear_fit_minimises_residual():
    xs, ys = [0, 1, 2, 3, 4], [1.1, 2.8, 4.2, 5.9, 7.8]
    c0, c1 = polynomial_approximation(xs, ys, 1)
    residuals = [y - (c0 + c1 * x) for x, y in zip(xs, ys)]
    assert sum(residuals) == pytest.approx(0.0, abs=1e-9)
    assert sum(r * x for r, x in zip(residuals, xs)) == pytest.approx(0.0, abs=1e-9)


def test_evaluate_polynomial():
    assert evaluate_polynomial([1, 2, 3], 2.0) == pytest.approx(17.0)
    assert evaluate_polynomial([5], 10.0) == pytest.approx(5.0)
    assert evaluate_polynomial([], 3.0) == 0.0


def test_fit_then_evaluate_round_trip():
    coeffs = polynomial_approximation([0, 1, 2, 3], [1, 3, 7, 13], 2)
    assert evaluate_polynomial(coeffs, 4.0) == pytest.approx(21.0, abs=1e-9)