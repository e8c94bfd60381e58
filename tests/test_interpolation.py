import pytest

from numlib.interpolation import (
    DuplicateNodeError,
    divided_differences,
    lagrange_interpolation,
    newton_interpolation,
)


def test_lagrange_square():
    assert lagrange_interpolation([0, 1, 2], [0, 1, 4], 1.5) == pytest.approx(2.25, abs=1e-9)


def test_lagrange_size_mismatch_raises():
    with pytest.raises(ValueError):
        lagrange_interpolation([0, 1, 2], [0, 1], 1.5)


def test_lagrange_empty_raises():
    with pytest.raises(ValueError):
        lagrange_interpolation([], [], 1.0)


def test_lagrange_quadratic_example():
    assert lagrange_interpolation([0, 1, 3], [1, 3, 13], 2.0) == pytest.approx(7.0, abs=1e-9)


def test_lagrange_reproduces_nodes():
    xs, ys = [0.5, 2.0, 3.5, 4.0], [1.0, -2.0, 0.25, 8.0]
    for x, y in zip(xs, ys):
        assert lagrange_interpolation(xs, ys, x) == pytest.approx(y, abs=1e-12)


def test_lagrange_duplicate_nodes_raise():
    with pytest.raises(DuplicateNodeError):
        lagrange_interpolation([1, 1, 2], [0, 1, 2], 0.5)


def test_divided_differences_values():
    assert divided_differences([0, 1, 3], [1, 3, 13]) == pytest.approx([1.0, 2.0, 1.0])


def test_divided_differences_duplicate_nodes_raise():
    with pytest.raises(DuplicateNodeError):
        divided_differences([0, 0, 1], [1, 2, 3])


def test_divided_differences_size_mismatch_raises():
    with pytest.raises(ValueError):
        divided_differences([0, 1], [1])


def test_newton_example():
    xs = [0, 1, 3]
    factors = divided_differences(xs, [1, 3, 13])
    assert newton_interpolation(xs, factors, 2.0) == pytest.approx(7.0, abs=1e-9)


def test_newton_matches_lagrange():
    xs, ys = [-1.0, 0.0, 2.0, 5.0], [3.0, 1.0, -4.0, 2.0]
    factors = divided_differences(xs, ys)
    for xp in (-2.0, 0.5, 1.7, 4.2):
        assert newton_interpolation(xs, factors, xp) == pytest.approx(
            lagrange_interpolation(xs, ys, xp), abs=1e-9
        )