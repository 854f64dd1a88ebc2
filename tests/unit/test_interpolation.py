import pytest

from robustshamir.errors import DivisionByZero
from robustshamir.interpolation import (
    interpolate_at,
    interpolate_at_zero,
    lagrange_lambda_at_zero,
)
from robustshamir.rational import Rational
from robustshamir.sharing import _eval_at


def test_lambdas():
    assert [lagrange_lambda_at_zero([1, 2, 3], i) for i in range(3)] == [
        Rational(3),
        Rational(-3),
        Rational(1),
    ]
    assert lagrange_lambda_at_zero([1, 3], 0) == Rational(3, 2)


def test_coincident_x():
    with pytest.raises(DivisionByZero):
        lagrange_lambda_at_zero([1, 1, 2], 0)
    with pytest.raises(DivisionByZero):
        interpolate_at_zero([4, 2, 4], [1, 2, 3])


@pytest.mark.parametrize(
    ("poly", "x_s"),
    [
        ([5, 2], [1, 2]),
        ([3, -2, 5], [1, 2, 4]),
        ([2 ** 100, 17, 0, 9], [7, 3, 11, 1]),
        ([123456789, 1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]),
    ],
)
def test_interpolation_exactness(poly, x_s):
    y_s = [_eval_at(poly, x) for x in x_s]
    assert interpolate_at_zero(x_s, y_s) == Rational(poly[0])
    for x, y in zip(x_s, y_s):
        assert interpolate_at(x_s, y_s, x) == Rational(y)
    for x in (0, -3, 20):
        assert interpolate_at(x_s, y_s, x) == Rational(_eval_at(poly, x))


def test_fractional_secret():
    assert interpolate_at_zero([1, 3], [0, 1]) == Rational(-1, 2)
