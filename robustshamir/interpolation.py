"""Lagrange interpolation over exact rationals.

Unlike a modular implementation the arithmetic here is done in Q, so a
subset of shares that does not lie on an integer polynomial is detectable:
its interpolated secret simply comes out fractional.
https://en.wikipedia.org/wiki/Lagrange_polynomial
"""

from typing import Sequence

from robustshamir.rational import ONE, ZERO, Rational


def _basis_at(x: int, x_s: Sequence[int], i: int) -> Rational:
    """Evaluates the i-th lagrange basis polynomial of x_s at x, i.e.
    prod_{j != i} (x - x_j) / (x_i - x_j).

    Raises DivisionByZero when x_i is repeated in x_s.
    """
    lam = ONE
    for j, x_j in enumerate(x_s):
        if j == i:
            continue
        lam = lam.mul(Rational.from_ratio(x - x_j, x_s[i] - x_j))
    return lam


def lagrange_lambda_at_zero(x_s: Sequence[int], i: int) -> Rational:
    return _basis_at(0, x_s, i)


def interpolate_at_zero(x_s: Sequence[int], y_s: Sequence[int]) -> Rational:
    """Find P(0), the secret, of the polynomial going through the given
    points; k points define a polynomial of up to (k-1)th order.
    """
    assert len(x_s) == len(y_s), "x_s and y_s must have the same length"
    accum = ZERO
    for i, y in enumerate(y_s):
        accum = accum.add(Rational.from_int(y).mul(lagrange_lambda_at_zero(x_s, i)))
    return accum


def interpolate_at(x_s: Sequence[int], y_s: Sequence[int], x: int) -> Rational:
    """Find the y-value for the given x, given the k (x, y) points."""
    assert len(x_s) == len(y_s), "x_s and y_s must have the same length"
    for x_i, y_i in zip(x_s, y_s):
        if x == x_i:
            return Rational.from_int(y_i)
    accum = ZERO
    for i, y in enumerate(y_s):
        accum = accum.add(Rational.from_int(y).mul(_basis_at(x, x_s, i)))
    return accum
