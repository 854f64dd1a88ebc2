"""Exact rational numbers over python's unbounded integers.

Every value is kept in lowest terms with a strictly positive denominator, so
two rationals are equal exactly when their fields are equal.
"""

from dataclasses import dataclass
from math import gcd
from typing import Any, Tuple, Union

from robustshamir.errors import DivisionByZero


def _reduce(num: int, den: int) -> Tuple[int, int]:
    if den == 0:
        raise DivisionByZero(f"{num}/0")
    if den < 0:
        num, den = -num, -den
    if num == 0:
        return 0, 1
    g = gcd(num, den)
    return num // g, den // g


@dataclass(frozen=True)
class Rational:
    num: int
    den: int = 1

    def __post_init__(self: "Rational") -> None:
        num, den = _reduce(self.num, self.den)
        object.__setattr__(self, "num", num)
        object.__setattr__(self, "den", den)

    def __eq__(self: "Rational", other: Any) -> bool:
        if isinstance(other, int) and not isinstance(other, bool):
            other = Rational.from_int(other)
        if not isinstance(other, Rational):
            return NotImplemented
        return self.num == other.num and self.den == other.den

    def __hash__(self: "Rational") -> int:
        if self.is_integer():
            return hash(self.num)
        return hash((self.num, self.den))

    @staticmethod
    def from_int(n: int) -> "Rational":
        return Rational(n, 1)

    @staticmethod
    def from_ratio(num: int, den: int) -> "Rational":
        return Rational(num, den)

    def is_integer(self: "Rational") -> bool:
        return self.den == 1

    def add(self: "Rational", other: "Rational") -> "Rational":
        return Rational(
            self.num * other.den + other.num * self.den, self.den * other.den
        )

    def sub(self: "Rational", other: "Rational") -> "Rational":
        return Rational(
            self.num * other.den - other.num * self.den, self.den * other.den
        )

    def mul(self: "Rational", other: "Rational") -> "Rational":
        return Rational(self.num * other.num, self.den * other.den)

    def div(self: "Rational", other: "Rational") -> "Rational":
        if other.num == 0:
            raise DivisionByZero(f"{self} / 0")
        return Rational(self.num * other.den, self.den * other.num)

    def __add__(self: "Rational", other: Union["Rational", int]) -> "Rational":
        return self.add(_coerce(other))

    __radd__ = __add__

    def __sub__(self: "Rational", other: Union["Rational", int]) -> "Rational":
        return self.sub(_coerce(other))

    def __rsub__(self: "Rational", other: Union["Rational", int]) -> "Rational":
        return _coerce(other).sub(self)

    def __mul__(self: "Rational", other: Union["Rational", int]) -> "Rational":
        return self.mul(_coerce(other))

    __rmul__ = __mul__

    def __truediv__(self: "Rational", other: Union["Rational", int]) -> "Rational":
        return self.div(_coerce(other))

    def __rtruediv__(self: "Rational", other: Union["Rational", int]) -> "Rational":
        return _coerce(other).div(self)

    def __neg__(self: "Rational") -> "Rational":
        return Rational(-self.num, self.den)

    def __int__(self: "Rational") -> int:
        if not self.is_integer():
            raise ValueError(f"{self} is not an integer.")
        return self.num

    def __str__(self: "Rational") -> str:
        if self.is_integer():
            return str(self.num)
        return f"{self.num}/{self.den}"


ZERO = Rational(0)
ONE = Rational(1)


def _coerce(value: Union[Rational, int]) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational.from_int(value)
    raise TypeError(f"Unsupported operand {value!r}")
