"""Generation of integer shamir shares, mostly useful to build test vectors.

The polynomial has integer coefficients and is evaluated without any modulus
so that the shares can be recovered with exact rational interpolation.
"""

import random
from typing import Any, Dict, List, Optional, Sequence, Tuple

from robustshamir.reconstruct import Point
from robustshamir.utils import int_2_base

_DEFAULT_BOUND = 2 ** 64


def _eval_at(poly: Sequence[int], x: int) -> int:
    """Evaluates polynomial (coefficient tuple) at x with horner's method."""
    accum = 0
    for coeff in reversed(poly):
        accum *= x
        accum += coeff
    return accum


def create_shares(
    minimum: int, total: int, bound: int = _DEFAULT_BOUND
) -> Tuple[int, List[Point]]:
    """Generates a random shamir pool, returns the secret and the share points.
    """
    if minimum < 1:
        raise ValueError("At least one share must be required.")
    if minimum > total:
        raise ValueError("Pool secret would be irrecoverable.")
    rand_gen = random.SystemRandom()
    poly = [rand_gen.randint(0, bound) for _ in range(minimum)]
    points = [Point(x=i, y=_eval_at(poly, i)) for i in range(1, total + 1)]
    return poly[0], points


def corrupt(
    points: Sequence[Point],
    positions: Sequence[int],
    rng: Optional[random.Random] = None,
) -> List[Point]:
    rng = rng or random.SystemRandom()
    corrupted = list(points)
    for position in positions:
        point = corrupted[position]
        y = point.y
        while y == point.y:
            y = rng.randint(0, max(2 * point.y, 1))
        corrupted[position] = Point(x=point.x, y=y)
    return corrupted


def dump_shares(points: Sequence[Point], k: int, base: int = 10) -> Dict[str, Any]:
    n = max((point.x for point in points), default=0)
    data: Dict[str, Any] = {"keys": {"n": n, "k": k}}
    for point in points:
        data[str(point.x)] = {"base": str(base), "value": int_2_base(point.y, base)}
    return data
