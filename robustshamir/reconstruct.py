"""Robust secret reconstruction.

Every subset of k shares is interpolated; subsets giving an integer secret
are scored by how many of all the supplied shares lie on their polynomial.
The best scoring subset wins, the earliest one (in lexicographic order of
share positions) on ties. Shares off the winning polynomial are reported as
wrong.
"""

import logging
from collections import deque
from concurrent.futures import Executor, ProcessPoolExecutor
from dataclasses import dataclass
from functools import partial
from itertools import combinations, islice
from typing import (
    Any,
    Callable,
    Deque,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

from robustshamir.config import ReconstructCfg
from robustshamir.errors import (
    DivisionByZero,
    InsufficientShares,
    NoConsistentReconstruction,
)
from robustshamir.interpolation import interpolate_at, interpolate_at_zero

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Candidate:
    indices: Tuple[int, ...]
    secret: int
    inliers: Tuple[int, ...]

    @property
    def score(self: "Candidate") -> int:
        return len(self.inliers)

    def beats(self: "Candidate", other: Optional["Candidate"]) -> bool:
        """Higher score wins, then the lexicographically smaller subset."""
        if other is None:
            return True
        if self.score != other.score:
            return self.score > other.score
        return self.indices < other.indices


@dataclass(frozen=True)
class ReconstructionResult:
    secret: int
    inliers: int
    subset: Tuple[int, ...]
    wrong_positions: Tuple[int, ...]
    wrong_indices: Tuple[int, ...]
    candidates: int


def subsets(n: int, k: int) -> Iterator[Tuple[int, ...]]:
    """Ascending k-tuples of positions in range(n), in lexicographic order."""
    return combinations(range(n), k)


def evaluate_subset(
    points: Sequence[Point], indices: Tuple[int, ...]
) -> Optional[Candidate]:
    x_s = [points[i].x for i in indices]
    y_s = [points[i].y for i in indices]
    try:
        secret = interpolate_at_zero(x_s, y_s)
    except DivisionByZero:
        logger.debug("Skipping %s: coincident x-coordinates.", indices)
        return None
    if not secret.is_integer():
        logger.debug("Skipping %s: fractional secret %s.", indices, secret)
        return None
    inliers = []
    for position, point in enumerate(points):
        value = interpolate_at(x_s, y_s, point.x)
        if value.is_integer() and int(value) == point.y:
            inliers.append(position)
    return Candidate(indices=indices, secret=int(secret), inliers=tuple(inliers))


def _best_of(
    points: Sequence[Point], chunk: Iterable[Tuple[int, ...]]
) -> Tuple[Optional[Candidate], int]:
    best = None
    survivors = 0
    for indices in chunk:
        candidate = evaluate_subset(points, indices)
        if candidate is None:
            continue
        survivors += 1
        if candidate.beats(best):
            best = candidate
    return best, survivors


def _chunks(
    iterable: Iterator[Tuple[int, ...]], size: int
) -> Iterator[List[Tuple[int, ...]]]:
    while True:
        chunk = list(islice(iterable, size))
        if not chunk:
            return
        yield chunk


def bounded_map(
    pool: Executor, fn: Callable[[Any], T], items: Iterable[Any], window: int
) -> Iterator[T]:
    """Like Executor.map but with at most `window` pending calls, so items
    are only pulled from the iterable as results are consumed. Results come
    back in submission order.
    """
    pending: Deque = deque()
    for item in items:
        pending.append(pool.submit(fn, item))
        if len(pending) >= window:
            yield pending.popleft().result()
    while pending:
        yield pending.popleft().result()


def _search(
    points: Sequence[Point], k: int, cfg: ReconstructCfg
) -> Tuple[Optional[Candidate], int]:
    if cfg.workers <= 1:
        return _best_of(points, subsets(len(points), k))
    best = None
    survivors = 0
    with ProcessPoolExecutor(max_workers=cfg.workers) as pool:
        results = bounded_map(
            pool,
            partial(_best_of, points),
            _chunks(subsets(len(points), k), cfg.chunk_size),
            window=2 * cfg.workers,
        )
        for candidate, count in results:
            survivors += count
            if candidate is not None and candidate.beats(best):
                best = candidate
    return best, survivors


def robust_reconstruct(
    points: Sequence[Union[Point, Tuple[int, int]]],
    k: int,
    cfg: Optional[ReconstructCfg] = None,
) -> ReconstructionResult:
    """Recover the secret shared with threshold k from points, some of which
    may be wrong.

    Raises InsufficientShares when fewer than k points are given and
    NoConsistentReconstruction when no subset of k points yields an integer
    secret.
    """
    if not isinstance(k, int) or k < 1:
        raise ValueError(f"The threshold must be a positive integer, not {k!r}.")
    cfg = cfg or ReconstructCfg()
    points = [p if isinstance(p, Point) else Point(*p) for p in points]
    if len(points) < k:
        raise InsufficientShares(len(points), k)

    logger.info(
        "Searching subsets of %d among %d shares with %d worker(s).",
        k,
        len(points),
        cfg.workers,
    )
    best, survivors = _search(points, k, cfg)
    if best is None:
        raise NoConsistentReconstruction(k)

    inliers = set(best.inliers)
    wrong = tuple(i for i in range(len(points)) if i not in inliers)
    logger.info(
        "Subset %s wins with %d/%d inliers (%d valid subsets).",
        best.indices,
        best.score,
        len(points),
        survivors,
    )
    return ReconstructionResult(
        secret=best.secret,
        inliers=best.score,
        subset=best.indices,
        wrong_positions=wrong,
        wrong_indices=tuple(points[i].x for i in wrong),
        candidates=survivors,
    )
