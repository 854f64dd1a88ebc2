"""Reading shares from their JSON description.

A share file looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "7"},
        "2": {"base": "2", "value": "1001"}
    }

Each share value is written in its own base (2 to 36).
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from robustshamir.errors import InvalidDigit, MalformedShareFile
from robustshamir.reconstruct import Point
from robustshamir.utils import DIGITS

logger = logging.getLogger(__name__)

_SEPARATORS = {"_", " "}


def parse_base(literal: str, base: int) -> int:
    if not 2 <= base <= len(DIGITS):
        raise ValueError(f"Base must be between 2 and {len(DIGITS)}, not {base}.")
    accum = 0
    for char in literal:
        if char in _SEPARATORS:
            continue
        digit = DIGITS.find(char.lower())
        if digit < 0 or digit >= base:
            raise InvalidDigit(char, base)
        accum = accum * base + digit
    return accum


def _header(data: Dict[str, Any], name: str, override: Optional[int]) -> int:
    if override is not None:
        return override
    keys = data.get("keys", {})
    value = keys.get(name, data.get(name)) if isinstance(keys, dict) else None
    if value is None:
        raise MalformedShareFile(f"Missing `{name}` in share file.")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise MalformedShareFile(f"`{name}` must be an integer, not {value!r}.")


def _share(index: int, entry: Any) -> Point:
    if not isinstance(entry, dict) or "base" not in entry or "value" not in entry:
        raise MalformedShareFile(f"Share {index} needs a `base` and a `value`.")
    base, value = entry["base"], entry["value"]
    if isinstance(base, bool) or not isinstance(base, (int, str)):
        raise MalformedShareFile(f"Share {index} has an invalid base.")
    try:
        base = int(base)
    except ValueError:
        raise MalformedShareFile(f"Share {index} has an invalid base.")
    if not isinstance(value, str):
        raise MalformedShareFile(f"Share {index} value must be a string.")
    return Point(x=index, y=parse_base(value, base))


def load_shares(
    data: Dict[str, Any], n: Optional[int] = None, k: Optional[int] = None
) -> Tuple[List[Point], int]:
    """Extract the shares 1..n and the threshold k from a decoded share file.

    Indices declared by n but absent from the file are skipped.
    """
    if not isinstance(data, dict):
        raise MalformedShareFile("A share file must be a JSON object.")
    n = _header(data, "n", n)
    k = _header(data, "k", k)
    points = []
    for index in range(1, n + 1):
        entry = data.get(str(index))
        if entry is None:
            logger.warning("Share %d is missing, skipping it.", index)
            continue
        points.append(_share(index, entry))
    return points, k


def read_shares(
    path: Path, n: Optional[int] = None, k: Optional[int] = None
) -> Tuple[List[Point], int]:
    if str(path) == "-":
        data = json.load(sys.stdin)
    else:
        with path.open() as fd:
            data = json.load(fd)
    return load_shares(data, n, k)
