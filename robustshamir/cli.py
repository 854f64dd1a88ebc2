"""Recover a shamir shared secret even when some of the shares are wrong.

Every combination of k shares is interpolated and the one agreeing with the
most shares is kept. The shares disagreeing with it are reported as wrong.
"""

import json
import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import List, Optional, Sequence

from tabulate import tabulate

from robustshamir.config import ReconstructCfg, load_cfg
from robustshamir.reconstruct import Point, ReconstructionResult, robust_reconstruct
from robustshamir.shares import read_shares
from robustshamir.sharing import corrupt, create_shares, dump_shares
from robustshamir.utils import dataclass_to_dict

logger = logging.getLogger(__name__)


def format_text(result: ReconstructionResult) -> str:
    wrong = ",".join(str(i) for i in result.wrong_indices)
    return f"secret={result.secret}\nwrong_share_indices=[{wrong}]"


def format_json(result: ReconstructionResult) -> str:
    return json.dumps(dataclass_to_dict(result), sort_keys=True, indent=4)


def format_table(result: ReconstructionResult, points: Sequence[Point]) -> str:
    wrong = set(result.wrong_positions)
    rows = [
        (point.x, point.y, "wrong" if position in wrong else "ok")
        for position, point in enumerate(points)
    ]
    return "\n".join(
        [
            f"Secret: {result.secret}",
            f"Inliers: {result.inliers}/{len(points)}",
            "",
            tabulate(rows, ("Index", "Value", "Status")),
        ]
    )


def recover(args: Namespace) -> None:
    cfg = load_cfg(args.config) if args.config else ReconstructCfg()
    if args.workers is not None:
        cfg = ReconstructCfg(workers=args.workers, chunk_size=cfg.chunk_size)
    points, k = read_shares(args.file, n=args.n, k=args.k)
    result = robust_reconstruct(points, k, cfg)
    if args.format == "json":
        print(format_json(result))
    elif args.format == "table":
        print(format_table(result, points))
    else:
        print(format_text(result))


def split(args: Namespace) -> None:
    secret, points = create_shares(args.k, args.n, args.bound)
    positions = [index - 1 for index in args.corrupt]
    for position in positions:
        if not 0 <= position < len(points):
            raise ValueError(f"There is no share {position + 1} to corrupt.")
    points = corrupt(points, positions)
    print(json.dumps(dump_shares(points, args.k, args.base), indent=4))
    print(f"secret={secret}", file=sys.stderr)


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(description=__doc__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress, repeat for debug output.",
    )
    actions = parser.add_subparsers(dest="action", required=True)

    parser_recover = actions.add_parser("recover", help="Recover a secret.")
    parser_recover.add_argument(
        "file",
        nargs="?",
        default=Path("-"),
        type=Path,
        help="JSON file describing the shares, `-` for stdin.",
    )
    parser_recover.add_argument("-k", type=int, help="Override the threshold.")
    parser_recover.add_argument("-n", type=int, help="Override the share count.")
    parser_recover.add_argument(
        "--format", choices=["text", "json", "table"], default="text"
    )
    parser_recover.add_argument(
        "--config", type=Path, help="JSON file with the search configuration."
    )
    parser_recover.add_argument("--workers", type=int, help="Search processes.")
    parser_recover.set_defaults(func=recover)

    parser_split = actions.add_parser("split", help="Generate test shares.")
    parser_split.add_argument("-k", type=int, required=True, help="Threshold.")
    parser_split.add_argument("-n", type=int, required=True, help="Share count.")
    parser_split.add_argument(
        "--bound", type=int, default=2 ** 64, help="Upper bound of coefficients."
    )
    parser_split.add_argument("--base", type=int, default=10)
    parser_split.add_argument(
        "--corrupt",
        type=int,
        nargs="*",
        default=[],
        help="Indices of the shares to corrupt.",
    )
    parser_split.set_defaults(func=split)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = get_parser().parse_args(argv)
    logging.basicConfig(
        level=[logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)],
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        args.func(args)
    except (ValueError, OSError) as err:
        logger.debug("Command failed.", exc_info=True)
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
