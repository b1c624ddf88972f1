# -*- coding: utf-8 -*-
"""
コマンドラインから Star Battle を解くためのモジュールです。

    python -m starbattle [puzzle.txt] [--strict] [--verbose | --quiet]

読み込み → 探索 → 表示 を順番に行います。
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_INPUT_PATH
from .errors import FormatError
from .eval.verify import find_violations
from .grid.parser import check_layout, find_layout_issues, load_grid_file
from .csp.search import solve_with_stats
from .logging_utils import get_logger, set_log_level
from .postprocess.render_result import render_grid

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starbattle",
        description="Star Battle puzzle solver (10x10 with 2 stars, 14x14 with 3 stars)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format:
  one hexadecimal digit per cell naming its region, row by row;
  newlines are ignored (100 symbols -> 10x10, 196 symbols -> 14x14)
        """,
    )
    parser.add_argument(
        "input_path",
        nargs="?",
        default=DEFAULT_INPUT_PATH,
        help=f"Path to the puzzle file (default: {DEFAULT_INPUT_PATH})",
    )
    parser.add_argument("--strict", action="store_true", help="Reject grids with an invalid region layout")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Show debug logs")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only show warnings and errors")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)
    elif args.quiet:
        set_log_level(logging.WARNING)

    try:
        grid = load_grid_file(args.input_path)
        if args.strict:
            check_layout(grid)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except FormatError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    if not args.strict:
        for issue in find_layout_issues(grid):
            logger.warning("layout: %s", issue)

    print("Input Grid:")
    print(render_grid(grid))

    print("Starting Solve:")
    outcome = solve_with_stats(grid)

    if outcome.solution is None:
        print("No solution found")
        return 0

    for problem in find_violations(grid, outcome.solution.star_pos):
        logger.warning("[WARNING] solution check failed: %s", problem)

    print(render_grid(grid, outcome.solution))
    if outcome.elapsed <= 90:
        print(f"Solved in {outcome.elapsed:.3f} seconds")
    else:
        print(f"Solved in {outcome.elapsed / 60:.2f} minutes")
    return 0
