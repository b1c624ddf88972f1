# starbattle/__init__.py
# -*- coding: utf-8 -*-
"""
starbattle パッケージの入口となるモジュールです。

    from starbattle import solve_text

と呼び出されることを想定しています。

ここでは、パズルのテキストを受け取り、
1. 盤面のパース（GridModel の構築）
2. ブロック配置の検査（任意）
3. 制約伝播付きの深さ優先探索
4. 解の検証
5. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from .errors import FormatError, LayoutError
from .eval.verify import find_violations, verify_solution
from .grid.parser import (
    build_grid_model,
    check_layout,
    find_layout_issues,
    grid_from_dataframe,
    load_grid_file,
    parse_grid_text,
)
from .csp.search import solve_battle_grid, solve_with_stats
from .logging_utils import get_logger
from .postprocess.render_result import build_result, render_grid
from .types import GridModel, SolutionRecord, SolveOutcome, SolverState

__all__ = [
    "FormatError",
    "LayoutError",
    "GridModel",
    "SolutionRecord",
    "SolveOutcome",
    "SolverState",
    "build_grid_model",
    "build_result",
    "check_layout",
    "find_layout_issues",
    "find_violations",
    "grid_from_dataframe",
    "load_grid_file",
    "parse_grid_text",
    "render_grid",
    "solve",
    "solve_battle_grid",
    "solve_file",
    "solve_text",
    "solve_with_stats",
    "verify_solution",
]

logger = get_logger()


def solve(grid: GridModel, strict: bool = False) -> Dict[str, Any]:
    """
    GridModel を解いて、表示用の dict を返します。

    strict=True のときは、ブロック配置に問題があれば LayoutError を送出します。
    False のときは警告ログを出すだけで、そのまま探索します。
    """
    logger.info("=== solve() START ===")

    if strict:
        check_layout(grid)
    else:
        for issue in find_layout_issues(grid):
            logger.warning("layout: %s", issue)

    outcome = solve_with_stats(grid)

    # 念のため、探索とは独立に解を検証しておく
    if outcome.solution is not None:
        for problem in find_violations(grid, outcome.solution.star_pos):
            logger.warning("[WARNING] solution check failed: %s", problem)

    logger.info("=== solve() END ===")
    return build_result(grid, outcome.solution, outcome)


def solve_text(text: str, strict: bool = False) -> Dict[str, Any]:
    """パズルのテキストを解きます。"""
    return solve(parse_grid_text(text), strict=strict)


def solve_file(path: str | Path, strict: bool = False) -> Dict[str, Any]:
    """パズルファイルを読み込んで解きます。"""
    return solve(load_grid_file(path), strict=strict)
