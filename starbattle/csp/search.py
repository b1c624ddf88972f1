# -*- coding: utf-8 -*-
"""
星の配置を探索するモジュールです。

再帰的な深さ優先探索（DFS）で、行優先・インデックス昇順に星を置いていきます。

ざっくり流れ
------------
1. 呼び出し元の状態を複製し、マス i に星を置いて制約を伝播する
2. どこかの行・列・ブロックで星が足りなくなる見込みなら、その枝を捨てる
3. 星の総数が K*N に達したら、その時点で解として返す（最初の解で打ち切り）
4. そうでなければ i より後ろの valid なマスについて再帰する
   - すでに通り過ぎた行に星が足りないなら、その先は探索しない
5. どの再帰も解を返さなければ、置いた星を取り消して失敗を返す

探索順は固定なので、同じ入力に対しては毎回同じ解が得られます。
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..config import SEARCH_LOG_INTERVAL
from ..logging_utils import get_logger
from ..types import GridModel, SolutionRecord, SolveOutcome, SolverState
from .propagation import (
    create_root_state,
    is_feasible,
    place_star,
    revoke_cell,
    rows_satisfied_before,
)

logger = get_logger("search")


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。

    star_pos / star_count は探索エンジン自身が持つ「今置いている星」で、
    再帰の行き・帰りで増減させます（状態の複製には含めません）。
    """

    grid: GridModel
    star_pos: np.ndarray
    star_count: int = 0

    nodes_visited: int = 0
    pruned: int = 0
    backtracks: int = 0

    @classmethod
    def for_grid(cls, grid: GridModel) -> "SearchContext":
        return cls(grid=grid, star_pos=np.zeros(grid.cell_count, dtype=bool))


def add_star(
    ctx: SearchContext,
    state_prev: SolverState,
    index: int,
) -> Optional[SolutionRecord]:
    """
    マス index に星を置いて、その先を再帰的に探索します。

    Parameters
    ----------
    ctx : SearchContext
        探索全体の共有情報。
    state_prev : SolverState
        呼び出し元の状態。この関数は複製を書き換えるので、
        失敗時の書き戻し以外では state_prev を変更しません。
    index : int
        星を置くマスのフラットなインデックス。

    Returns
    -------
    SolutionRecord or None
        解が見つかればその解、見つからなければ None。
    """
    grid = ctx.grid
    ctx.nodes_visited += 1

    if ctx.nodes_visited % SEARCH_LOG_INTERVAL == 0:
        logger.info(
            "nodes_visited = %d, stars = %d/%d, pruned = %d",
            ctx.nodes_visited,
            ctx.star_count,
            grid.total_stars,
            ctx.pruned,
        )

    if ctx.star_pos[index] or not state_prev.valid[index]:
        return None

    state = state_prev.copy()
    place_star(grid, state, index)

    if not is_feasible(grid, state):
        ctx.pruned += 1
        logger.debug("prune at cell %d (depth %d)", index, ctx.star_count + 1)
        return None

    ctx.star_count += 1
    ctx.star_pos[index] = True

    if ctx.star_count == grid.total_stars:
        return SolutionRecord(star_pos=ctx.star_pos.copy(), valid=state.valid.copy())

    for i in range(index + 1, grid.cell_count):
        if not state.valid[i]:
            continue

        # 通り過ぎた行に星が足りなければ、この先に解はない
        if not rows_satisfied_before(grid, state, grid.index_to_row(i)):
            break

        result = add_star(ctx, state, i)
        if result is not None:
            return result

    ctx.star_count -= 1
    ctx.star_pos[index] = False
    ctx.backtracks += 1

    # 呼び出し元の状態への書き戻し。
    # この時点で state.star_row[row] >= 1 なので、条件は成立しない。
    row = grid.index_to_row(index)
    if state.star_row[row] == 0:
        revoke_cell(grid, state_prev, index)

    return None


def solve_battle_grid(
    grid: GridModel,
    ctx: Optional[SearchContext] = None,
) -> Optional[SolutionRecord]:
    """
    探索のエントリポイントです。

    1行目の各マスを起点に add_star() を呼び、最初に見つかった解を返します。
    すべての起点で失敗した場合は None（解なし）を返します。
    """
    if ctx is None:
        ctx = SearchContext.for_grid(grid)

    root_state = create_root_state(grid)

    # マスを持たないブロックなどは、星を1つも置く前に判定できる
    if not is_feasible(grid, root_state):
        logger.info("grid is infeasible before any placement")
        return None

    for i in range(grid.dimension):
        result = add_star(ctx, root_state, i)
        if result is not None:
            return result

    return None


def solve_with_stats(grid: GridModel) -> SolveOutcome:
    """
    solve_battle_grid() を実行し、解と探索の統計をまとめて返します。
    """
    ctx = SearchContext.for_grid(grid)
    logger.info(
        "start: %dx%d grid, %d stars per line",
        grid.dimension,
        grid.dimension,
        grid.stars_per_line,
    )

    started = time.perf_counter()
    solution = solve_battle_grid(grid, ctx)
    elapsed = time.perf_counter() - started

    logger.info(
        "%s in %.3f s (nodes_visited = %d, pruned = %d, backtracks = %d)",
        "solved" if solution is not None else "no solution",
        elapsed,
        ctx.nodes_visited,
        ctx.pruned,
        ctx.backtracks,
    )

    return SolveOutcome(
        solution=solution,
        nodes_visited=ctx.nodes_visited,
        pruned=ctx.pruned,
        backtracks=ctx.backtracks,
        elapsed=elapsed,
    )
