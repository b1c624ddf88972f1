# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。

- render_grid()  : ブロックの境界線つきのテキスト表示
- build_board()  : マスごとの記号を並べた DataFrame
- build_result() : API などに返す JSON 向けの dict
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd

from ..config import CHAR_BOUND, CHAR_EMPTY, CHAR_INVALID, CHAR_STAR
from ..types import GridModel, SolutionRecord, SolveOutcome


def cell_char(grid: GridModel, solution: Optional[SolutionRecord], row: int, col: int) -> str:
    """
    1マス分の表示記号を返します。

    - 星があるマス: "*"
    - 制約伝播で星を置けなくなったマス: "o"
    - それ以外: "_"
    """
    if solution is None:
        return CHAR_EMPTY

    index = grid.rc_to_index(row, col)
    if solution.star_pos[index]:
        return CHAR_STAR
    if not solution.valid[index]:
        return CHAR_INVALID
    return CHAR_EMPTY


def render_grid(grid: GridModel, solution: Optional[SolutionRecord] = None) -> str:
    """
    盤面をテキストで描画します。

    隣のマスとブロックが異なる位置に境界線（"|" や "---"）を引きます。
    同じ入力に対しては常に同じ文字列を返します。

    Parameters
    ----------
    grid : GridModel
        盤面の定義。
    solution : SolutionRecord, optional
        解。None なら全マスを空として描画します。
    """
    n = grid.dimension
    lines: List[str] = []

    # 上端
    header = CHAR_BOUND
    for j in range(n):
        header += "---" + (CHAR_BOUND if j == n - 1 else "-")
    lines.append(header)

    for i in range(n):
        last_row = i + 1 == n
        curr = "|"
        below = CHAR_BOUND if last_row else "|"

        for j in range(n):
            sid = grid.region_at(i, j)

            curr += " " + cell_char(grid, solution, i, j) + " "

            # 下のマスと別ブロックなら横線
            if last_row or sid != grid.region_at(i + 1, j):
                below += "---"
            else:
                below += "   "

            # 右のマスと別ブロックなら縦線
            if j + 1 == n or sid != grid.region_at(i, j + 1):
                curr += "|"
            else:
                curr += " "

            if j + 1 == n:
                below += CHAR_BOUND if last_row else "|"
            else:
                below += "-"

        lines.append(curr)
        lines.append(below)

    return "\n".join(lines) + "\n"


def build_board(grid: GridModel, solution: Optional[SolutionRecord]) -> pd.DataFrame:
    """マスごとの表示記号を N x N の DataFrame にまとめます。"""
    n = grid.dimension
    board = [[cell_char(grid, solution, i, j) for j in range(n)] for i in range(n)]
    return pd.DataFrame(board)


def build_result(
    grid: GridModel,
    solution: Optional[SolutionRecord],
    outcome: Optional[SolveOutcome] = None,
) -> Dict[str, Any]:
    """
    探索結果を JSON に変換しやすい dict にまとめます。
    """
    board_df = build_board(grid, solution)

    result: Dict[str, Any] = {
        "solved": solution is not None,
        "dimension": grid.dimension,
        "stars_per_line": grid.stars_per_line,
        "stars": [] if solution is None else [list(rc) for rc in solution.star_cells(grid.dimension)],
        "board": ["".join(row) for row in board_df.values.tolist()],  # DataFrameは返さない
    }
    if outcome is not None:
        result["stats"] = outcome.stats()
    return result
