# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

星を1つ置くと、
- そのマスと king-move で隣接する最大8マス
- 星の数が K に達した行・列・ブロックの残りのマス
には、もう星を置けなくなります。
ここではそれらのマスを valid=False にし、
対応する行・列・ブロックの「まだ置けるマスの数（free_*）」を減らします。

free_* が減るのは、マスが valid → invalid に変わるときだけです。
1つの枝の中で free_* が増えることはありません。
"""

from __future__ import annotations

import numpy as np

from ..types import GridModel, SolverState


def create_root_state(grid: GridModel) -> SolverState:
    """
    まだ星を1つも置いていない初期状態を作ります。

    free_region はブロックのマス数で初期化されるので、
    マスを持たないブロックは最初から 0 になります。
    """
    n = grid.dimension
    return SolverState(
        star_region=np.zeros(n, dtype=int),
        star_row=np.zeros(n, dtype=int),
        star_col=np.zeros(n, dtype=int),
        free_region=np.array([len(cells) for cells in grid.cells_of_region], dtype=int),
        free_row=np.full(n, n, dtype=int),
        free_col=np.full(n, n, dtype=int),
        valid=np.ones(grid.cell_count, dtype=bool),
    )


def invalidate_cell(grid: GridModel, state: SolverState, index: int) -> bool:
    """
    マスを星を置けない状態にします。

    すでに invalid だったマスは何もしません（free_* を二重に減らさない）。

    Returns
    -------
    bool
        このマスが valid → invalid に変わったら True。
    """
    if not state.valid[index]:
        return False

    state.valid[index] = False
    state.free_region[grid.region_of[index]] -= 1
    state.free_row[grid.index_to_row(index)] -= 1
    state.free_col[grid.index_to_col(index)] -= 1
    return True


def place_star(grid: GridModel, state: SolverState, index: int) -> None:
    """
    まだ valid なマスに星を置き、制約を伝播します。

    1. 行・列・ブロックの星の数を増やす
    2. そのマス自身と、king-move で隣接するマスを invalid にする
    3. ブロック・行・列のうち星の数が K に達したものは、
       残りの valid なマスをすべて invalid にする
    """
    k = grid.stars_per_line
    region = int(grid.region_of[index])
    row = grid.index_to_row(index)
    col = grid.index_to_col(index)

    state.star_region[region] += 1
    state.star_row[row] += 1
    state.star_col[col] += 1

    invalidate_cell(grid, state, index)
    for neighbor in grid.neighbors(index):
        invalidate_cell(grid, state, neighbor)

    if state.star_region[region] == k:
        for cell in grid.cells_of_region[region]:
            invalidate_cell(grid, state, cell)

    if state.star_row[row] == k:
        for cell in grid.row_cells(row):
            invalidate_cell(grid, state, cell)

    if state.star_col[col] == k:
        for cell in grid.col_cells(col):
            invalidate_cell(grid, state, cell)


def is_feasible(grid: GridModel, state: SolverState) -> bool:
    """
    すべての行・列・ブロックで free + star >= K が成り立つかを判定します。

    1つでも満たさないものがあれば、その枝からは解に到達できません。
    """
    k = grid.stars_per_line
    if np.any(state.free_row + state.star_row < k):
        return False
    if np.any(state.free_col + state.star_col < k):
        return False
    if np.any(state.free_region + state.star_region < k):
        return False
    return True


def rows_satisfied_before(grid: GridModel, state: SolverState, row: int) -> bool:
    """
    row より上の行がすべて K 個の星を持っているかを返します。

    探索は行優先で進むので、一度通り過ぎた行にはもう星を置けません。
    """
    return bool(np.all(state.star_row[:row] >= grid.stars_per_line))


def revoke_cell(grid: GridModel, state: SolverState, index: int) -> None:
    """
    失敗した枝から呼び出し元の状態に書き戻すための無効化です。

    呼び出し元の状態で valid だったマスに対してだけ使われます。
    """
    state.valid[index] = False
    state.free_row[grid.index_to_row(index)] -= 1
    state.free_col[grid.index_to_col(index)] -= 1
    state.free_region[grid.region_of[index]] -= 1
