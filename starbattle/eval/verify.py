# -*- coding: utf-8 -*-
"""
解（星の配置）がルールを満たしているかを確かめるモジュールです。

探索エンジンとは独立に、星の位置だけを見て次を検査します。
- 盤面の外や同じマスに星が置かれていないか
- 各行・各列・各ブロックの星がちょうど K 個か
- king-move で隣り合う星が無いか

solve() の結果確認や、テストでの答え合わせに使います。
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from ..types import CellCoord, GridModel

Stars = Union[np.ndarray, Sequence[bool], Iterable[CellCoord]]


def to_star_cells(grid: GridModel, stars: Stars) -> List[CellCoord]:
    """
    星の位置を (row, col) のリストに揃える。
    長さ N*N の bool 配列でも、(row, col) の列でもよい。
    """
    if isinstance(stars, np.ndarray) and stars.dtype == bool:
        return [(int(i) // grid.dimension, int(i) % grid.dimension) for i in np.flatnonzero(stars)]

    items = list(stars)
    if items and all(isinstance(x, (bool, np.bool_)) for x in items):
        return [(i // grid.dimension, i % grid.dimension) for i, x in enumerate(items) if x]

    return [(int(r), int(c)) for r, c in items]


def find_violations(grid: GridModel, stars: Stars) -> List[str]:
    """
    星の配置がルールを満たしているかを、探索とは独立に検査する。

    Returns
    -------
    list of str
        見つかった違反の説明。空なら正しい解。
    """
    n = grid.dimension
    k = grid.stars_per_line
    cells = to_star_cells(grid, stars)
    problems: List[str] = []

    out_of_range = [(r, c) for r, c in cells if not (0 <= r < n and 0 <= c < n)]
    if out_of_range:
        return [f"star {rc} is outside the {n}x{n} grid" for rc in out_of_range]

    if len(set(cells)) != len(cells):
        problems.append("the same cell holds more than one star")

    row_count = np.zeros(n, dtype=int)
    col_count = np.zeros(n, dtype=int)
    region_count = np.zeros(n, dtype=int)
    for r, c in set(cells):
        row_count[r] += 1
        col_count[c] += 1
        region_count[grid.region_at(r, c)] += 1

    for name, counts in (("row", row_count), ("column", col_count), ("region", region_count)):
        for i, count in enumerate(counts):
            if count != k:
                problems.append(f"{name} {i} has {count} stars (expected {k})")

    ordered: List[Tuple[int, int]] = sorted(set(cells))
    for a in range(len(ordered)):
        for b in range(a + 1, len(ordered)):
            (r1, c1), (r2, c2) = ordered[a], ordered[b]
            if abs(r1 - r2) <= 1 and abs(c1 - c2) <= 1:
                problems.append(f"stars at {ordered[a]} and {ordered[b]} are adjacent")

    return problems


def verify_solution(grid: GridModel, stars: Stars) -> bool:
    """星の配置が正しい解なら True。"""
    return not find_violations(grid, stars)
