# -*- coding: utf-8 -*-
"""
Star Battle solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。

マスの位置は基本的に「フラットなインデックス」（row * N + col）で扱います。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]


@dataclass(frozen=True, eq=False)
class GridModel:
    """
    パズルの定義（不変）を表すクラスです。

    Attributes
    ----------
    dimension : int
        盤面の一辺の長さ N。
    stars_per_line : int
        1行・1列・1ブロックあたりに置く星の数 K。
    region_of : numpy.ndarray
        shape = (N*N,) の int 配列。各マスのブロック番号（0..N-1）。
    cells_of_region : tuple of tuple of int
        ブロック番号 → そのブロックに属するマスのインデックス（昇順）。
    """

    dimension: int
    stars_per_line: int
    region_of: np.ndarray
    cells_of_region: Tuple[Tuple[int, ...], ...]

    @property
    def cell_count(self) -> int:
        """マスの総数 N*N を返します。"""
        return self.dimension * self.dimension

    @property
    def total_stars(self) -> int:
        """解に含まれる星の総数 K*N を返します。"""
        return self.stars_per_line * self.dimension

    def rc_to_index(self, row: int, col: int) -> int:
        return row * self.dimension + col

    def index_to_row(self, index: int) -> int:
        return index // self.dimension

    def index_to_col(self, index: int) -> int:
        return index % self.dimension

    def region_at(self, row: int, col: int) -> int:
        return int(self.region_of[self.rc_to_index(row, col)])

    def row_cells(self, row: int) -> range:
        start = row * self.dimension
        return range(start, start + self.dimension)

    def col_cells(self, col: int) -> range:
        return range(col, self.cell_count, self.dimension)

    def neighbors(self, index: int) -> Iterator[int]:
        """
        king-move（斜めを含む8方向）で隣接するマスを列挙します。
        マス自身は含みません。
        """
        row = self.index_to_row(index)
        col = self.index_to_col(index)
        for r in range(max(row - 1, 0), min(row + 2, self.dimension)):
            for c in range(max(col - 1, 0), min(col + 2, self.dimension)):
                if r != row or c != col:
                    yield self.rc_to_index(r, c)


@dataclass
class SolverState:
    """
    探索の1つの枝に対応する、書き換え可能な状態です。

    再帰のたびに copy() した複製を書き換えるので、
    兄弟の枝どうしで状態が混ざることはありません。

    Attributes
    ----------
    star_region, star_row, star_col : numpy.ndarray
        各ブロック・行・列にすでに置いた星の数。
    free_region, free_row, free_col : numpy.ndarray
        各ブロック・行・列で、まだ星を置けるマスの数。
    valid : numpy.ndarray
        shape = (N*N,) の bool 配列。True のマスにはまだ星を置ける。
    """

    star_region: np.ndarray
    star_row: np.ndarray
    star_col: np.ndarray
    free_region: np.ndarray
    free_row: np.ndarray
    free_col: np.ndarray
    valid: np.ndarray

    def copy(self) -> "SolverState":
        return SolverState(
            star_region=self.star_region.copy(),
            star_row=self.star_row.copy(),
            star_col=self.star_col.copy(),
            free_region=self.free_region.copy(),
            free_row=self.free_row.copy(),
            free_col=self.free_col.copy(),
            valid=self.valid.copy(),
        )


@dataclass
class SolutionRecord:
    """
    見つかった解を表すクラスです。

    Attributes
    ----------
    star_pos : numpy.ndarray
        shape = (N*N,) の bool 配列。True のマスに星がある。
    valid : numpy.ndarray
        解が見つかった時点での valid 配列（表示用）。
    """

    star_pos: np.ndarray
    valid: np.ndarray

    def star_cells(self, dimension: int) -> List[CellCoord]:
        """星の位置を (row, col) のリストで返します（行優先の順）。"""
        return [
            (int(i) // dimension, int(i) % dimension)
            for i in np.flatnonzero(self.star_pos)
        ]


@dataclass
class SolveOutcome:
    """
    solve_with_stats() の戻り値です。解そのものと探索の統計をまとめます。
    """

    solution: Optional[SolutionRecord]
    nodes_visited: int = 0
    pruned: int = 0
    backtracks: int = 0
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.solution is not None

    def stats(self) -> Dict[str, float]:
        return {
            "nodes_visited": self.nodes_visited,
            "pruned": self.pruned,
            "backtracks": self.backtracks,
            "elapsed": round(self.elapsed, 6),
        }
