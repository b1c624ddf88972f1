# -*- coding: utf-8 -*-
"""
入力テキストを盤面の内部表現（GridModel）に変換するモジュールです。

主な役割:
- テキストから改行を取り除き、1文字 = 1マスとして行優先で読む
- 各文字を16進数1桁のブロック番号として解釈する
- 文字数から盤面サイズ N と星の数 K を決める
- pandas.DataFrame の盤面（API から渡される形）も同じ規則で読む
"""

from __future__ import annotations

import string
from pathlib import Path
from typing import Dict, List, Mapping, Sequence

import numpy as np
import pandas as pd

from ..config import MIN_REGION_CELLS, STRIPPED_CHARS, SUPPORTED_GRID_SIZES
from ..errors import FormatError, LayoutError
from ..types import GridModel


def strip_newlines(text: str) -> str:
    """改行文字（\\r, \\n）をすべて取り除きます。"""
    return text.translate({ord(ch): None for ch in STRIPPED_CHARS})


def parse_region_symbol(symbol: str, position: int, dimension: int) -> int:
    """
    1文字をブロック番号に変換します。

    16進数1桁として読めない文字や、0..N-1 の範囲外の番号は
    FormatError として拒否します（範囲外の番号を黙って受け入れると、
    ブロック → マス一覧の表を範囲外で参照してしまうため）。

    int() は全角数字などの Unicode 数字も読めてしまうので、
    ASCII の 0-9 / a-f / A-F 以外は先に弾きます。
    """
    if len(symbol) != 1 or symbol not in string.hexdigits:
        raise FormatError(
            f"unknown region symbol {symbol!r} at position {position}",
            symbol=symbol,
            position=position,
        )

    region = int(symbol, 16)
    if region >= dimension:
        raise FormatError(
            f"region symbol {symbol!r} at position {position} is outside 0..{dimension - 1:X}",
            symbol=symbol,
            position=position,
        )
    return region


def build_grid_model(
    regions: Sequence[int],
    dimension: int,
    stars_per_line: int,
) -> GridModel:
    """
    ブロック番号の列（行優先）から GridModel を作ります。

    N と K は独立したパラメータとして受け取るので、
    10x10 / 14x14 以外の盤面（例: 4x4, K=1）も表現できます。

    Parameters
    ----------
    regions : sequence of int
        長さ N*N。各マスのブロック番号。
    dimension : int
        盤面の一辺 N。
    stars_per_line : int
        1行・1列・1ブロックあたりの星の数 K。
    """
    if dimension <= 0 or stars_per_line <= 0:
        raise ValueError(
            f"dimension and stars_per_line must be positive: {dimension}, {stars_per_line}"
        )
    if len(regions) != dimension * dimension:
        raise FormatError(
            f"expected {dimension * dimension} cells, got {len(regions)}",
            length=len(regions),
        )

    region_of = np.asarray(regions, dtype=int)
    if region_of.size and (region_of.min() < 0 or region_of.max() >= dimension):
        raise FormatError(f"region ids must be in range [0, {dimension})")

    buckets: List[List[int]] = [[] for _ in range(dimension)]
    for index, region in enumerate(region_of):
        buckets[int(region)].append(index)

    region_of.setflags(write=False)
    return GridModel(
        dimension=dimension,
        stars_per_line=stars_per_line,
        region_of=region_of,
        cells_of_region=tuple(tuple(cells) for cells in buckets),
    )


def parse_grid_text(
    text: str,
    sizes: Mapping[int, int] = SUPPORTED_GRID_SIZES,
) -> GridModel:
    """
    パズルのテキストを GridModel に変換します。

    Parameters
    ----------
    text : str
        1文字 = 1マス。改行は無視されます。
    sizes : mapping
        対応する盤面サイズ N → 星の数 K。

    Raises
    ------
    FormatError
        文字数がどの N*N とも一致しない、または不明な記号がある場合。
    """
    symbols = strip_newlines(text)

    dimension = None
    for n in sorted(sizes):
        if len(symbols) == n * n:
            dimension = n
            break

    if dimension is None:
        expected = ", ".join(str(n * n) for n in sorted(sizes))
        raise FormatError(
            f"invalid string length {len(symbols)} (expected one of: {expected})",
            length=len(symbols),
        )

    regions = [
        parse_region_symbol(symbol, position, dimension)
        for position, symbol in enumerate(symbols)
    ]
    return build_grid_model(regions, dimension, sizes[dimension])


def grid_from_dataframe(
    df: pd.DataFrame,
    sizes: Mapping[int, int] = SUPPORTED_GRID_SIZES,
) -> GridModel:
    """
    DataFrame の盤面（1セル = 1文字）を GridModel に変換します。

    各セルは前後の空白を取り除いた上で、行優先に連結して
    :func:`parse_grid_text` と同じ規則で解釈します。
    """
    rows, cols = df.shape
    if rows != cols:
        raise FormatError(f"board must be square, got {rows}x{cols}", length=rows * cols)

    symbols = []
    for i in range(rows):
        for j in range(cols):
            cell = df.iat[i, j]
            symbols.append("" if cell is None else str(cell).strip())

    # 空セルや複数文字のセルがあると文字数がずれるので、先に弾いておく
    for position, symbol in enumerate(symbols):
        if len(symbol) != 1:
            raise FormatError(
                f"cell ({position // cols}, {position % cols}) must hold exactly one symbol, got {symbol!r}",
                symbol=symbol,
                position=position,
            )

    return parse_grid_text("".join(symbols), sizes)


def load_grid_file(path: str | Path, sizes: Mapping[int, int] = SUPPORTED_GRID_SIZES) -> GridModel:
    """
    パズルファイルを読み込み、GridModel を返します。

    Raises
    ------
    FileNotFoundError
        ファイルが存在しない場合。
    FormatError
        中身が盤面として解釈できない場合。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Puzzle file not found: {p}")

    return parse_grid_text(p.read_text(encoding="utf-8"), sizes)


def find_layout_issues(
    grid: GridModel,
    min_cells: Dict[int, int] = MIN_REGION_CELLS,
) -> List[str]:
    """
    ブロック配置の構造的な問題を列挙します（例外は送出しません）。

    - マスを1つも持たないブロック
    - マス数が少なすぎるブロック
    - 上下左右に同じブロックのマスが無い、孤立したマス
    """
    issues: List[str] = []
    minimum = min_cells.get(grid.dimension, grid.stars_per_line)

    for region, cells in enumerate(grid.cells_of_region):
        if not cells:
            issues.append(f"region {region:X} has no cells")
        elif len(cells) < minimum:
            issues.append(f"region {region:X} has {len(cells)} cells < {minimum} minimum")

    n = grid.dimension
    for row in range(n):
        for col in range(n):
            sid = grid.region_at(row, col)
            same = [
                grid.region_at(r, c) == sid
                for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1))
                if 0 <= r < n and 0 <= c < n
            ]
            if not any(same):
                issues.append(f"cell ({row}, {col}) of region {sid:X} is isolated")

    return issues


def check_layout(grid: GridModel) -> None:
    """find_layout_issues() が問題を見つけたら LayoutError を送出します。"""
    issues = find_layout_issues(grid)
    if issues:
        raise LayoutError(issues)
