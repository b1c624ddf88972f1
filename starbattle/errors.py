# -*- coding: utf-8 -*-
"""
入力の読み込みで使う例外クラスです。

「解が無い」ことはエラーではないので、ここには含めません
（solve_battle_grid が None を返します）。
"""

from __future__ import annotations

from typing import List, Optional


class FormatError(ValueError):
    """
    入力テキストが盤面として解釈できないときに送出されます。

    - 改行を除いた文字数が、対応サイズの N*N のどれとも一致しない
    - 16進数の1桁として読めない記号、または範囲外のブロック番号がある
    """

    def __init__(
        self,
        message: str,
        length: Optional[int] = None,
        symbol: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.length = length
        self.symbol = symbol
        self.position = position


class LayoutError(FormatError):
    """厳密チェック（--strict）でブロック配置に問題が見つかったときに送出されます。"""

    def __init__(self, issues: List[str]):
        super().__init__("invalid region layout: " + "; ".join(issues))
        self.issues = list(issues)
