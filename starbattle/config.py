# -*- coding: utf-8 -*-
"""
starbattle 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 受け付ける盤面サイズと星の数
- 入力ファイルの既定パス
- 表示に使う記号
- 探索ログの出力間隔
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import Dict

# ==== 盤面サイズ関連 =======================================================

# 盤面の一辺の長さ N → 1行・1列・1ブロックあたりの星の数 K
# 入力文字数が N*N と一致したサイズが採用されます。
SUPPORTED_GRID_SIZES: Dict[int, int] = {
    10: 2,
    14: 3,
}

# ブロック（領域）ごとに最低限必要なマス数。
# レイアウト検査（find_layout_issues）でのみ使います。
MIN_REGION_CELLS: Dict[int, int] = {
    10: 2,
    14: 3,
}

# ==== 入力関連 =============================================================

# CLI で引数が省略されたときに読むファイル
DEFAULT_INPUT_PATH: str = "input.txt"

# 入力テキストから取り除く改行文字
STRIPPED_CHARS: str = "\r\n"

# ==== 表示関連 =============================================================

# 外枠の角
CHAR_BOUND: str = "O"

# 制約伝播で星を置けなくなったマス
CHAR_INVALID: str = "o"

# 星
CHAR_STAR: str = "*"

# 何も決まっていないマス
CHAR_EMPTY: str = "_"

# ==== 探索関連 =============================================================

# 何ノードごとに探索の進捗をログに出すか。
SEARCH_LOG_INTERVAL: int = 10000
