# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- 探索が今どこまで進んだか、どこで枝刈りされたかを
  確認するのに役立ちます。

ロガーの構成
------------
- "starbattle"        : 親ロガー。出力先（handler）はここにだけ付けます。
- "starbattle.search" : 探索の進み具合や枝刈り（csp/search.py）
- "starbattle.cli"    : コマンドラインからの実行
- "starbattle.api"    : API プロトタイプ

子ロガーはレベルを持たず、親ロガーのレベルと handler をそのまま使います。
そのため set_log_level() で親を切り替えるだけで、全体の出力量が変わります。
"""

from __future__ import annotations

import logging
from typing import Optional

# starbattle パッケージ共通で使うロガー名
LOGGER_NAME = "starbattle"


def _configure_root() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] [%(name)s] %(message)s")
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """
    starbattle のロガーを返します。

    Parameters
    ----------
    component : str, optional
        "search" などの部品名。指定すると "starbattle.search" のような
        子ロガーを返し、ログの [name] 欄でどの部品の出力か分かるようになります。
        None なら親ロガー "starbattle" そのものを返します。

    親ロガーに handler が無ければ、標準エラー出力（コンソール）に
    INFO レベルで表示するように設定します。
    """
    root = _configure_root()
    if component is None:
        return root
    return root.getChild(component)


def set_log_level(level: int) -> None:
    """
    全体のログレベルを切り替えます。

    CLI の --verbose（DEBUG: 枝刈りを1件ずつ表示）と
    --quiet（WARNING: 進捗を表示しない）から呼ばれます。
    子ロガーは親のレベルに従うので、親だけを変更します。
    """
    _configure_root().setLevel(level)
