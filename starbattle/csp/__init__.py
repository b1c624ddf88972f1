# -*- coding: utf-8 -*-
"""
starbattle.csp パッケージ

制約伝播付きのバックトラック探索に関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- propagation.py : 星を置いたときの状態更新（制約伝播）と実行可能性チェック
- search.py      : 深さ優先探索による解の探索
"""
