# -*- coding: utf-8 -*-
"""
starbattle.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py : テキストや DataFrame から GridModel への変換、ブロック配置の検査
"""
