# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- board.py  : ボックスサイズ・座標計算などの形に関するヘルパー
- parser.py : DataFrame / リストなどから内部表現への変換と検証
- loader.py : 盤面 CSV の読み込み
"""
