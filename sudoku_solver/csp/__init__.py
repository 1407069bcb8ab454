# -*- coding: utf-8 -*-
"""
sudoku_solver.csp パッケージ

数独を CSP（制約充足問題）として解くための処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- constraints.py : 行・列・ボックスの制約判定（is_safe）
- domains.py     : 空きマスごとの候補値の計算
- ordering.py    : 次に分岐するマスの選び方（naive / mrv / degree）
- search.py      : 深さ優先のバックトラック探索
"""
