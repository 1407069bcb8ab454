# -*- coding: utf-8 -*-
"""
空きマスごとの候補値（ドメイン）を計算するモジュールです。

- candidates()          : 1マス分の候補値集合
- collect_empty_cells() : 盤面全体を1回走査し、空きマスごとの情報を作る

盤面は探索中に書き換わり続けるので、候補はキャッシュせず
毎回その時点の盤面から計算し直します。
"""

from __future__ import annotations

from typing import List, Set

from ..grid.board import box_index, box_size, iter_box
from ..types import Board, EmptyCellDescriptor


def candidates(board: Board, row: int, col: int) -> Set[int]:
    """
    (row, col) に置ける値の集合を返します。

    {1..N} から、同じ行・列・ボックスにすでにある値を取り除いたものです。
    ある値 v が候補に含まれるのは is_safe(board, row, col, v) が真のときに限ります。
    """
    n = len(board)
    b = box_size(n)

    used: Set[int] = set(board[row])
    used.update(r[col] for r in board)
    used.update(board[r][c] for r, c in iter_box(row, col, b))

    return {v for v in range(1, n + 1) if v not in used}


def sorted_candidates(board: Board, row: int, col: int) -> List[int]:
    """候補値を昇順に並べたもの（探索で試す順番）。"""
    return sorted(candidates(board, row, col))


def collect_empty_cells(board: Board) -> List[EmptyCellDescriptor]:
    """
    盤面を行優先で1回走査し、空きマスごとの EmptyCellDescriptor を作ります。

    行・列・ボックスごとの「使用済みの値」と「空きマス数」は
    走査の最初に1回だけ集計します。
    各マスの候補は candidates() を個別に呼んだ場合と同じになります。

    degree は同じ行・列・ボックスにある自分以外の空きマス数の合計です。
    （行とボックス、列とボックスの重なりはそれぞれ別に数えます）

    Returns
    -------
    list of EmptyCellDescriptor
        行優先の走査順。空きマスがなければ空リスト。
    """
    n = len(board)
    b = box_size(n)
    full = set(range(1, n + 1))

    row_used: List[Set[int]] = [set() for _ in range(n)]
    col_used: List[Set[int]] = [set() for _ in range(n)]
    box_used: List[Set[int]] = [set() for _ in range(n)]
    row_empty = [0] * n
    col_empty = [0] * n
    box_empty = [0] * n

    for r in range(n):
        for c in range(n):
            v = board[r][c]
            k = box_index(r, c, b)
            if v == 0:
                row_empty[r] += 1
                col_empty[c] += 1
                box_empty[k] += 1
            else:
                row_used[r].add(v)
                col_used[c].add(v)
                box_used[k].add(v)

    cells: List[EmptyCellDescriptor] = []
    for r in range(n):
        for c in range(n):
            if board[r][c] != 0:
                continue
            k = box_index(r, c, b)
            cands = full - row_used[r] - col_used[c] - box_used[k]
            degree = (row_empty[r] - 1) + (col_empty[c] - 1) + (box_empty[k] - 1)
            cells.append(EmptyCellDescriptor(row=r, col=c, candidates=cands, degree=degree))

    return cells
