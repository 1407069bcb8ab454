# -*- coding: utf-8 -*-
"""
数独のルール（行・列・ボックスで同じ数字を使わない）を判定するモジュールです。

is_safe() がこの solver における唯一の「ルールの定義」です。
候補計算（domains.py）もこれと同じ結果になるように作られています。
"""

from __future__ import annotations

from ..grid.board import box_origin, box_size
from ..types import Board


def is_used_in_row(board: Board, row: int, value: int) -> bool:
    return value in board[row]


def is_used_in_column(board: Board, col: int, value: int) -> bool:
    return any(r[col] == value for r in board)


def is_used_in_box(board: Board, start_row: int, start_col: int, value: int) -> bool:
    """(start_row, start_col) を左上とするボックスに value があるかどうか。"""
    b = box_size(len(board))
    for r in range(start_row, start_row + b):
        for c in range(start_col, start_col + b):
            if board[r][c] == value:
                return True
    return False


def is_safe(board: Board, row: int, col: int, value: int) -> bool:
    """
    (row, col) に value を置いても行・列・ボックスの制約に違反しないかどうか。

    盤面は変更しません。
    (row, col) 自身に値が入っている場合、その値も「使用済み」として扱います。
    """
    b = box_size(len(board))
    r0, c0 = box_origin(row, col, b)
    return (
        not is_used_in_row(board, row, value)
        and not is_used_in_column(board, col, value)
        and not is_used_in_box(board, r0, c0, value)
    )
