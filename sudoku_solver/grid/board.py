# -*- coding: utf-8 -*-
"""
盤面の形（ボックスサイズなど）に関する小さなヘルパーをまとめたモジュールです。
"""

from __future__ import annotations

import math
from typing import Iterator

from ..types import Board, CellCoord


def is_perfect_square(n: int) -> bool:
    """n が 1 以上の平方数かどうか。"""
    if n < 1:
        return False
    b = math.isqrt(n)
    return b * b == n


def box_size(n: int) -> int:
    """
    盤面サイズ n からボックスの一辺 B = √n を返します。

    n が平方数でない場合は ValueError を送出します。
    （探索の途中ではなく、入口で弾く前提です）
    """
    if not is_perfect_square(n):
        raise ValueError(f"Board size must be a perfect square, got {n}")
    return math.isqrt(n)


def box_origin(row: int, col: int, b: int) -> CellCoord:
    """(row, col) を含むボックスの左上座標。"""
    return (row - row % b, col - col % b)


def box_index(row: int, col: int, b: int) -> int:
    """ボックスに行優先で 0,1,2,... と振った番号。"""
    return (row // b) * b + (col // b)


def iter_box(row: int, col: int, b: int) -> Iterator[CellCoord]:
    """(row, col) を含むボックス内の全座標を返します。"""
    r0, c0 = box_origin(row, col, b)
    for r in range(r0, r0 + b):
        for c in range(c0, c0 + b):
            yield r, c


def clone_board(board: Board) -> Board:
    return [row[:] for row in board]


def count_empty(board: Board) -> int:
    return sum(1 for row in board for v in row if v == 0)
