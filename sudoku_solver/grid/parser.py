# -*- coding: utf-8 -*-
"""
入力盤面を内部表現（list[list[int]]）に正規化・検証するモジュールです。

主な役割:
- pandas.DataFrame / 2次元リスト / numpy 配列を受け取り、整数の 2次元リストに変換
- 各セルの値を「0（空き）」「1..N の数字」に正規化
- 形（N x N, N は平方数）と値の範囲をチェック

探索を始める前にここで弾くことで、探索中に不正な盤面を扱うことはありません。
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any, List

import numpy as np
import pandas as pd

from ..types import Board
from .board import is_perfect_square


class BoardValidationError(ValueError):
    """盤面の形や値が不正な場合に送出される例外です。"""


def normalize_cell(x: Any, row: int, col: int, n: int) -> int:
    """
    個々のセルの値を整数に変換します。

    変換ルール
    ----------
    - None / 空文字: 0（空きマス）
    - 整数: そのまま
    - 整数値の float（例: 3.0）: int に変換
    - 数字だけの文字列（例: "3"）: int に変換
    - それ以外（NaN, bool, 小数, 数字以外の文字列など）: BoardValidationError

    変換後の値が 0..n の範囲外でも BoardValidationError です。
    """
    value = _to_int(x, row, col)
    if not 0 <= value <= n:
        raise BoardValidationError(
            f"Cell ({row}, {col}) has value {value}, expected 0..{n}"
        )
    return value


def _to_int(x: Any, row: int, col: int) -> int:
    if x is None:
        return 0

    # bool は int のサブクラスなので先に弾く
    if isinstance(x, (bool, np.bool_)):
        raise BoardValidationError(f"Cell ({row}, {col}) must be an integer, got {x!r}")

    if isinstance(x, Integral):
        return int(x)

    if isinstance(x, Real):
        f = float(x)
        if math.isnan(f):
            # 行ごとの長さが違う盤面を DataFrame にすると NaN で埋まる
            raise BoardValidationError(f"Cell ({row}, {col}) is missing")
        if not f.is_integer():
            raise BoardValidationError(f"Cell ({row}, {col}) must be an integer, got {x!r}")
        return int(f)

    if isinstance(x, str):
        s = x.strip()
        if not s:
            return 0
        if s.isdigit():
            try:
                return int(s)
            except ValueError:
                # "²" なども isdigit() は真になる
                pass

    raise BoardValidationError(f"Cell ({row}, {col}) must be an integer, got {x!r}")


def _to_rows(board: Any) -> List[List[Any]]:
    """入力を「行のリスト」に揃えます。形のチェックはまだしません。"""
    if isinstance(board, pd.DataFrame):
        return board.values.tolist()

    if isinstance(board, np.ndarray):
        if board.ndim != 2:
            raise BoardValidationError(f"Board must be 2-dimensional, got {board.ndim} dimension(s)")
        return board.tolist()

    if board is None or isinstance(board, (str, bytes, dict)):
        raise BoardValidationError("Board must be a list of rows")

    try:
        raw_rows = list(board)
    except TypeError:
        raise BoardValidationError("Board must be a list of rows") from None

    rows: List[List[Any]] = []
    for i, row in enumerate(raw_rows):
        if row is None or isinstance(row, (str, bytes, dict)):
            raise BoardValidationError(f"Row {i} must be a list of cells")
        try:
            rows.append(list(row))
        except TypeError:
            raise BoardValidationError(f"Row {i} must be a list of cells") from None
    return rows


def normalize_board(board: Any) -> Board:
    """
    入力盤面を検証し、新しい list[list[int]] として返します。

    呼び出し側の盤面オブジェクトは変更しません。
    返り値は呼び出し側と共有しない新しいリストなので、
    探索がそのまま書き換えて使えます。

    Parameters
    ----------
    board : pandas.DataFrame, numpy.ndarray, or sequence of sequences
        入力盤面。0 / None / "" が空きマス。

    Returns
    -------
    list[list[int]]
        正規化済みの N x N 盤面。

    Raises
    ------
    BoardValidationError
        形が N x N でない、N が平方数でない、値が [0, N] の範囲外、など。
    """
    rows = _to_rows(board)

    n = len(rows)
    if n == 0:
        raise BoardValidationError("Board must not be empty")

    for i, row in enumerate(rows):
        if len(row) != n:
            raise BoardValidationError(
                f"Board must be N x N: row {i} has {len(row)} cells, expected {n}"
            )

    if not is_perfect_square(n):
        raise BoardValidationError(
            f"Board size must be a perfect square (4, 9, 16, ...), got {n}"
        )

    cells = [
        [normalize_cell(x, i, j, n) for j, x in enumerate(row)]
        for i, row in enumerate(rows)
    ]

    return cells
