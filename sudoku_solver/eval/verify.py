# sudoku_solver/eval/verify.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Any, Dict, List

import numpy as np

from ..grid.board import box_size, is_perfect_square
from ..types import Board


def _duplicates(values: np.ndarray) -> List[int]:
    """0 を除いて2回以上出てくる値。"""
    vals = values[values != 0]
    uniq, counts = np.unique(vals, return_counts=True)
    return [int(v) for v in uniq[counts > 1]]


def find_conflicts(board: Board) -> List[Dict[str, Any]]:
    """
    行・列・ボックスの中で重複している値を列挙する。

    Returns
    -------
    list of {"unit": "row"|"col"|"box", "index": int, "digits": [int, ...]}
    """
    grid = np.asarray(board, dtype=np.int64)
    n = grid.shape[0]
    b = box_size(n)

    issues: List[Dict[str, Any]] = []
    for i in range(n):
        dups = _duplicates(grid[i, :])
        if dups:
            issues.append({"unit": "row", "index": i, "digits": dups})
    for j in range(n):
        dups = _duplicates(grid[:, j])
        if dups:
            issues.append({"unit": "col", "index": j, "digits": dups})
    for k in range(n):
        r0, c0 = (k // b) * b, (k % b) * b
        dups = _duplicates(grid[r0:r0 + b, c0:c0 + b].ravel())
        if dups:
            issues.append({"unit": "box", "index": k, "digits": dups})
    return issues


def is_valid_solution(board: Board) -> bool:
    """すべてのマスが埋まっていて、各行・列・ボックスに 1..N がちょうど1回ずつ入っているか。"""
    grid = np.asarray(board, dtype=np.int64)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        return False
    n = grid.shape[0]
    if not is_perfect_square(n):
        return False
    if np.any(grid < 1) or np.any(grid > n):
        return False
    return not find_conflicts(board)


def givens_preserved(original: Board, solved: Board) -> bool:
    """元の盤面で埋まっていたマスが、解でも同じ値のままか。"""
    a = np.asarray(original, dtype=np.int64)
    s = np.asarray(solved, dtype=np.int64)
    if a.shape != s.shape:
        return False
    given = a != 0
    return bool(np.array_equal(a[given], s[given]))
