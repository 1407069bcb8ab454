# -*- coding: utf-8 -*-
"""
探索結果をもとに呼び出し側へ返す結果オブジェクトを構築するモジュールです。
"""

from __future__ import annotations

from typing import Optional

from ..config import FAILURE_MESSAGE, SUCCESS_MESSAGE
from ..grid.board import clone_board
from ..types import Board, SearchStats, SolveFailure, SolveResult, SolveSuccess


def format_board(board: Board) -> str:
    """
    盤面をログ表示用の文字列にします。

    例（4x4）:
        1 2 3 4
        3 4 1 2
        ...
    """
    return "\n".join(" ".join(str(v) for v in row) for row in board)


def build_result(
    solved: bool,
    board: Board,
    stats: Optional[SearchStats] = None,
) -> SolveResult:
    """
    探索の成否から SolveSuccess / SolveFailure を作ります。

    成功時は盤面のコピーを持たせるので、呼び出し側が
    探索途中の盤面を目にすることはありません。
    失敗時は盤面を返しません（部分的な解という概念はありません）。
    """
    stats = stats or SearchStats()

    if solved:
        return SolveSuccess(board=clone_board(board), message=SUCCESS_MESSAGE, stats=stats)

    return SolveFailure(message=FAILURE_MESSAGE, stats=stats)
