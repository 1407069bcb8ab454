# sudoku_solver/__init__.py
# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

api_proto/local_api.py などから:

    from sudoku_solver import solve

と呼び出されることを想定しています。

ここでは、盤面（2次元リスト / pandas.DataFrame）と探索モードを受け取り、
1. 盤面の正規化と検証
2. バックトラック探索（naive / mrv / degree）
3. 結果オブジェクトの構築
4. 解の最終チェック
を順番に呼び出します。
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from .config import (
    BUDGET_EXHAUSTED_MESSAGE, DEFAULT_MODE, FAILURE_MESSAGE, MAX_SEARCH_NODES, SEARCH_TIME_LIMIT_SEC,
)
from .logging_utils import get_logger
from .grid.parser import BoardValidationError, normalize_board
from .csp.search import SearchBudgetExceeded, StepHook, run_search
from .postprocess.render_result import build_result, format_board
from .eval.verify import find_conflicts
from .types import Board, Mode, SearchStats, SolveFailure, SolveResult, SolveSuccess

__all__ = [
    "solve",
    "Mode",
    "SolveResult",
    "SolveSuccess",
    "SolveFailure",
    "BoardValidationError",
]

logger = get_logger()

ResultHook = Callable[[SolveResult], None]


def solve(
    board: Any,
    mode: Union[Mode, str] = DEFAULT_MODE,
    *,
    max_nodes: Optional[int] = MAX_SEARCH_NODES,
    time_limit_sec: Optional[float] = SEARCH_TIME_LIMIT_SEC,
    on_result: Optional[ResultHook] = None,
    on_step: Optional[StepHook] = None,
) -> SolveResult:
    """
    数独を解くメイン関数。

    Parameters
    ----------
    board : list of lists, numpy.ndarray or pandas.DataFrame
        N x N の盤面（N は平方数）。0 / None / "" が空きマス。
        この関数は board を書き換えません。
    mode : Mode or str
        "naive" / "mrv" / "degree"。
    max_nodes, time_limit_sec : optional
        探索の打ち切り条件。None なら無制限。
    on_result : callable, optional
        最終結果を受け取るコールバック（1回だけ呼ばれる）。
    on_step : callable, optional
        探索の1手ごとに (event, row, col, value) で呼ばれるコールバック。

    Returns
    -------
    SolveSuccess or SolveFailure

    Raises
    ------
    BoardValidationError
        盤面の形・値が不正な場合（探索は行わない）。
    ValueError
        mode が不正な場合。
    """
    search_mode = Mode.parse(mode)
    work = normalize_board(board)
    n = len(work)

    logger.info("=== solve() START === size=%dx%d mode=%s", n, n, search_mode.value)

    # ヒント同士がすでに矛盾していれば、どう埋めても解にはならない
    conflicts = find_conflicts(work)
    for issue in conflicts:
        logger.warning(
            "[WARNING] Duplicate digits %s in %s %d",
            issue["digits"], issue["unit"], issue["index"],
        )

    if conflicts:
        result: SolveResult = SolveFailure(message=FAILURE_MESSAGE)
    else:
        result = _search(work, search_mode, max_nodes, time_limit_sec, on_step)

    if result.ok:
        logger.info("Solved board:\n%s", format_board(result.board))
    else:
        logger.info(result.message)

    if on_result is not None:
        on_result(result)

    logger.info("=== solve() END === status=%s", result.status)
    return result


def _search(
    work: Board,
    search_mode: Mode,
    max_nodes: Optional[int],
    time_limit_sec: Optional[float],
    on_step: Optional[StepHook],
) -> SolveResult:
    try:
        solved, stats = run_search(
            work,
            search_mode,
            max_nodes=max_nodes,
            time_limit_sec=time_limit_sec,
            on_step=on_step,
        )
    except SearchBudgetExceeded as e:
        return SolveFailure(
            message=BUDGET_EXHAUSTED_MESSAGE,
            stats=e.stats or SearchStats(),
        )
    return build_result(solved, work, stats)
