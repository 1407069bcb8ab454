# -*- coding: utf-8 -*-
"""
再帰的なバックトラック探索を行うモジュールです。

ざっくり流れ（1回の呼び出し = 1フレーム）
------------------------------------------
1. Cell Selector（mode に応じた戦略）で空きマスを並べる
2. 空きマスがなければ解けている → True
3. 先頭のマスについて、候補値を小さい順に試す
   - 値を置いて再帰
   - 再帰が True ならそのまま True を返す（盤面は解のまま）
   - False なら 0 に戻して次の値へ
4. すべての値がダメなら False（1つ上のフレームがバックトラックする）

False を返すときは、盤面は必ずそのフレームに入ったときと同じ状態に戻っています。
"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from ..config import LOG_PROGRESS_EVERY, RECURSION_HEADROOM, SEARCH_DEBUG_LOG_ENABLED
from ..logging_utils import get_logger, get_search_debug_logger
from ..types import Board, Mode, SearchStats
from .ordering import select_cells

logger = get_logger()

# on_step(event, row, col, value): event は "place" か "undo"
StepHook = Callable[[str, int, int, int], None]


class SearchBudgetExceeded(Exception):
    """探索ノード数・時間の上限に達したときに探索内部で送出される例外です。"""

    stats: Optional[SearchStats] = None


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。

    mode は探索の最初から最後まで変わりません。
    """

    mode: Mode
    max_nodes: Optional[int] = None
    deadline: Optional[float] = None  # time.monotonic() 基準
    on_step: Optional[StepHook] = None

    stats: SearchStats = field(default_factory=SearchStats)

    def enter_node(self, depth: int) -> None:
        stats = self.stats
        stats.nodes_visited += 1
        if depth > stats.max_depth:
            stats.max_depth = depth

        if stats.nodes_visited % LOG_PROGRESS_EVERY == 0:
            logger.info(
                "[search] mode=%s nodes_visited=%d backtracks=%d depth=%d",
                self.mode.value,
                stats.nodes_visited,
                stats.backtracks,
                depth,
            )

        if self.max_nodes is not None and stats.nodes_visited > self.max_nodes:
            raise SearchBudgetExceeded(f"node limit {self.max_nodes} reached")
        if self.deadline is not None and time.monotonic() > self.deadline:
            raise SearchBudgetExceeded("time limit reached")

    def step(self, event: str, row: int, col: int, value: int) -> None:
        if self.on_step is not None:
            self.on_step(event, row, col, value)


def backtrack_search(board: Board, ctx: SearchContext, depth: int = 0) -> bool:
    """
    board をその場で書き換えながら解を探します。

    Returns
    -------
    bool
        True なら board は解になっている。
        False なら board は呼び出し前と同じ状態。
    """
    ctx.enter_node(depth)

    cells = select_cells(board, ctx.mode)
    if not cells:
        # すべて埋まった
        return True

    head = cells[0]
    row, col = head.row, head.col

    for value in sorted(head.candidates):
        solved = False
        board[row][col] = value
        try:
            ctx.step("place", row, col, value)
            solved = backtrack_search(board, ctx, depth + 1)
        finally:
            # 成功時以外（上限による中断も含む）は必ず元に戻す
            if not solved:
                board[row][col] = 0
                ctx.step("undo", row, col, value)
        if solved:
            return True
        ctx.stats.backtracks += 1

    return False


def _debug_step_hook(user_hook: Optional[StepHook]) -> StepHook:
    debug_logger = get_search_debug_logger()

    def hook(event: str, row: int, col: int, value: int) -> None:
        debug_logger.debug("%s r%dc%d=%d", event, row, col, value)
        if user_hook is not None:
            user_hook(event, row, col, value)

    return hook


def run_search(
    board: Board,
    mode: Mode,
    max_nodes: Optional[int] = None,
    time_limit_sec: Optional[float] = None,
    on_step: Optional[StepHook] = None,
) -> Tuple[bool, SearchStats]:
    """
    探索のエントリポイント。

    再帰上限の調整・時間計測・統計の収集を行い、backtrack_search() を呼び出します。
    上限に達した場合は SearchBudgetExceeded をそのまま送出します
    （その時点で board は呼び出し前の状態に戻っています）。

    注意: sys.setrecursionlimit() はプロセス全体の設定です。
    FastAPI のスレッドプールなどで複数の探索が同時に走ると、
    先に終わった探索が上限を元に戻してしまい、
    大きな盤面（N >= 36 程度）では RecursionError になり得ます。
    大きな盤面を並行して解く場合は、起動時に上限を上げておいてください。
    """
    deadline = None
    if time_limit_sec is not None:
        deadline = time.monotonic() + time_limit_sec

    if SEARCH_DEBUG_LOG_ENABLED:
        on_step = _debug_step_hook(on_step)

    ctx = SearchContext(mode=mode, max_nodes=max_nodes, deadline=deadline, on_step=on_step)

    n = len(board)
    old_limit = sys.getrecursionlimit()
    needed = n * n + RECURSION_HEADROOM
    if needed > old_limit:
        sys.setrecursionlimit(needed)

    start = time.perf_counter()
    try:
        solved = backtrack_search(board, ctx)
    except SearchBudgetExceeded as e:
        e.stats = ctx.stats
        logger.warning("[search] stopped: %s (nodes_visited=%d)", e, ctx.stats.nodes_visited)
        raise
    finally:
        ctx.stats.elapsed_sec = time.perf_counter() - start
        if needed > old_limit:
            sys.setrecursionlimit(old_limit)

    logger.info(
        "[search] done: mode=%s solved=%s nodes_visited=%d backtracks=%d max_depth=%d elapsed=%.3fs",
        mode.value,
        solved,
        ctx.stats.nodes_visited,
        ctx.stats.backtracks,
        ctx.stats.max_depth,
        ctx.stats.elapsed_sec,
    )
    return solved, ctx.stats
