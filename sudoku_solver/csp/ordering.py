# -*- coding: utf-8 -*-
"""
次に分岐する空きマスの順番を決める（Cell Selector）モジュールです。

3つの戦略はどれも collect_empty_cells() の結果（行優先の走査順）を
並べ替えるだけで、対象となる空きマスの集合は変わりません。

- naive  : 並べ替えなし（最初に見つかった空きマス）
- mrv    : 候補数の少ない順（同数なら走査順）
- degree : degree の大きい順（同数なら走査順）

Python の sort は安定ソートなので、同点の場合は走査順が保たれます。
"""

from __future__ import annotations

from typing import Callable, Dict, List

from ..types import Board, EmptyCellDescriptor, Mode
from .domains import collect_empty_cells

CellOrdering = Callable[[List[EmptyCellDescriptor]], List[EmptyCellDescriptor]]


def order_naive(cells: List[EmptyCellDescriptor]) -> List[EmptyCellDescriptor]:
    return list(cells)


def order_mrv(cells: List[EmptyCellDescriptor]) -> List[EmptyCellDescriptor]:
    """MRV（Minimum Remaining Values）: 一番制約のきついマスから決める。"""
    return sorted(cells, key=lambda d: len(d.candidates))


def order_degree(cells: List[EmptyCellDescriptor]) -> List[EmptyCellDescriptor]:
    """
    Degree: 空きマスの隣人（同じ行・列・ボックス）が多いマスから決める。

    CSP の教科書では MRV の同点決着に使われることが多いですが、
    ここでは第1キーとして降順に並べます。
    """
    return sorted(cells, key=lambda d: d.degree, reverse=True)


CELL_SELECTORS: Dict[Mode, CellOrdering] = {
    Mode.NAIVE: order_naive,
    Mode.MRV: order_mrv,
    Mode.DEGREE: order_degree,
}


def select_cells(board: Board, mode: Mode) -> List[EmptyCellDescriptor]:
    """
    盤面を走査し、mode に従って並べた空きマスのリストを返します。

    先頭が次に分岐するマスです。空リストなら盤面はすべて埋まっています。
    """
    return CELL_SELECTORS[mode](collect_empty_cells(board))
