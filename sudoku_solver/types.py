# -*- coding: utf-8 -*-
"""
数独 solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set, Tuple, Union

# 盤面: N x N の整数リスト。0 は空きマスを表します。
Board = List[List[int]]

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]


class Mode(enum.Enum):
    """
    次に分岐するマスの選び方（Cell Selector の戦略）です。

    - NAIVE  : 行優先で最初に見つかった空きマス
    - MRV    : 候補数が最も少ないマス（Minimum Remaining Values）
    - DEGREE : 同じ行・列・ボックスにある空きマスが最も多いマス
    """

    NAIVE = "naive"
    MRV = "mrv"
    DEGREE = "degree"

    @classmethod
    def parse(cls, value: Union["Mode", str]) -> "Mode":
        """文字列（大文字小文字は区別しない）または Mode から Mode を得ます。"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for mode in cls:
                if mode.value == key:
                    return mode
        allowed = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown mode: {value!r} (expected one of: {allowed})")


@dataclass
class EmptyCellDescriptor:
    """
    探索1フレーム分の「空きマス」の情報です。

    Attributes
    ----------
    row, col : int
        マスの座標（0 始まり）。
    candidates : set[int]
        このマスに置ける値の集合。
    degree : int
        同じ行・列・ボックスにある（自分以外の）空きマスの数の合計。
        Degree 戦略の並べ替えにだけ使います。
    """

    row: int
    col: int
    candidates: Set[int]
    degree: int = 0

    @property
    def coord(self) -> CellCoord:
        return (self.row, self.col)


@dataclass
class SearchStats:
    """探索の統計情報です。"""

    nodes_visited: int = 0
    backtracks: int = 0
    max_depth: int = 0
    elapsed_sec: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes_visited": self.nodes_visited,
            "backtracks": self.backtracks,
            "max_depth": self.max_depth,
            "elapsed_sec": round(self.elapsed_sec, 6),
        }


@dataclass
class SolveSuccess:
    """
    解けた場合の結果です。

    board は探索で使った盤面のコピー（スナップショット）なので、
    呼び出し側が書き換えても solver 側には影響しません。
    """

    board: Board
    message: str
    stats: SearchStats = field(default_factory=SearchStats)

    ok = True
    status = "success"

    def to_dict(self, include_stats: bool = False) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "status": self.status,
            "message": self.message,
            "data": [row[:] for row in self.board],
        }
        if include_stats:
            out["stats"] = self.stats.to_dict()
        return out


@dataclass
class SolveFailure:
    """解が存在しなかった（または探索を打ち切った）場合の結果です。"""

    message: str
    stats: SearchStats = field(default_factory=SearchStats)

    ok = False
    status = "failed"

    def to_dict(self, include_stats: bool = False) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "status": self.status,
            "message": self.message,
        }
        if include_stats:
            out["stats"] = self.stats.to_dict()
        return out


SolveResult = Union[SolveSuccess, SolveFailure]
