# -*- coding: utf-8 -*-
"""
盤面 CSV を読み込むモジュールです。

CSV の形式：
- ヘッダなし、1行 = 盤面の1行
- 空きマスは 0 または空欄

例（4x4）:
    1,0,0,0
    0,0,3,0
    0,4,0,0
    0,0,0,2
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd


def load_board_csv(path: str | Path) -> pd.DataFrame:
    """
    盤面 CSV を読み込み、DataFrame にして返します。

    値の検証は行いません（solve() に渡したときに parser.normalize_board() が行います）。
    空欄は "" のまま残るので、空きマスとして扱われます。

    Parameters
    ----------
    path : str or Path
        CSV ファイルのパス。

    Returns
    -------
    pandas.DataFrame
        盤面の DataFrame。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Board CSV not found: {p}")

    df = pd.read_csv(
        p,
        header=None,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        encoding="utf-8-sig",
    )

    return df.reset_index(drop=True)
