# -*- coding: utf-8 -*-
"""
sudoku_solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 既定の探索モード
- 探索ノード数・時間の上限
- 進捗ログの頻度
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import Optional

# ==== 探索モード ===========================================================

# モード未指定時に使う探索モード: "naive", "mrv", "degree"
DEFAULT_MODE: str = "naive"

# ==== 結果メッセージ =======================================================

# 既存のフロントエンドがこの文言をそのまま表示するので変更しないこと
SUCCESS_MESSAGE: str = "Sudoku Solved !"
FAILURE_MESSAGE: str = "No solution exists."

# 探索上限に達して打ち切った場合のメッセージ
BUDGET_EXHAUSTED_MESSAGE: str = "Search budget exhausted."

# ==== 探索関連 =============================================================

# 探索ノード数の上限。None なら無制限（解けるまで/解なしと分かるまで探索）。
MAX_SEARCH_NODES: Optional[int] = None

# 探索時間の上限（秒）。None なら無制限。
SEARCH_TIME_LIMIT_SEC: Optional[float] = None

# 何ノードごとに進捗ログを出すか
LOG_PROGRESS_EVERY: int = 10000

# 再帰の深さは最大で N*N。16x16 以上の盤面のために
# 再帰上限を N*N + この値 まで引き上げます。
RECURSION_HEADROOM: int = 200

# ==== ログ関連 =============================================================

# True にすると、1手ごとの配置/取り消しを logs/search_debug.log に書き出します。
# 非常に大きなファイルになるので、デバッグ時のみ有効にしてください。
SEARCH_DEBUG_LOG_ENABLED: bool = False

# デバッグログの出力先ディレクトリ
LOG_DIR: str = "logs"
