# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_solver" and "api_proto" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


CLASSIC = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# 4x4 (box 2x2), partially filled, solvable
SMALL = [
    [1, 0, 0, 0],
    [0, 0, 3, 0],
    [0, 4, 0, 0],
    [0, 0, 0, 2],
]

# 4x4 with no pairwise conflicts among the givens, but (0, 2) has no legal value
SMALL_DEAD = [
    [1, 2, 0, 0],
    [0, 0, 3, 0],
    [0, 0, 4, 0],
    [0, 0, 0, 0],
]


def _copy(board):
    return [row[:] for row in board]


@pytest.fixture
def classic():
    return _copy(CLASSIC)


@pytest.fixture
def classic_solution():
    return _copy(CLASSIC_SOLUTION)


@pytest.fixture
def small():
    return _copy(SMALL)


@pytest.fixture
def small_dead():
    return _copy(SMALL_DEAD)


@pytest.fixture
def single_dead_cell():
    """Only (0, 0) is empty and every digit already appears among its peers."""
    board = _copy(CLASSIC_SOLUTION)
    board[0][0] = 0
    board[8][0] = 5
    return board
