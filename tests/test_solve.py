# tests/test_solve.py
import numpy as np
import pandas as pd
import pytest

from sudoku_solver import BoardValidationError, Mode, SolveFailure, SolveSuccess, solve
from sudoku_solver.eval.verify import givens_preserved, is_valid_solution
from sudoku_solver.grid.loader import load_board_csv


@pytest.mark.parametrize("mode", ["naive", "mrv", "degree"])
def test_classic_board_solves_in_every_mode(classic, classic_solution, mode):
    result = solve(classic, mode)
    assert isinstance(result, SolveSuccess)
    assert result.board == classic_solution
    assert result.to_dict() == {
        "status": "success",
        "message": "Sudoku Solved !",
        "data": classic_solution,
    }


def test_solve_does_not_mutate_input(classic):
    before = [row[:] for row in classic]
    result = solve(classic, Mode.MRV)
    assert classic == before
    # the returned board is a snapshot owned by the caller
    result.board[0][0] = 0
    assert solve(classic, Mode.MRV).board[0][0] == 5


def test_complete_board_returns_immediately(classic_solution):
    result = solve(classic_solution, "naive")
    assert result.ok
    assert result.board == classic_solution
    assert result.stats.nodes_visited == 1
    assert result.stats.backtracks == 0


@pytest.mark.parametrize("mode", list(Mode))
def test_single_cell_without_legal_value_fails(single_dead_cell, mode):
    result = solve(single_dead_cell, mode)
    assert isinstance(result, SolveFailure)
    assert result.to_dict() == {"status": "failed", "message": "No solution exists."}


@pytest.mark.parametrize("mode", list(Mode))
def test_conflicting_givens_fail_without_search(mode):
    board = [[1, 1, 1, 1]] * 4
    calls = []
    result = solve(board, mode, on_step=lambda *e: calls.append(e))
    assert isinstance(result, SolveFailure)
    assert result.to_dict() == {"status": "failed", "message": "No solution exists."}
    assert calls == []


@pytest.mark.parametrize("mode", list(Mode))
def test_full_board_with_duplicates_is_not_solved(classic_solution, mode):
    board = [row[:] for row in classic_solution]
    board[0][0] = board[0][1]
    assert not solve(board, mode).ok


@pytest.mark.parametrize("mode", list(Mode))
def test_four_by_four_board(small, mode):
    result = solve(small, mode)
    assert result.ok
    assert len(result.board) == 4
    assert is_valid_solution(result.board)
    assert givens_preserved(small, result.board)


def test_mode_invariance_of_solvability(small, small_dead, single_dead_cell):
    for board, expected in ((small, True), (small_dead, False), (single_dead_cell, False)):
        outcomes = {solve(board, mode).ok for mode in Mode}
        assert outcomes == {expected}


def test_determinism(classic):
    first = solve(classic, "mrv").to_dict()
    second = solve(classic, "mrv").to_dict()
    assert first == second


@pytest.mark.parametrize(
    "board",
    [
        [],
        [[1, 2, 3], [3, 1, 2], [2, 3, 1]],       # N = 3 is not a perfect square
        [[1, 0, 0, 0], [0, 0, 0]],                 # ragged / not N x N
        [[0, 0], [0, 0]],                          # N = 2
        [[5, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],  # value > N
        [[-1, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],  # negative
        [["x", 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],  # not a number
        [[1.5, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[True, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[10 ** 30, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],  # huge integer
        [["²", 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],      # isdigit() but not int()
        "not a board",
    ],
)
def test_malformed_board_is_rejected(board):
    calls = []
    with pytest.raises(BoardValidationError):
        solve(board, "naive", on_step=lambda *e: calls.append(e))
    assert calls == []


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        solve([[1, 2, 3]], "naive")


def test_unknown_mode_is_rejected(small):
    with pytest.raises(ValueError):
        solve(small, "random")
    assert Mode.parse(" MRV ") is Mode.MRV
    assert Mode.parse(Mode.DEGREE) is Mode.DEGREE


def test_accepts_dataframe_ndarray_and_strings(small):
    expected = solve(small, "naive").board

    assert solve(pd.DataFrame(small), "naive").board == expected
    assert solve(np.array(small), "naive").board == expected

    as_text = [["" if v == 0 else str(v) for v in row] for row in small]
    assert solve(as_text, "naive").board == expected

    with_none = [[None if v == 0 else v for v in row] for row in small]
    assert solve(with_none, "naive").board == expected


def test_ragged_dataframe_is_rejected():
    df = pd.DataFrame([[1, 0, 0, 0], [0, 0, 3], [0, 4, 0, 0], [0, 0, 0, 2]])
    with pytest.raises(BoardValidationError, match="missing"):
        solve(df, "naive")


def test_on_result_hook_called_once(small, small_dead):
    seen = []
    ok = solve(small, "mrv", on_result=seen.append)
    failed = solve(small_dead, "mrv", on_result=seen.append)
    assert seen == [ok, failed]


def test_search_budget_reports_failure(classic):
    result = solve(classic, "naive", max_nodes=3)
    assert not result.ok
    assert result.message == "Search budget exhausted."
    assert result.stats.nodes_visited == 4


def test_stats_in_dict(small):
    out = solve(small, "degree").to_dict(include_stats=True)
    assert out["status"] == "success"
    assert set(out["stats"]) == {"nodes_visited", "backtracks", "max_depth", "elapsed_sec"}


def test_load_board_csv(tmp_path, small):
    path = tmp_path / "board.csv"
    path.write_text("1,0,,0\n0,0,3,0\n0,4,0,0\n0,0,0,2\n", encoding="utf-8")
    df = load_board_csv(path)
    assert df.shape == (4, 4)
    result = solve(df, "mrv")
    assert result.ok
    assert result.board == solve(small, "mrv").board


def test_load_board_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_board_csv(tmp_path / "nope.csv")
