import logging

import pytest

import sudoku_pysat
import sudoku_z3
from sudoku import Grid, GridParseError, parse_and_solve, solve_sudoku
from sudoku_cnf import formula_clauses, given_clauses

EXAMPLE = "8          36      7  9 2   5   7       457     1   3   1    68  85   1  9    4  "

BACKENDS = ["g3", "m22", "z3"]


def assert_solves(puzzle, solved):
    assert solved is not None
    assert solved.is_solved()
    for r, c, d in puzzle.givens():
        assert solved.get(r, c) == d


def test_example_is_81_chars():
    assert len(EXAMPLE) == 81


@pytest.mark.parametrize("solver", BACKENDS)
def test_solve_example(solver):
    puzzle = Grid.from_string(EXAMPLE)
    assert_solves(puzzle, solve_sudoku(puzzle, solver=solver))


@pytest.mark.parametrize("dedupe", [False, True])
def test_solve_example_dedupe(dedupe):
    puzzle = Grid.from_string(EXAMPLE)
    assert_solves(puzzle, solve_sudoku(puzzle, dedupe=dedupe))


def test_solve_empty_grid():
    solved = solve_sudoku(Grid.empty())
    assert solved is not None and solved.is_solved()


def test_solve_rows_puzzle():
    puzzle = Grid.from_rows([
        [5, 3, 0, 0, 7, 0, 0, 0, 0],
        [6, 0, 0, 1, 9, 5, 0, 0, 0],
        [0, 9, 8, 0, 0, 0, 0, 6, 0],
        [8, 0, 0, 0, 6, 0, 0, 0, 3],
        [4, 0, 0, 8, 0, 3, 0, 0, 1],
        [7, 0, 0, 0, 2, 0, 0, 0, 6],
        [0, 6, 0, 0, 0, 0, 2, 8, 0],
        [0, 0, 0, 4, 1, 9, 0, 0, 5],
        [0, 0, 0, 0, 8, 0, 0, 7, 9],
    ])
    solved = solve_sudoku(puzzle)
    assert_solves(puzzle, solved)
    # this puzzle has a unique solution
    assert solved.to_rows()[0] == [5, 3, 4, 6, 7, 8, 9, 1, 2]


@pytest.mark.parametrize("solver", BACKENDS)
def test_duplicate_givens_in_row_unsat(solver, caplog):
    puzzle = Grid.from_string("55" + " " * 79)
    with caplog.at_level(logging.INFO, logger="sudoku"):
        assert solve_sudoku(puzzle, solver=solver) is None
    assert "UNSAT" in caplog.text


def test_unsat_without_direct_conflict():
    # (0,8) sees 1..8 in its row and 9 in its column
    puzzle = Grid.from_string("12345678 " + " " * 8 + "9" + " " * 63)
    assert solve_sudoku(puzzle) is None


def test_solved_display_round_trip():
    solved = parse_and_solve(EXAMPLE)
    digits = "".join(ch for ch in str(solved) if ch.isdigit())
    assert Grid.from_string(digits) == solved


def test_parse_and_solve_propagates_parse_errors():
    with pytest.raises(GridParseError):
        parse_and_solve(EXAMPLE[:-1])


def test_unknown_solver_name():
    with pytest.raises(ValueError, match="Unknown pysat solver"):
        solve_sudoku(Grid.empty(), solver="nope")


@pytest.mark.parametrize("solve_clauses", [sudoku_pysat.solve_clauses, sudoku_z3.solve_clauses])
def test_adapter_returns_full_model(solve_clauses):
    puzzle = Grid.from_string(EXAMPLE)
    model = solve_clauses(formula_clauses(), given_clauses(puzzle))
    assert model is not None
    assert [abs(l) for l in model] == list(range(1, 730))
    assert sum(1 for l in model if l > 0) == 81
