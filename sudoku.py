# sudoku.py
# Solve a 9x9 Sudoku by encoding it to CNF and handing it to a SAT engine.
#
#   grid --sudoku_cnf--> base clauses + unit clauses for the givens
#        --sudoku_pysat / sudoku_z3--> model
#        --sudoku_decode--> solved grid

import logging
from typing import Optional

import sudoku_pysat
import sudoku_z3
from sudoku_cnf import formula_clauses, given_clauses, sudoku_formula
from sudoku_decode import InconsistentModelError, decode_model
from sudoku_grid import Grid, GridParseError

__all__ = [
    "Grid",
    "GridParseError",
    "InconsistentModelError",
    "parse_and_solve",
    "solve_sudoku",
]

log = logging.getLogger(__name__)


def solve_sudoku(
    grid: Grid,
    *,
    solver: str = sudoku_pysat.DEFAULT_SOLVER,
    dedupe: bool = False,
) -> Optional[Grid]:
    """
    Solve ``grid``; returns the completed Grid, or None if there is no solution.

    - solver: a pysat solver name (see sudoku_pysat.PYSAT_SOLVERS) or 'z3'
    - dedupe: emit group clauses for unordered cell pairs only

    Raises InconsistentModelError if the engine's model does not decode to
    exactly one digit per cell.
    """
    units = given_clauses(grid)
    log.debug("Puzzle has %d givens", len(units))

    if solver == "z3":
        model = sudoku_z3.solve_clauses(formula_clauses(dedupe=dedupe), units)
    else:
        model = sudoku_pysat.solve_clauses(sudoku_formula(dedupe=dedupe), units, name=solver)

    if model is None:
        log.info("UNSAT (no solution)")
        return None
    return decode_model(model, grid)


def parse_and_solve(text: str, **kwargs) -> Optional[Grid]:
    """Grid.from_string followed by solve_sudoku."""
    return solve_sudoku(Grid.from_string(text), **kwargs)
