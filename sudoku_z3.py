# sudoku_z3.py
# SAT engine adapter backed by Z3, over the same CNF as the pysat adapter.

import logging
from typing import Iterable, List, Optional, Sequence

from z3 import Bool, BoolRef, Not, Or, Solver, is_true, sat

from sudoku_vars import NUM_VARS

log = logging.getLogger(__name__)


def _z3_clause(X: List[BoolRef], clause: Sequence[int]) -> BoolRef:
    lits = [X[abs(l) - 1] if l > 0 else Not(X[abs(l) - 1]) for l in clause]
    return lits[0] if len(lits) == 1 else Or(lits)


def solve_clauses(
    formula: Iterable[Sequence[int]],
    units: Iterable[Sequence[int]] = (),
    *,
    num_vars: int = NUM_VARS,
) -> Optional[List[int]]:
    """
    Same contract as sudoku_pysat.solve_clauses: signed literals for
    variables 1..num_vars, or None if unsatisfiable.
    """
    X = [Bool(f"x_{i}") for i in range(1, num_vars + 1)]
    s = Solver()
    n = 0
    for clause in formula:
        s.add(_z3_clause(X, clause))
        n += 1
    log.debug("Solving with Z3: %d base clauses", n)
    for unit in units:
        s.add(_z3_clause(X, unit))

    if s.check() != sat:
        return None
    m = s.model()
    return [i if is_true(m.eval(x, model_completion=True)) else -i
            for i, x in enumerate(X, start=1)]
