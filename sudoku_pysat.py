# sudoku_pysat.py
# SAT engine adapter backed by PySAT.
# Requires: pip install python-sat

import logging
from typing import Iterable, List, Optional, Sequence, Union

from pysat.formula import CNF
from pysat.solvers import Solver

log = logging.getLogger(__name__)

# friendly name -> pysat solver; all of these ship with python-sat
PYSAT_SOLVERS = {
    "g3": "Glucose 3",
    "g4": "Glucose 4.1",
    "cd15": "CaDiCaL 1.5.3",
    "m22": "MiniSat 2.2",
    "mc": "MapleChrono",
    "lgl": "Lingeling",
}
DEFAULT_SOLVER = "g3"

Formula = Union[CNF, Iterable[Sequence[int]]]


def solve_clauses(
    formula: Formula,
    units: Iterable[Sequence[int]] = (),
    *,
    name: str = DEFAULT_SOLVER,
) -> Optional[List[int]]:
    """
    Solve ``formula`` plus ``units`` (the givens) with a fresh pysat solver.

    Returns the model as signed literals, or None if unsatisfiable.
    """
    if name not in PYSAT_SOLVERS:
        raise ValueError(f"Unknown pysat solver {name!r}; expected one of {sorted(PYSAT_SOLVERS)}")

    clauses = formula.clauses if isinstance(formula, CNF) else [list(cl) for cl in formula]
    log.debug("Solving with %s: %d base clauses", PYSAT_SOLVERS[name], len(clauses))

    with Solver(name=name, bootstrap_with=clauses) as s:
        for unit in units:
            s.add_clause(list(unit))
        if not s.solve():
            return None
        return s.get_model()
