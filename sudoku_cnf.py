# sudoku_cnf.py
# Sudoku rules as CNF over the variables of sudoku_vars.
#
# The base formula does not depend on the puzzle; the givens are added as
# unit clauses on top of it.

import logging
from functools import lru_cache
from itertools import combinations, permutations
from typing import List, Sequence, Tuple

from pysat.formula import CNF

from sudoku_grid import Grid
from sudoku_vars import NUM_VARS, SIZE, block_of, lit

log = logging.getLogger(__name__)

Clause = Tuple[int, ...]


# ---------- groups ----------
def _groups() -> List[List[Tuple[int, int]]]:
    """The 27 groups of 9 cells that hold each digit at most once."""
    rows = [[(r, c) for c in range(SIZE)] for r in range(SIZE)]
    cols = [[(r, c) for r in range(SIZE)] for c in range(SIZE)]
    blocks: List[List[Tuple[int, int]]] = [[] for _ in range(SIZE)]
    for r in range(SIZE):
        for c in range(SIZE):
            blocks[block_of(r, c)].append((r, c))
    return rows + cols + blocks


def _cell_clauses(row: int, col: int) -> List[Clause]:
    clauses: List[Clause] = []
    # At most one digit in the cell
    for a, b in combinations(range(SIZE), 2):
        clauses.append((lit(row, col, a, False), lit(row, col, b, False)))
    # At least one digit in the cell
    clauses.append(tuple(lit(row, col, d) for d in range(SIZE)))
    return clauses


def _group_clauses(cells: Sequence[Tuple[int, int]], dedupe: bool) -> List[Clause]:
    """Each digit at most once among ``cells``."""
    pairs = list(combinations(cells, 2) if dedupe else permutations(cells, 2))
    clauses: List[Clause] = []
    for d in range(SIZE):
        for (r1, c1), (r2, c2) in pairs:
            clauses.append((lit(r1, c1, d, False), lit(r2, c2, d, False)))
    return clauses


# ---------- base formula ----------
def formula_clauses(*, dedupe: bool = False) -> Tuple[Clause, ...]:
    """
    Puzzle-independent Sudoku formula, built once per ``dedupe`` setting.

    - dedupe=False: group pairs in both orders, (p,q) and (q,p)
    - dedupe=True:  unordered pairs only; half the group clauses, same models

    Per-group "digit appears somewhere" clauses are not needed: 9 cells, each
    with exactly one digit and no digit repeated, already cover all 9 digits.
    """
    return _build_clauses(bool(dedupe))


@lru_cache(maxsize=2)
def _build_clauses(dedupe: bool) -> Tuple[Clause, ...]:
    clauses: List[Clause] = []
    for r in range(SIZE):
        for c in range(SIZE):
            clauses.extend(_cell_clauses(r, c))
    for cells in _groups():
        clauses.extend(_group_clauses(cells, dedupe))
    log.debug("Built Sudoku formula: %d clauses (dedupe=%s)", len(clauses), dedupe)
    return tuple(clauses)


def sudoku_formula(*, dedupe: bool = False) -> CNF:
    """Fresh pysat CNF holding the base formula."""
    cnf = CNF()
    cnf.extend([list(cl) for cl in formula_clauses(dedupe=dedupe)])
    return cnf


def expected_clause_count(*, dedupe: bool = False) -> int:
    cells = SIZE * SIZE
    pairs = SIZE * (SIZE - 1) // 2
    group_pairs = pairs if dedupe else 2 * pairs
    return cells * pairs + cells + 3 * SIZE * SIZE * group_pairs


# ---------- givens ----------
def given_clauses(grid: Grid) -> List[List[int]]:
    """One unit clause per filled cell."""
    return [[lit(r, c, d)] for r, c, d in grid.givens()]


def to_dimacs(grid: Grid, *, dedupe: bool = False) -> str:
    """Base formula plus givens as DIMACS CNF text."""
    clauses = [list(cl) for cl in formula_clauses(dedupe=dedupe)] + given_clauses(grid)
    lines = [f"p cnf {NUM_VARS} {len(clauses)}"]
    for clause in clauses:
        lines.append(" ".join(map(str, clause)) + " 0")
    return "\n".join(lines) + "\n"
