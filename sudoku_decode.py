# sudoku_decode.py
# Satisfying assignment -> completed Grid.

from typing import Iterable, List, Optional

from sudoku_grid import NUM_CELLS, Cell, Grid
from sudoku_vars import NUM_VARS, SIZE, decode, from_literal


class InconsistentModelError(RuntimeError):
    """
    The model contradicts the encoding: a cell got two digits, or none.

    This is a bug in the formula or the engine, never a property of the
    puzzle, so it is not meant to be caught.
    """


def decode_model(model: Iterable[int], puzzle: Optional[Grid] = None) -> Grid:
    """
    Turn a model (signed DIMACS literals) into a Grid.

    Every positive literal over the Sudoku variables sets one cell, and every
    cell must be set by the model itself. When ``puzzle`` is given, a model
    that disagrees with one of its givens is rejected as well.
    """
    cells: List[Cell] = [None] * NUM_CELLS
    for l in model:
        var_id, positive = from_literal(l)
        if not positive or var_id >= NUM_VARS:
            continue
        r, c, d = decode(var_id)
        prev = cells[r * SIZE + c]
        if prev is not None and prev != d:
            raise InconsistentModelError(
                f"Cell ({r},{c}) assigned both {prev + 1} and {d + 1}"
            )
        cells[r * SIZE + c] = d

    missing = [i for i, d in enumerate(cells) if d is None]
    if missing:
        r, c = divmod(missing[0], SIZE)
        raise InconsistentModelError(
            f"Model leaves {len(missing)} cell(s) empty, first at ({r},{c})"
        )

    if puzzle is not None:
        for r, c, d in puzzle.givens():
            got = cells[r * SIZE + c]
            if got != d:
                raise InconsistentModelError(
                    f"Cell ({r},{c}) given {d + 1} but model assigns {got + 1}"
                )
    return Grid(cells)
