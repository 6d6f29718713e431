# sudoku_vars.py
# Variable naming for the Sudoku SAT encoding.
#
# Every proposition "cell (row, col) holds digit" gets one integer id:
#     id(r, c, d) = r * 81 + c * 9 + d        r, c, d in 0..8
# which is a bijection onto 0..728. SAT engines speak DIMACS, where 0 ends a
# clause, so at the engine boundary an id becomes the literal id + 1
# (negated for the negative polarity).

from typing import List, Tuple

SIZE = 9
BOX = 3
NUM_VARS = SIZE * SIZE * SIZE  # 729


# ----- core mapping: (row, col, digit) <-> id in [0..728]
def encode(row: int, col: int, digit: int) -> int:
    return row * (SIZE * SIZE) + col * SIZE + digit


def decode(var_id: int) -> Tuple[int, int, int]:
    row, rest = divmod(var_id, SIZE * SIZE)
    col, digit = divmod(rest, SIZE)
    return row, col, digit


# ----- DIMACS literals
def to_literal(var_id: int, positive: bool = True) -> int:
    """Signed 1-based literal for ``var_id``."""
    return var_id + 1 if positive else -(var_id + 1)


def from_literal(lit: int) -> Tuple[int, bool]:
    """Inverse of ``to_literal``: (var_id, polarity)."""
    return abs(lit) - 1, lit > 0


def lit(row: int, col: int, digit: int, positive: bool = True) -> int:
    return to_literal(encode(row, col, digit), positive)


# ----- blocks
def block_of(row: int, col: int) -> int:
    return (row // BOX) * BOX + col // BOX


def block_cells(block: int) -> List[Tuple[int, int]]:
    """Cells of 3x3 block ``block`` (0..8, row-major over blocks), row-major."""
    br, bc = divmod(block, BOX)
    return [(br * BOX + i, bc * BOX + j) for i in range(BOX) for j in range(BOX)]
