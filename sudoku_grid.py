# sudoku_grid.py
# The 9x9 board: 81 optional digits, row-major.
#
# Digits are stored zero-based (0..8) and shown as 1..9; None is an empty cell.

from typing import Iterator, List, Optional, Sequence, Tuple

from sudoku_vars import BOX, SIZE, block_cells

Cell = Optional[int]

NUM_CELLS = SIZE * SIZE
BLANK = " "
DIVIDER = "-" * 21


class GridParseError(ValueError):
    """Input text or rows do not describe a 9x9 grid."""


class Grid:
    __slots__ = ("cells",)

    def __init__(self, cells: Sequence[Cell]):
        cells = tuple(cells)
        if len(cells) != NUM_CELLS:
            raise GridParseError(f"Expected {NUM_CELLS} cells, got {len(cells)}")
        for i, d in enumerate(cells):
            if d is not None and not (0 <= d < SIZE):
                raise GridParseError(f"Cell {i} value {d} out of range 0..{SIZE - 1}")
        self.cells: Tuple[Cell, ...] = cells

    # ---------- constructors ----------
    @classmethod
    def empty(cls) -> "Grid":
        return cls([None] * NUM_CELLS)

    @classmethod
    def from_string(cls, s: str) -> "Grid":
        """
        Parse exactly 81 characters, row-major: '1'..'9' for a given,
        ' ' for an empty cell. Nothing else is accepted.
        """
        if len(s) != NUM_CELLS:
            raise GridParseError(f"Expected {NUM_CELLS} characters, got {len(s)}")
        cells: List[Cell] = []
        for i, ch in enumerate(s):
            if ch == BLANK:
                cells.append(None)
            elif "1" <= ch <= "9":
                cells.append(int(ch) - 1)
            else:
                raise GridParseError(
                    f"Invalid character {ch!r} at position {i} (row {i // SIZE}, col {i % SIZE})"
                )
        return cls(cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """9 rows of 9 ints, 0=blank, 1..9=clue."""
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise GridParseError(f"Expected {SIZE} rows of {SIZE} values")
        cells: List[Cell] = []
        for r, row in enumerate(rows):
            for c, v in enumerate(row):
                if not (0 <= v <= SIZE):
                    raise GridParseError(f"Cell ({r},{c}) value {v} out of range 0..{SIZE}")
                cells.append(v - 1 if v else None)
        return cls(cells)

    # ---------- access ----------
    def get(self, row: int, col: int) -> Cell:
        return self.cells[row * SIZE + col]

    def givens(self) -> Iterator[Tuple[int, int, int]]:
        """(row, col, digit) for every filled cell."""
        for i, d in enumerate(self.cells):
            if d is not None:
                yield i // SIZE, i % SIZE, d

    def row(self, r: int) -> List[Cell]:
        return [self.get(r, c) for c in range(SIZE)]

    def col(self, c: int) -> List[Cell]:
        return [self.get(r, c) for r in range(SIZE)]

    def block(self, b: int) -> List[Cell]:
        return [self.get(r, c) for r, c in block_cells(b)]

    def is_complete(self) -> bool:
        return all(d is not None for d in self.cells)

    def is_solved(self) -> bool:
        """Complete, and every row, column and block is a permutation of 1..9."""
        if not self.is_complete():
            return False
        digits = set(range(SIZE))
        groups = (
            [self.row(i) for i in range(SIZE)]
            + [self.col(i) for i in range(SIZE)]
            + [self.block(i) for i in range(SIZE)]
        )
        return all(set(g) == digits for g in groups)

    # ---------- output ----------
    def to_string(self) -> str:
        return "".join(BLANK if d is None else str(d + 1) for d in self.cells)

    def to_rows(self) -> List[List[int]]:
        return [[0 if d is None else d + 1 for d in self.row(r)] for r in range(SIZE)]

    def __str__(self) -> str:
        """
        9 rows of "d " cells with "| " between blocks and a dashed line
        between block rows. An empty cell is drawn two spaces wide, the same
        width as a digit, so partially filled grids stay aligned.
        """
        lines = []
        for r in range(SIZE):
            parts = []
            for c in range(SIZE):
                d = self.get(r, c)
                parts.append(BLANK + " " if d is None else f"{d + 1} ")
                if c < SIZE - 1 and (c + 1) % BOX == 0:
                    parts.append("| ")
            lines.append("".join(parts))
            if r < SIZE - 1 and (r + 1) % BOX == 0:
                lines.append(DIVIDER)
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Grid.from_string({self.to_string()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self) -> int:
        return hash(self.cells)
