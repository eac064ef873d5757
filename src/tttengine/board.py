"""
Board model: nine cells in row-major order (r1c1 .. r3c3).

Teaching notes:
- A cell only moves from EMPTY to X or O; the sole way back is reset().
- The Board can wrap a caller-owned list so a view and the engine share
  the same cells without copying.
- Move counting is NOT derived here; the engine keeps its own counter.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from .errors import OccupiedCellError

SIZE = 3
CELL_COUNT = SIZE * SIZE
CENTER = 4
CORNERS = (0, 8, 6, 2)


class Mark(str, Enum):
    EMPTY = ""
    X = "X"
    O = "O"

    def opponent(self) -> "Mark":
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError("EMPTY has no opponent")

    @classmethod
    def parse(cls, ch: str) -> "Mark":
        c = ch.strip().upper()
        if c in ("", "-", ".", "_"):
            return cls.EMPTY
        if c == "X":
            return cls.X
        # "0" is accepted as O
        if c in ("O", "0"):
            return cls.O
        raise ValueError(f"Not a mark: {ch!r}")

    def symbol(self) -> str:
        return self.value or "."


class Board:
    """Nine marks plus the mutation/query operations on them."""

    def __init__(self, cells: Optional[List[Mark]] = None) -> None:
        if cells is None:
            cells = [Mark.EMPTY] * CELL_COUNT
        if len(cells) != CELL_COUNT:
            raise ValueError(f"Board needs {CELL_COUNT} cells, got {len(cells)}")
        # plain "X"/"O"/"" strings become Marks, in place once all parse
        cells[:] = [c if isinstance(c, Mark) else Mark.parse(c) for c in cells]
        self._cells = cells

    @classmethod
    def from_string(cls, raw: str) -> "Board":
        """Build a board from nine characters, e.g. ``"XO.X....."``."""
        raw = raw.strip("\r\n")
        if len(raw) != CELL_COUNT:
            raise ValueError(f"Board string must have {CELL_COUNT} characters: {raw!r}")
        return cls([Mark.parse(c) for c in raw])

    def to_string(self) -> str:
        return "".join(m.symbol() for m in self._cells)

    @property
    def cells(self) -> List[Mark]:
        return self._cells

    def cell_at(self, index: int) -> Mark:
        self._check_index(index)
        return self._cells[index]

    def mark(self, index: int, value: Mark) -> None:
        self._check_index(index)
        if not isinstance(value, Mark):
            value = Mark.parse(value)
        if value is Mark.EMPTY:
            raise ValueError("Cannot mark a cell EMPTY; use reset()")
        current = self._cells[index]
        if current is not Mark.EMPTY:
            raise OccupiedCellError(index, current)
        self._cells[index] = value

    def is_full(self) -> bool:
        return Mark.EMPTY not in self._cells

    def reset(self) -> None:
        # in place, so a shared backing list sees the change
        for i in range(CELL_COUNT):
            self._cells[i] = Mark.EMPTY

    def empty_cells(self) -> List[int]:
        return [i for i, m in enumerate(self._cells) if m is Mark.EMPTY]

    def count(self, mark: Mark) -> int:
        return self._cells.count(mark)

    def snapshot(self) -> Tuple[Mark, ...]:
        return tuple(self._cells)

    def copy(self) -> "Board":
        return Board(list(self._cells))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"Cell index out of range 0..{CELL_COUNT - 1}: {index}")

    def __len__(self) -> int:
        return CELL_COUNT

    def __iter__(self):
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"
