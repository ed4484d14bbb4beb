from typing import List, Optional

EMPTY = ""
MIN_BOARD_SIZE = 3


class Board:
    """
    Square grid of marks.

    Cells hold a player's symbol, or EMPTY. Coordinates are 0-based (row, col).
    Out-of-range coordinates are never stored: reads return None and writes
    are ignored, so callers validate before placing.
    """

    def __init__(self, size: int = MIN_BOARD_SIZE) -> None:
        self._size: int = size
        self._cells: List[List[str]] = [[EMPTY for _ in range(size)] for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    # PUBLIC_INTERFACE
    def is_valid(self, row: int, col: int) -> bool:
        """Check that (row, col) lies on the board."""
        return 0 <= row < self._size and 0 <= col < self._size

    # PUBLIC_INTERFACE
    def is_empty(self, row: int, col: int) -> bool:
        """True only for an in-range cell with no mark. Off-board cells count as not empty."""
        return self.is_valid(row, col) and self._cells[row][col] == EMPTY

    # PUBLIC_INTERFACE
    def place(self, row: int, col: int, mark: str) -> None:
        """Write mark into the cell. Silently ignores out-of-range coordinates."""
        if self.is_valid(row, col):
            self._cells[row][col] = mark

    # PUBLIC_INTERFACE
    def clear(self, row: int, col: int) -> None:
        self.place(row, col, EMPTY)

    # PUBLIC_INTERFACE
    def get(self, row: int, col: int) -> Optional[str]:
        """Return the mark at (row, col), or None if the coordinate is off the board."""
        return self._cells[row][col] if self.is_valid(row, col) else None

    # PUBLIC_INTERFACE
    def is_full(self) -> bool:
        return all(cell != EMPTY for row in self._cells for cell in row)

    # PUBLIC_INTERFACE
    def reset(self) -> None:
        """Set every cell back to EMPTY. The size never changes."""
        for row in self._cells:
            for col in range(self._size):
                row[col] = EMPTY

    def occupied_count(self) -> int:
        return sum(1 for row in self._cells for cell in row if cell != EMPTY)

    # PUBLIC_INTERFACE
    def cells(self) -> List[List[str]]:
        """Copy of the grid, safe to hand to serializers."""
        return [row[:] for row in self._cells]
