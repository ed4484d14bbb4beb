"""
Win detection strategies.

A strategy inspects a Board and reports an Outcome: undecided, a tie, or the
mark that completed a line. GameEngine only talks to the WinChecker base
class, so rule sets can be swapped without touching the engine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .board import MIN_BOARD_SIZE, Board

Cell = Tuple[int, int]


class OutcomeKind(Enum):
    UNDECIDED = "undecided"
    TIE = "tie"
    WINNER = "winner"


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating a board. `mark` is set only for WINNER."""
    kind: OutcomeKind
    mark: Optional[str] = None

    @staticmethod
    def undecided() -> "Outcome":
        return Outcome(OutcomeKind.UNDECIDED)

    @staticmethod
    def tie() -> "Outcome":
        return Outcome(OutcomeKind.TIE)

    @staticmethod
    def winner(mark: str) -> "Outcome":
        return Outcome(OutcomeKind.WINNER, mark)


# PUBLIC_INTERFACE
class WinChecker(ABC):
    """Strategy interface for deciding whether a board is won, tied or still open."""

    @abstractmethod
    def evaluate(self, board: Board) -> Outcome:
        ...

    def _first_winning_mark(self, board: Board, lines: Iterator[List[Cell]]) -> Optional[str]:
        for line in lines:
            marks = [board.get(r, c) for r, c in line]
            if marks[0] and marks.count(marks[0]) == len(marks):
                return marks[0]
        return None

    def _settle(self, board: Board, mark: Optional[str]) -> Outcome:
        if mark is not None:
            return Outcome.winner(mark)
        if board.is_full():
            return Outcome.tie()
        return Outcome.undecided()


# PUBLIC_INTERFACE
class ClassicWinChecker(WinChecker):
    """
    Standard 3-in-a-row rule.

    Only the first three cells of each row and each column are inspected,
    plus the two diagonals of the top-left 3x3 block, whatever the board size.
    On larger boards this means wins outside that region are never detected;
    use LineWinChecker for a full-board scan.

    Order: rows top to bottom, columns left to right, main diagonal, then
    anti-diagonal. The first complete line decides the winner.
    """

    def _lines(self, size: int) -> Iterator[List[Cell]]:
        for i in range(size):
            yield [(i, 0), (i, 1), (i, 2)]
        for i in range(size):
            yield [(0, i), (1, i), (2, i)]
        yield [(0, 0), (1, 1), (2, 2)]
        yield [(0, 2), (1, 1), (2, 0)]

    def evaluate(self, board: Board) -> Outcome:
        return self._settle(board, self._first_winning_mark(board, self._lines(board.size)))


# PUBLIC_INTERFACE
class LineWinChecker(WinChecker):
    """
    N-in-a-row over the whole board.

    Args:
        win_length: Consecutive marks needed to win. None means the board size,
            i.e. a full row, column or diagonal.
    """

    def __init__(self, win_length: Optional[int] = None) -> None:
        if win_length is not None and win_length < MIN_BOARD_SIZE:
            raise ValueError(f"win_length must be at least {MIN_BOARD_SIZE}, got {win_length}")
        self.win_length = win_length

    # (d_row, d_col) in priority order: rows, columns, main diagonals, anti-diagonals
    DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (1, -1))

    def _lines(self, size: int) -> Iterator[List[Cell]]:
        length = self.win_length or size
        if length > size:
            return
        for dr, dc in self.DIRECTIONS:
            for row in range(size):
                for col in range(size):
                    end_row = row + dr * (length - 1)
                    end_col = col + dc * (length - 1)
                    if 0 <= end_row < size and 0 <= end_col < size:
                        yield [(row + dr * k, col + dc * k) for k in range(length)]

    def evaluate(self, board: Board) -> Outcome:
        return self._settle(board, self._first_winning_mark(board, self._lines(board.size)))


WIN_RULES = ("classic", "line")


# PUBLIC_INTERFACE
def build_win_checker(rule: str = "classic", win_length: Optional[int] = None) -> WinChecker:
    """Create the WinChecker named by a configuration value."""
    if rule == "classic":
        return ClassicWinChecker()
    if rule == "line":
        return LineWinChecker(win_length)
    raise ValueError(f"Unknown win rule {rule!r}; expected one of {', '.join(WIN_RULES)}")
