from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .board import MIN_BOARD_SIZE, Board
from .strategies import ClassicWinChecker, OutcomeKind, WinChecker

TIE = "TIE"


class PlayerKind(Enum):
    HUMAN = "human"
    BOT = "bot"  # declared only; no move generation exists for bots


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    PLAYER_WON = "player_won"
    TIE = "tie"


class GameConfigurationError(ValueError):
    """Raised when a game cannot be built from the given settings."""


@dataclass(frozen=True)
class Player:
    symbol: str
    name: str
    kind: PlayerKind = PlayerKind.HUMAN


@dataclass(frozen=True)
class Move:
    """One placed mark, as recorded in the move history."""
    row: int
    col: int
    player: Player


# PUBLIC_INTERFACE
def default_players() -> List[Player]:
    """The two human players every fresh session starts with."""
    return [Player("X", "Player 1"), Player("O", "Player 2")]


class GameEngine:
    """
    Core game logic for Tic Tac Toe.

    Owns the board, the move history, the turn cursor and the terminal state.
    Win and tie detection is delegated to a WinChecker. Gameplay mistakes
    (occupied or off-board cell, game already over, nothing to undo) are
    reported through a False return value and leave the state untouched.

    Build instances with create_game(), which validates the configuration.
    """

    def __init__(self, board: Board, players: Sequence[Player], win_checker: WinChecker) -> None:
        self._board = board
        self._players: Tuple[Player, ...] = tuple(players)
        self._win_checker = win_checker
        self._history: List[Move] = []
        self._current_index: int = 0
        self._status: GameStatus = GameStatus.IN_PROGRESS
        self._winner: Optional[Player] = None

    # PUBLIC_INTERFACE
    def make_move(self, row: int, col: int) -> bool:
        """Place the current player's mark at (row, col). Returns True if the move was applied."""
        if self._status is not GameStatus.IN_PROGRESS:
            return False
        if not self._board.is_empty(row, col):
            return False

        player = self.current_player
        self._board.place(row, col, player.symbol)
        self._history.append(Move(row, col, player))
        self._update_status()

        # the winner stays "current" once the game has ended
        if self._status is GameStatus.IN_PROGRESS:
            self._current_index = (self._current_index + 1) % len(self._players)
        return True

    def _update_status(self) -> None:
        outcome = self._win_checker.evaluate(self._board)
        if outcome.kind is OutcomeKind.WINNER:
            self._status = GameStatus.PLAYER_WON
            self._winner = self._find_player(outcome.mark)
        elif outcome.kind is OutcomeKind.TIE:
            self._status = GameStatus.TIE

    def _find_player(self, symbol: Optional[str]) -> Optional[Player]:
        return next((p for p in self._players if p.symbol == symbol), None)

    # PUBLIC_INTERFACE
    def undo(self) -> bool:
        """
        Take back the last move.

        The cell is cleared, play resumes (status back to IN_PROGRESS, no
        winner) and the turn returns to the player who made the move.

        Returns:
            False if there is no move to undo.
        """
        if not self._history:
            return False

        last = self._history.pop()
        self._board.clear(last.row, last.col)
        # a move that ended the game never advanced the turn
        if self._status is GameStatus.IN_PROGRESS:
            self._current_index = (self._current_index - 1) % len(self._players)
        self._status = GameStatus.IN_PROGRESS
        self._winner = None
        return True

    # PUBLIC_INTERFACE
    def reset(self) -> None:
        """Empty the board and history and give the first player the turn. Players are kept."""
        self._board.reset()
        self._history.clear()
        self._current_index = 0
        self._status = GameStatus.IN_PROGRESS
        self._winner = None

    # PUBLIC_INTERFACE
    def new_game(self, board_size: int) -> None:
        """Swap in a fresh board of board_size and reset all state. Players are kept."""
        validate_board_size(board_size)
        self._board = Board(board_size)
        self.reset()

    @property
    def current_player(self) -> Player:
        return self._players[self._current_index]

    @property
    def current_player_index(self) -> int:
        return self._current_index

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    @property
    def win_checker(self) -> WinChecker:
        return self._win_checker

    @property
    def board(self) -> Board:
        return self._board

    @property
    def board_size(self) -> int:
        return self._board.size

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def is_over(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    @property
    def history(self) -> List[Move]:
        return list(self._history)

    # PUBLIC_INTERFACE
    def result(self) -> Optional[str]:
        """Winning symbol, TIE, or None while the game is undecided."""
        if self._status is GameStatus.PLAYER_WON and self._winner is not None:
            return self._winner.symbol
        if self._status is GameStatus.TIE:
            return TIE
        return None


def validate_board_size(board_size: int) -> None:
    if board_size < MIN_BOARD_SIZE:
        raise GameConfigurationError(f"Board size must be at least {MIN_BOARD_SIZE}, got {board_size}")


# PUBLIC_INTERFACE
def create_game(
    board_size: int = MIN_BOARD_SIZE,
    players: Optional[Sequence[Player]] = None,
    win_checker: Optional[WinChecker] = None,
) -> GameEngine:
    """
    Build a validated GameEngine.

    Args:
        board_size: Board dimension, at least 3.
        players: Turn order. Defaults to two humans, X then O.
        win_checker: Rule set. Defaults to ClassicWinChecker.
    Returns:
        GameEngine: A fresh game, first player to move.
    Raises:
        GameConfigurationError: Fewer than two players, a board smaller than
            3x3, or two players sharing a symbol.
    """
    players = list(players) if players is not None else default_players()
    if len(players) < 2:
        raise GameConfigurationError("Game must have at least 2 players")
    validate_board_size(board_size)
    symbols = [p.symbol for p in players]
    if not all(symbols):
        raise GameConfigurationError("Player symbols must not be empty")
    if len(set(symbols)) != len(symbols):
        raise GameConfigurationError(f"Player symbols must be unique, got {symbols}")
    return GameEngine(Board(board_size), players, win_checker or ClassicWinChecker())
