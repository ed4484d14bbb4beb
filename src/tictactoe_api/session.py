"""
Process-lifetime holder for the single active game.

FastAPI runs plain `def` endpoints in a thread pool, so every engine call and
every snapshot is taken under one coarse lock.
"""

import threading
from dataclasses import dataclass
from typing import List, Optional

from .board import MIN_BOARD_SIZE
from .config import Settings
from .core import GameConfigurationError, GameEngine, Move, create_game, default_players
from .logging_config import get_logger
from .strategies import ClassicWinChecker, WinChecker, build_win_checker

logger = get_logger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Externally visible game state after an operation."""
    board: List[List[str]]
    current_player: str
    game_over: bool
    winner: Optional[str]
    board_size: int
    success: Optional[bool] = None


class GameSession:
    """
    Holds exactly one GameEngine and serializes access to it.

    A new game is only installed once it has been built successfully, so a
    rejected configuration leaves the previous game playable.
    """

    def __init__(self, board_size: int = MIN_BOARD_SIZE, win_checker: Optional[WinChecker] = None) -> None:
        self._lock = threading.Lock()
        self.default_board_size = board_size
        self._win_checker = win_checker or ClassicWinChecker()
        self._engine = self._build(board_size)
        logger.info("Session started with a %dx%d game", board_size, board_size)

    # PUBLIC_INTERFACE
    @classmethod
    def from_settings(cls, settings: Settings) -> "GameSession":
        return cls(settings.board_size, build_win_checker(settings.win_rule, settings.win_length))

    def _build(self, board_size: int) -> GameEngine:
        return create_game(board_size, default_players(), self._win_checker)

    @property
    def engine(self) -> GameEngine:
        return self._engine

    def _snapshot(self, success: Optional[bool] = None) -> Snapshot:
        engine = self._engine
        return Snapshot(
            board=engine.board.cells(),
            current_player=engine.current_player.symbol,
            game_over=engine.is_over,
            winner=engine.result(),
            board_size=engine.board_size,
            success=success,
        )

    # PUBLIC_INTERFACE
    def status(self) -> Snapshot:
        with self._lock:
            return self._snapshot()

    # PUBLIC_INTERFACE
    def move(self, row: int, col: int) -> Snapshot:
        """Play (row, col) for the current player. The snapshot's success flag reports the outcome."""
        with self._lock:
            symbol = self._engine.current_player.symbol
            success = self._engine.make_move(row, col)
            if not success:
                logger.debug("Rejected move %s at (%d, %d)", symbol, row, col)
            else:
                logger.debug("%s played (%d, %d)", symbol, row, col)
                if self._engine.is_over:
                    logger.info("Game over: %s", self._engine.result())
            return self._snapshot(success)

    # PUBLIC_INTERFACE
    def undo(self) -> Snapshot:
        with self._lock:
            success = self._engine.undo()
            if not success:
                logger.debug("Nothing to undo")
            return self._snapshot(success)

    # PUBLIC_INTERFACE
    def reset(self) -> Snapshot:
        with self._lock:
            self._engine.reset()
            logger.info("Game reset")
            return self._snapshot()

    # PUBLIC_INTERFACE
    def new_game(self, board_size: Optional[int] = None) -> Snapshot:
        """
        Replace the game with a fresh one for two default players.

        Args:
            board_size: Board dimension; the session default when omitted.
        Raises:
            GameConfigurationError: The size is invalid. The current game is kept.
        """
        size = self.default_board_size if board_size is None else board_size
        with self._lock:
            try:
                engine = self._build(size)
            except GameConfigurationError as exc:
                logger.warning("New game rejected: %s", exc)
                raise
            self._engine = engine
            logger.info("New %dx%d game", size, size)
            return self._snapshot()

    # PUBLIC_INTERFACE
    def history(self) -> List[Move]:
        with self._lock:
            return self._engine.history
