"""Single-session Tic Tac Toe backend."""

from .board import EMPTY, Board
from .core import (
    GameConfigurationError,
    GameEngine,
    GameStatus,
    Move,
    Player,
    PlayerKind,
    create_game,
    default_players,
)
from .strategies import ClassicWinChecker, LineWinChecker, Outcome, OutcomeKind, WinChecker

__version__ = "0.1.0"
