from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .core import Move
from .session import Snapshot


# PUBLIC_INTERFACE
class MoveRequest(BaseModel):
    """Request model for making a move. Off-board coordinates are answered with success=false."""
    row: int = Field(..., description="Row in board (0-based).")
    col: int = Field(..., description="Col in board (0-based).")


# PUBLIC_INTERFACE
class NewGameRequest(BaseModel):
    """Request model to start a new game."""
    size: Optional[int] = Field(None, description="Board dimension (at least 3). Server default when omitted.")


# PUBLIC_INTERFACE
class GameStatusResponse(BaseModel):
    """Current game state. Empty cells are empty strings."""
    model_config = ConfigDict(populate_by_name=True)

    board: List[List[str]] = Field(..., description="size x size grid of marks, '' for an empty cell.")
    current_player: str = Field(..., alias="currentPlayer", description="Mark of the player to move (the winner once won).")
    game_over: bool = Field(..., alias="gameOver", description="True once the game is won or tied.")
    winner: Optional[str] = Field(None, description="Winning mark, 'TIE', or null while undecided.")
    board_size: int = Field(..., alias="boardSize", description="Board dimension.")

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "GameStatusResponse":
        return cls(
            board=snapshot.board,
            current_player=snapshot.current_player,
            game_over=snapshot.game_over,
            winner=snapshot.winner,
            board_size=snapshot.board_size,
        )


# PUBLIC_INTERFACE
class ActionResponse(GameStatusResponse):
    """Game state after a move or undo, with whether it was applied."""
    success: bool = Field(..., description="False when the move or undo was rejected; state is then unchanged.")

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "ActionResponse":
        return cls(
            board=snapshot.board,
            current_player=snapshot.current_player,
            game_over=snapshot.game_over,
            winner=snapshot.winner,
            board_size=snapshot.board_size,
            success=bool(snapshot.success),
        )


# PUBLIC_INTERFACE
class MoveRecord(BaseModel):
    row: int
    col: int
    symbol: str
    name: str

    @classmethod
    def from_move(cls, move: Move) -> "MoveRecord":
        return cls(row=move.row, col=move.col, symbol=move.player.symbol, name=move.player.name)


# PUBLIC_INTERFACE
class HistoryResponse(BaseModel):
    moves: List[MoveRecord]
