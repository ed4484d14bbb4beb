from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .core import GameConfigurationError
from .logging_config import get_logger, setup_logging
from .models import (
    ActionResponse,
    GameStatusResponse,
    HistoryResponse,
    MoveRecord,
    MoveRequest,
    NewGameRequest,
)
from .session import GameSession

logger = get_logger(__name__)

router = APIRouter(prefix="/api/game", tags=["game"])


def get_session(request: Request) -> GameSession:
    """The session owned by the running application."""
    return request.app.state.session


# PUBLIC_INTERFACE
@router.get("/status", response_model=GameStatusResponse, summary="Get current game state")
def game_status(session: GameSession = Depends(get_session)):
    """Board, player to move, and result of the active game."""
    return GameStatusResponse.from_snapshot(session.status())


# PUBLIC_INTERFACE
@router.post("/move", response_model=ActionResponse, summary="Make a move")
def make_move(request: MoveRequest, session: GameSession = Depends(get_session)):
    """Play a move for the current player.

    An occupied or off-board cell, or a finished game, gives success=false and
    leaves the game unchanged.
    """
    return ActionResponse.from_snapshot(session.move(request.row, request.col))


# PUBLIC_INTERFACE
@router.post("/reset", response_model=GameStatusResponse, summary="Reset current game")
def reset_game(session: GameSession = Depends(get_session)):
    """Clear the board and history, keeping board size and players."""
    return GameStatusResponse.from_snapshot(session.reset())


# PUBLIC_INTERFACE
@router.post("/new", response_model=GameStatusResponse, summary="Start new game")
def new_game(request: Optional[NewGameRequest] = None, session: GameSession = Depends(get_session)):
    """Start a fresh game for two players, optionally with a new board size.

    Args:
        request (NewGameRequest): Optional body, e.g. {"size": 4}.
    Returns:
        GameStatusResponse: State of the new game.
    """
    size = request.size if request is not None else None
    try:
        snapshot = session.new_game(size)
    except GameConfigurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return GameStatusResponse.from_snapshot(snapshot)


# PUBLIC_INTERFACE
@router.post("/undo", response_model=ActionResponse, summary="Undo last move")
def undo_move(session: GameSession = Depends(get_session)):
    """Take back the last move. success=false when there is nothing to undo."""
    return ActionResponse.from_snapshot(session.undo())


# PUBLIC_INTERFACE
@router.get("/history", response_model=HistoryResponse, summary="Get moves of the current game")
def move_history(session: GameSession = Depends(get_session)):
    """Moves played so far, oldest first."""
    return HistoryResponse(moves=[MoveRecord.from_move(m) for m in session.history()])


# PUBLIC_INTERFACE
def create_app(session: Optional[GameSession] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around one game session.

    Args:
        session: Session to serve. Built from settings when omitted.
        settings: Configuration. Read from the environment when omitted.
    Returns:
        FastAPI: The configured application.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title="Tic Tac Toe API",
        description="Backend for a single-session Tic Tac Toe game. Handles moves, undo, reset and new games.",
        version="0.1.0",
        openapi_tags=[
            {"name": "health", "description": "Liveness check"},
            {"name": "game", "description": "Play the active Tic Tac Toe game"},
        ],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.session = session or GameSession.from_settings(settings)

    @app.get("/", tags=["health"])
    def health_check():
        """Health check route for backend"""
        return {"message": "Healthy"}

    app.include_router(router)
    logger.info("Tic Tac Toe API ready")
    return app


app = create_app()
