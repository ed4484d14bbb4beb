import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

from .strategies import WIN_RULES

load_dotenv()


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    board_size: int = 3
    win_rule: str = "classic"
    win_length: Optional[int] = None
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"
    log_format: str = "simple"


# PUBLIC_INTERFACE
def load_settings() -> Settings:
    """Read TICTACTOE_* environment variables (and a .env file, if present)."""
    win_rule = os.getenv("TICTACTOE_WIN_RULE", "classic").strip().lower()
    if win_rule not in WIN_RULES:
        raise ValueError(f"TICTACTOE_WIN_RULE must be one of {', '.join(WIN_RULES)}, got {win_rule!r}")
    origins = os.getenv("TICTACTOE_CORS_ORIGINS", "*")
    return Settings(
        board_size=_int_env("TICTACTOE_BOARD_SIZE", 3),
        win_rule=win_rule,
        win_length=_int_env("TICTACTOE_WIN_LENGTH", None),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_level=os.getenv("TICTACTOE_LOG_LEVEL", "INFO"),
        log_format=os.getenv("TICTACTOE_LOG_FORMAT", "simple"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
