"""Tests for environment-driven settings."""

import pytest

from tictactoe_api.config import Settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "TICTACTOE_BOARD_SIZE",
        "TICTACTOE_WIN_RULE",
        "TICTACTOE_WIN_LENGTH",
        "TICTACTOE_CORS_ORIGINS",
        "TICTACTOE_LOG_LEVEL",
        "TICTACTOE_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert load_settings() == Settings()


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("TICTACTOE_BOARD_SIZE", "5")
    monkeypatch.setenv("TICTACTOE_WIN_RULE", "Line")
    monkeypatch.setenv("TICTACTOE_WIN_LENGTH", "4")
    monkeypatch.setenv("TICTACTOE_CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "DEBUG")

    settings = load_settings()
    assert settings.board_size == 5
    assert settings.win_rule == "line"
    assert settings.win_length == 4
    assert settings.cors_origins == ("http://a.test", "http://b.test")
    assert settings.log_level == "DEBUG"


def test_rejects_non_integer_size(monkeypatch):
    monkeypatch.setenv("TICTACTOE_BOARD_SIZE", "big")
    with pytest.raises(ValueError, match="TICTACTOE_BOARD_SIZE"):
        load_settings()


def test_rejects_unknown_rule(monkeypatch):
    monkeypatch.setenv("TICTACTOE_WIN_RULE", "gomoku")
    with pytest.raises(ValueError, match="TICTACTOE_WIN_RULE"):
        load_settings()
