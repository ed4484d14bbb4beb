import pytest
from fastapi.testclient import TestClient

from tictactoe_api.config import Settings
from tictactoe_api.core import create_game
from tictactoe_api.main import create_app
from tictactoe_api.session import GameSession


@pytest.fixture
def game():
    return create_game()


@pytest.fixture
def session():
    return GameSession()


@pytest.fixture
def client(session):
    app = create_app(session=session, settings=Settings())
    with TestClient(app) as test_client:
        yield test_client
