"""
Shared fixtures: collaborators, handler, session and HTTP client
"""
import pytest

from scoreboard.config import ConfigStore
from scoreboard.core.handler import RegistrationLoginHandler
from scoreboard.models import Settings
from scoreboard.services.logos import LogoService
from scoreboard.services.team_registry import TeamRepository
from scoreboard.services.tokens import TokenService
from scoreboard.session import SessionContext


LOGOS = ["badger", "crab", "ghost"]


@pytest.fixture
def config():
    return ConfigStore()


@pytest.fixture
def teams():
    return TeamRepository()


@pytest.fixture
def tokens():
    return TokenService(["invite1", "invite2"])


@pytest.fixture
def logos():
    return LogoService(LOGOS)


@pytest.fixture
def handler(config, teams, tokens, logos):
    return RegistrationLoginHandler(config, teams, tokens, logos)


@pytest.fixture
def session():
    return SessionContext({}, remote_addr="10.0.0.7")


@pytest.fixture
def admin_team(teams):
    """Admin team with id 1, password 'root-pass'"""
    team_id = teams.create("admin", teams.generate_hash("root-pass"), "ghost", admin=True)
    return teams.get_team(team_id)


@pytest.fixture
def test_settings():
    return Settings(
        session_secret="test-secret",
        logos=LOGOS,
        admin={"name": "admin", "password": "root-pass"},
        tokens=["invite1"],
    )


@pytest.fixture
def client(test_settings):
    """TestClient with state rebuilt from test settings"""
    from fastapi.testclient import TestClient

    from scoreboard import state
    from scoreboard.main import app

    with TestClient(app) as test_client:
        state.init_state(test_settings)
        yield test_client
