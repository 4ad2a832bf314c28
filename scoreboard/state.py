"""
Global application state
Shared collaborators accessible across all routers
"""
from typing import Optional

from scoreboard.config import ConfigStore
from scoreboard.models import Settings
from scoreboard.services.logos import LogoService
from scoreboard.services.team_registry import TeamRepository
from scoreboard.services.tokens import TokenService

# Settings loaded at startup
SETTINGS: Optional[Settings] = None

# Feature toggles (registration, registration_type, login, login_select)
CONFIG: ConfigStore = ConfigStore()

# Registered teams and their rosters
TEAMS: TeamRepository = TeamRepository()

# Invite tokens for tokenized registration
TOKENS: TokenService = TokenService()

# Available team logos
LOGOS: LogoService = LogoService()


def init_state(settings: Settings) -> None:
    """Rebuild all collaborators from settings (startup and tests)"""
    global SETTINGS, CONFIG, TEAMS, TOKENS, LOGOS

    SETTINGS = settings
    CONFIG = ConfigStore(settings.flags)
    TEAMS = TeamRepository()
    TOKENS = TokenService(settings.tokens)
    LOGOS = LogoService(settings.logos)

    if settings.admin is not None:
        TEAMS.create(
            settings.admin.name,
            TEAMS.generate_hash(settings.admin.password),
            LOGOS.random_logo(),
            admin=True,
        )
