"""
Data models for the scoreboard index service
"""
import time
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class Switch(str, Enum):
    """On/off toggle ('registration', 'login')"""
    DISABLED = "0"
    ENABLED = "1"


class RegistrationType(str, Enum):
    """Value of the 'registration_type' flag"""
    OPEN = "1"
    TOKENIZED = "2"


class LoginSelect(str, Enum):
    """Value of the 'login_select' flag"""
    BY_NAME = "0"
    BY_ID = "1"


# Allowed values per known flag
FLAG_VALUES: Dict[str, List[str]] = {
    "registration": [v.value for v in Switch],
    "registration_type": [v.value for v in RegistrationType],
    "login": [v.value for v in Switch],
    "login_select": [v.value for v in LoginSelect],
}


# Values used when the settings file does not set a flag
DEFAULT_FLAGS: Dict[str, str] = {
    "registration": Switch.ENABLED.value,
    "registration_type": RegistrationType.OPEN.value,
    "login": Switch.ENABLED.value,
    "login_select": LoginSelect.BY_NAME.value,
}


class ConfigFlag(BaseModel):
    """One configuration toggle, always string-valued"""
    name: str
    value: str


class Team(BaseModel):
    """Registered team"""
    id: int
    name: str                 # shortname, at most 20 chars
    password_hash: str
    logo: str
    admin: bool = False
    active: bool = True
    created_ts: float = Field(default_factory=time.time)


class RosterEntry(BaseModel):
    """One player of a team roster"""
    name: str
    email: str


class InviteToken(BaseModel):
    """Single-use registration token"""
    token: str
    used: bool = False
    team_id: Optional[int] = None
    created_ts: float = Field(default_factory=time.time)
    use_ts: Optional[float] = None


class Logo(BaseModel):
    name: str
    enabled: bool = True


class RegisterTeamRequest(BaseModel):
    """Fields of the 'register_team' action"""
    teamname: str
    password: str
    logo: str
    token: Optional[str] = None  # absent when no token was submitted


class RegisterNamesRequest(RegisterTeamRequest):
    """Fields of the 'register_names' action"""
    roster: List[RosterEntry] = []


class LoginTeamRequest(BaseModel):
    """Fields of the 'login_team' action (team_id or teamname, by login_select)"""
    password: str
    team_id: Optional[int] = None
    teamname: Optional[str] = None


class AjaxResponse(BaseModel):
    """
    Uniform response envelope

    For errors `redirect` carries the context tag (registration, login, index).
    """
    result: str  # "OK" | "ERROR"
    message: str
    redirect: str

    @property
    def ok(self) -> bool:
        return self.result == "OK"


class AdminSeed(BaseModel):
    name: str = "admin"
    password: str


class Settings(BaseModel):
    """Service settings loaded from YAML"""
    session_secret: str
    log_level: str = "INFO"
    flags: Dict[str, str] = {}  # merged over DEFAULT_FLAGS
    logos: List[str]  # at least one
    admin: Optional[AdminSeed] = None
    tokens: List[str] = []

    @field_validator("flags", mode="before")
    @classmethod
    def _stringify_flags(cls, value):
        # YAML reads unquoted 0/1/2 as ints
        if isinstance(value, dict):
            return {str(k): str(v) for k, v in value.items()}
        return value

    @field_validator("logos")
    @classmethod
    def _require_logos(cls, value):
        # Registration falls back to a random logo, so there must be one
        if not value:
            raise ValueError("at least one logo must be configured")
        return value
