"""Team registration storage"""
import itertools
import logging
from typing import Dict, List, Optional

from passlib.context import CryptContext

from scoreboard.models import RosterEntry, Team


logger = logging.getLogger(__name__)

# Hashes below min_rounds are upgraded on the next successful login
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], pbkdf2_sha256__min_rounds=29000)


def _name_key(name: str) -> str:
    # Team names are unique regardless of case and surrounding spaces
    return name.strip().casefold()


class TeamRepository:
    """In-memory team store: teams by id, plus an index from name to id"""

    def __init__(self):
        self._teams: Dict[int, Team] = {}
        self._name_index: Dict[str, int] = {}
        self._team_data: Dict[int, List[RosterEntry]] = {}
        self._ids = itertools.count(1)

    @staticmethod
    def generate_hash(password: str) -> str:
        return pwd_context.hash(password)

    def team_exist(self, name: str) -> bool:
        return _name_key(name) in self._name_index

    def get_team_by_name(self, name: str) -> Optional[Team]:
        team_id = self._name_index.get(_name_key(name))
        if team_id is None:
            return None
        return self._teams[team_id]

    def get_team(self, team_id: int) -> Optional[Team]:
        return self._teams.get(team_id)

    def all_teams(self) -> List[Team]:
        return list(self._teams.values())

    def create(self, name: str, password_hash: str, logo: str, admin: bool = False) -> Optional[int]:
        """
        Create a team

        Returns:
            New team id, or None if the name is empty or already taken
        """
        key = _name_key(name)
        if not key or key in self._name_index:
            return None

        team = Team(
            id=next(self._ids),
            name=name,
            password_hash=password_hash,
            logo=logo,
            admin=admin,
        )
        self._teams[team.id] = team
        self._name_index[key] = team.id
        logger.info(f"✅ Team {team.id} ({team.name!r}) created")
        return team.id

    def add_team_data(self, name: str, email: str, team_id: int) -> None:
        """Attach one roster entry (player name/email) to a team"""
        if team_id not in self._teams:
            raise KeyError(f"Team {team_id} not found")
        self._team_data.setdefault(team_id, []).append(RosterEntry(name=name, email=email))

    def get_team_data(self, team_id: int) -> List[RosterEntry]:
        return list(self._team_data.get(team_id, []))

    def set_active(self, team_id: int, active: bool) -> Team:
        team = self._teams[team_id]
        team.active = active
        return team

    def verify_credentials(self, team_id: int, password: str) -> Optional[Team]:
        """
        Check an id/password pair

        Inactive teams never verify. A hash stored with too few rounds is
        replaced after a successful check.

        Returns:
            The team, or None on mismatch
        """
        team = self._teams.get(team_id)
        if team is None or not team.active:
            return None

        try:
            valid, new_hash = pwd_context.verify_and_update(password, team.password_hash)
        except ValueError:
            logger.warning(f"⚠️  Team {team_id} has an unrecognized password hash")
            return None
        if not valid:
            return None

        if new_hash is not None:
            team.password_hash = new_hash
            logger.info(f"🔄 Rehashed password for team {team_id}")

        return team
