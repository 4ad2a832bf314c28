"""
Index actions: team registration and team login

Actions:
- register_team: create a team, then log it in
- register_names: same, also storing a roster of player names/emails
- login_team: verify credentials and open the session

Every action returns an AjaxResponse. HandlerError subclasses raised on the
way are turned into error envelopes by the public methods.
"""
import functools
import json
import logging
from typing import Any, List, Mapping, Optional

from scoreboard.config import ConfigStore
from scoreboard.exceptions import (
    HandlerError, InvalidInput, LoginDisabled, LoginFailed, RegistrationDisabled
)
from scoreboard.models import (
    AjaxResponse, LoginSelect, LoginTeamRequest, RegisterNamesRequest,
    RegisterTeamRequest, RegistrationType, RosterEntry, Switch
)
from scoreboard.services.logos import LogoService
from scoreboard.services.team_registry import TeamRepository
from scoreboard.services.tokens import TokenService
from scoreboard.session import SessionContext, generate_csrf_token
from scoreboard.utils import error_response, ok_response


logger = logging.getLogger(__name__)

# Longer names break the scoreboard UI
SHORTNAME_LENGTH = 20


def _must_have_string(params: Mapping[str, Any], key: str) -> str:
    value = params.get(key)
    if not isinstance(value, str):
        raise InvalidInput(f"{key} is required")
    return value


def _must_have_int(params: Mapping[str, Any], key: str) -> int:
    value = params.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidInput(f"{key} must be an integer")
    return value


def _optional_token(params: Mapping[str, Any]) -> Optional[str]:
    token = params.get('token')
    if not isinstance(token, str) or not token:
        return None
    return token


def _decode_list(raw: str, field: str) -> List[Any]:
    try:
        value = json.loads(raw)
    except ValueError as exc:
        raise InvalidInput(f"{field} is not valid JSON") from exc
    if not isinstance(value, list):
        raise InvalidInput(f"{field} should be an array")
    return value


def build_roster(names_json: str, emails_json: str) -> List[RosterEntry]:
    """
    Decode the JSON `names`/`emails` fields into roster entries

    Raises:
        InvalidInput: not JSON arrays, non-string items, or different lengths
    """
    names = _decode_list(names_json, 'names')
    emails = _decode_list(emails_json, 'emails')
    if len(names) != len(emails):
        raise InvalidInput(f"names ({len(names)}) and emails ({len(emails)}) differ in length")
    if not all(isinstance(item, str) for item in names + emails):
        raise InvalidInput("names and emails should only contain strings")
    return [RosterEntry(name=name, email=email) for name, email in zip(names, emails)]


def _envelope(method):
    """Turn HandlerError raised by `method` into an error envelope"""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs) -> AjaxResponse:
        try:
            return method(self, *args, **kwargs)
        except HandlerError as exc:
            logger.info(f"⛔ {method.__name__}: {exc} ({type(exc).__name__})")
            return error_response(exc.message, exc.context)
    return wrapper


class RegistrationLoginHandler:
    """
    Registration and login policy

    Args:
        config: Feature toggles
        teams: Team storage
        tokens: Invite tokens
        logos: Logo catalogue
    """

    def __init__(
        self,
        config: ConfigStore,
        teams: TeamRepository,
        tokens: TokenService,
        logos: LogoService,
    ):
        self.config = config
        self.teams = teams
        self.tokens = tokens
        self.logos = logos

    def _flag(self, name: str) -> str:
        return self.config.get(name).value

    # ==================== DISPATCH ====================

    @_envelope
    def handle_action(self, action: str, params: Mapping[str, Any], session: SessionContext) -> AjaxResponse:
        """
        Run one index action on already-filtered parameters

        Never raises HandlerError: those become error envelopes.
        """
        if action == 'register_team':
            return self.register_team(self._register_request(params), session)
        if action == 'register_names':
            request = RegisterNamesRequest(
                **self._register_request(params).model_dump(),
                roster=build_roster(
                    _must_have_string(params, 'names'),
                    _must_have_string(params, 'emails'),
                ),
            )
            return self.register_team(request, session)
        if action == 'login_team':
            return self.login(self._login_request(params), session)
        raise InvalidInput(f"Unknown action {action!r}")

    def _register_request(self, params: Mapping[str, Any]) -> RegisterTeamRequest:
        return RegisterTeamRequest(
            teamname=_must_have_string(params, 'teamname'),
            password=_must_have_string(params, 'password'),
            logo=_must_have_string(params, 'logo'),
            token=_optional_token(params),
        )

    def _login_request(self, params: Mapping[str, Any]) -> LoginTeamRequest:
        if self._flag('login_select') == LoginSelect.BY_ID:
            return LoginTeamRequest(
                team_id=_must_have_int(params, 'team_id'),
                password=_must_have_string(params, 'password'),
            )
        return LoginTeamRequest(
            teamname=_must_have_string(params, 'teamname'),
            password=_must_have_string(params, 'password'),
        )

    @_envelope
    def login(self, request: LoginTeamRequest, session: SessionContext) -> AjaxResponse:
        """Resolve the team id (by id or by name) and log in"""
        team_id = request.team_id
        if team_id is None:
            if request.teamname is None:
                raise InvalidInput("teamname is required")
            team = self.teams.get_team_by_name(request.teamname)
            if team is None:
                raise LoginFailed(f"Unknown team {request.teamname!r}")
            team_id = team.id
        return self.login_team(team_id, request.password, session)

    # ==================== REGISTRATION ====================

    @_envelope
    def register_team(self, request: RegisterTeamRequest, session: SessionContext) -> AjaxResponse:
        """
        Register a team and log it in

        `request` may be a RegisterNamesRequest, in which case its roster is
        stored for the new team.
        """
        # Check if registration is enabled
        if self._flag('registration') == Switch.DISABLED:
            raise RegistrationDisabled("registration is disabled")

        # Tokenized registration needs a valid, unused token
        tokenized = self._flag('registration_type') == RegistrationType.TOKENIZED
        if tokenized and (request.token is None or not self.tokens.check(request.token)):
            raise RegistrationDisabled("missing or invalid token")

        logo = request.logo
        if not self.logos.check_exists(logo):
            logo = self.logos.random_logo()

        if request.teamname.strip() == '':
            raise RegistrationDisabled("empty team name")

        shortname = request.teamname[:SHORTNAME_LENGTH]

        if self.teams.team_exist(shortname):
            raise RegistrationDisabled(f"team {shortname!r} already exists")

        password_hash = self.teams.generate_hash(request.password)
        team_id = self.teams.create(shortname, password_hash, logo)
        if not team_id:
            raise RegistrationDisabled(f"could not create team {shortname!r}")

        if isinstance(request, RegisterNamesRequest):
            for entry in request.roster:
                self.teams.add_team_data(entry.name, entry.email, team_id)

        if tokenized:
            self.tokens.use(request.token, team_id)

        logger.info(f"✅ Registered team {team_id} ({shortname!r})")
        return self.login_team(team_id, request.password, session)

    # ==================== LOGIN ====================

    @_envelope
    def login_team(self, team_id: int, password: str, session: SessionContext) -> AjaxResponse:
        """Verify credentials and open the session if none is active"""
        if self._flag('login') == Switch.DISABLED:
            raise LoginDisabled("login is disabled")

        team = self.teams.verify_credentials(team_id, password)
        if team is None:
            raise LoginDisabled(f"bad credentials for team {team_id}")

        session.start()
        if not session.active():
            session.set('team_id', str(team.id))
            session.set('name', team.name)
            session.set('csrf_token', generate_csrf_token())
            session.set('IP', session.remote_addr)
            if team.admin:
                session.set('admin', '1')

        redirect = 'admin' if team.admin else 'game'
        logger.info(f"🔑 Team {team.id} logged in from {session.remote_addr}")
        return ok_response('Login succesful', redirect)
