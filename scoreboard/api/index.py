"""Index endpoint: team registration and login"""
import logging

from fastapi import APIRouter, Depends, Request

from scoreboard import state
from scoreboard.core.filters import filter_params
from scoreboard.core.handler import RegistrationLoginHandler
from scoreboard.session import SessionContext


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/index", tags=["index"])


def get_handler() -> RegistrationLoginHandler:
    """Handler bound to the current collaborators"""
    return RegistrationLoginHandler(
        config=state.CONFIG,
        teams=state.TEAMS,
        tokens=state.TOKENS,
        logos=state.LOGOS,
    )


def get_session(request: Request) -> SessionContext:
    client_ip = request.client.host if request.client else "unknown"
    return SessionContext(request.session, remote_addr=client_ip)


@router.post("/ajax")
async def index_ajax(
    request: Request,
    handler: RegistrationLoginHandler = Depends(get_handler),
    session: SessionContext = Depends(get_session),
):
    """
    Run an index action

    Request (form-encoded):
        action=register_team|register_names|login_team
        teamname, password, logo, token, names, emails, team_id

    Response:
        {"result": "OK"|"ERROR", "message": "...", "redirect": "..."}
    """
    form = await request.form()
    params = filter_params(form)
    action = params["action"]

    logger.info(f"📥 {action} from {session.remote_addr}")

    response = handler.handle_action(action, params, session)
    return response.model_dump()
