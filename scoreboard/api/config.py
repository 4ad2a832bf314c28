"""
Configuration endpoints
"""
from fastapi import APIRouter

from scoreboard import state
from scoreboard.models import LoginSelect, RegistrationType, Switch


router = APIRouter(tags=["config"])


@router.get("/config")
async def get_config():
    """Public view of the registration/login toggles, used to render the index forms"""
    flags = state.CONFIG.flags()
    login_by_id = flags["login_select"] == LoginSelect.BY_ID

    # Login by id picks the team from a list
    teams = [
        {"id": team.id, "name": team.name}
        for team in state.TEAMS.all_teams()
        if team.active
    ] if login_by_id else []

    return {
        "flags": flags,
        "registration_enabled": flags["registration"] != Switch.DISABLED,
        "registration_tokenized": flags["registration_type"] == RegistrationType.TOKENIZED,
        "login_enabled": flags["login"] != Switch.DISABLED,
        "login_by_id": login_by_id,
        "logos": [logo.name for logo in state.LOGOS.all_logos() if logo.enabled],
        "teams": teams,
    }
