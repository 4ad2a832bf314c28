"""
Admin endpoints for registration/login management
"""
from fastapi import APIRouter, Depends, HTTPException, Request
import logging
import secrets

from scoreboard import state
from scoreboard.api.index import get_session
from scoreboard.config import save_flags
from scoreboard.session import SessionContext


logger = logging.getLogger(__name__)


def require_admin(session: SessionContext = Depends(get_session)) -> SessionContext:
    if not session.is_admin():
        raise HTTPException(status_code=403, detail="Admin session required")
    return session


CSRF_HEADER = "X-CSRF-Token"
SAFE_METHODS = ("GET", "HEAD", "OPTIONS")


def require_csrf(request: Request, session: SessionContext = Depends(require_admin)) -> None:
    """State-changing admin calls must echo the session CSRF token in a header"""
    if request.method in SAFE_METHODS:
        return
    expected = session.get("csrf_token") or ""
    submitted = request.headers.get(CSRF_HEADER, "")
    if not expected or not secrets.compare_digest(submitted, expected):
        raise HTTPException(status_code=403, detail="Invalid CSRF token")


router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin), Depends(require_csrf)])


@router.post("/config")
async def set_flag(request: dict):
    """
    Admin: Change a registration/login toggle

    Request:
        {
            "name": "registration",
            "value": "0",
            "persist": false   # optional, write back to the config file
        }
    """
    name = request.get("name")
    value = request.get("value")

    if not name or value is None:
        raise HTTPException(status_code=400, detail="name and value required")

    try:
        flag = state.CONFIG.set(name, str(value))
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown flag {name}")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if request.get("persist"):
        save_flags(state.CONFIG.flags())

    return {
        "success": True,
        "name": flag.name,
        "value": flag.value,
        "message": f"Flag {flag.name} set to {flag.value}"
    }


@router.post("/tokens")
async def generate_tokens(request: dict):
    """
    Admin: Issue invite tokens

    Request:
        {"count": 5}   # optional, default 1
    """
    count = request.get("count", 1)

    if not isinstance(count, int) or isinstance(count, bool) or count < 1:
        raise HTTPException(status_code=400, detail="count must be a positive integer")

    tokens = state.TOKENS.generate(count)

    return {
        "success": True,
        "tokens": [token.token for token in tokens],
        "message": f"{count} token(s) generated"
    }


@router.get("/tokens")
async def list_tokens():
    """All invite tokens with their usage"""
    tokens = state.TOKENS.all_tokens()

    return {
        "tokens": [token.model_dump() for token in tokens],
        "total_unused": len([t for t in tokens if not t.used])
    }


@router.get("/teams")
async def list_teams():
    """Registered teams with their rosters"""
    return {
        "teams": [
            {
                "id": team.id,
                "name": team.name,
                "logo": team.logo,
                "admin": team.admin,
                "active": team.active,
                "players": [entry.model_dump() for entry in state.TEAMS.get_team_data(team.id)],
            }
            for team in state.TEAMS.all_teams()
        ]
    }


@router.post("/teams/{team_id}/active")
async def set_team_active(team_id: int, request: dict):
    """
    Admin: Enable or disable a team

    Request:
        {"active": false}
    """
    active = request.get("active")

    if not isinstance(active, bool):
        raise HTTPException(status_code=400, detail="active must be a boolean")

    if state.TEAMS.get_team(team_id) is None:
        raise HTTPException(status_code=404, detail=f"Team {team_id} not found")

    team = state.TEAMS.set_active(team_id, active)
    logger.info(f"Team {team_id} active={active}")

    return {
        "success": True,
        "id": team.id,
        "active": team.active,
    }


@router.delete("/tokens/{token}")
async def delete_token(token: str):
    """Admin: Revoke an invite token"""
    if not state.TOKENS.delete(token):
        raise HTTPException(status_code=404, detail=f"Token {token} not found")

    return {
        "success": True,
        "message": f"Token {token} deleted"
    }


@router.get("/logos")
async def list_logos():
    """All logos, enabled or not"""
    return {"logos": [logo.model_dump() for logo in state.LOGOS.all_logos()]}


@router.post("/logos/{name}/enabled")
async def set_logo_enabled(name: str, request: dict):
    """
    Admin: Enable or disable a logo

    Request:
        {"enabled": false}
    """
    enabled = request.get("enabled")

    if not isinstance(enabled, bool):
        raise HTTPException(status_code=400, detail="enabled must be a boolean")

    try:
        logo = state.LOGOS.set_enabled(name, enabled)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Logo {name} not found")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return {
        "success": True,
        "name": logo.name,
        "enabled": logo.enabled,
    }
