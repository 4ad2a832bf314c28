"""
Session endpoints
"""
from fastapi import APIRouter, Depends

from scoreboard.api.index import get_session
from scoreboard.session import SessionContext


router = APIRouter(tags=["session"])


@router.get("/session")
async def current_session(session: SessionContext = Depends(get_session)):
    """Team logged into the caller's session, if any"""
    if not session.active():
        return {"active": False}
    return {
        "active": True,
        "team_id": int(session.get("team_id")),
        "name": session.get("name"),
        "admin": session.is_admin(),
        "csrf_token": session.get("csrf_token"),
    }


@router.post("/logout")
async def logout(session: SessionContext = Depends(get_session)):
    session.clear()
    return {"success": True, "message": "Logged out"}
