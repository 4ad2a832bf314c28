"""
Health check and system status endpoints
"""
from fastapi import APIRouter
from scoreboard import state


router = APIRouter(tags=["health"])


@router.get("/")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "message": "CTF Scoreboard - Index Service",
        "version": "1.0.0",
        "total_teams": len(state.TEAMS.all_teams())
    }
