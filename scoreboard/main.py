"""
FastAPI main application
CTF Scoreboard - team registration and login

Modular architecture with separated API routers in scoreboard/api/:
- health.py: Health check
- index.py: Registration and login actions (POST /index/ajax)
- session.py: Current session and logout
- config.py: Public view of the registration/login toggles
- admin.py: Flag toggles, invite tokens, team management

All routers access shared collaborators via scoreboard.state.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware
from contextlib import asynccontextmanager
import logging

from scoreboard import state
from scoreboard.config import load_config

# Import all API routers
from scoreboard.api import health, index, admin, session
from scoreboard.api import config as config_router


settings = load_config()

# Setup logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup: build collaborators from settings
    state.init_state(settings)
    logger.info(
        f"✅ Server started with {len(state.LOGOS.all_logos())} logos, "
        f"{len(state.TOKENS.all_tokens())} tokens, flags {state.CONFIG.flags()}"
    )

    yield

    # Shutdown
    logger.info("🛑 Server shutting down")


# Create FastAPI app
app = FastAPI(
    title="CTF Scoreboard",
    description="Team registration and login for a CTF scoreboard",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware (allow all origins for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Cookie-backed sessions (request.session)
app.add_middleware(SessionMiddleware, secret_key=settings.session_secret)


# ==================== INCLUDE ROUTERS ====================

# Health check (GET /)
app.include_router(health.router)

# Registration / login actions (POST /index/ajax)
app.include_router(index.router)

# Session endpoints (GET /session, POST /logout)
app.include_router(session.router)

# Config endpoint (GET /config)
app.include_router(config_router.router)

# Admin endpoints (POST /admin/config, /admin/tokens, etc.)
app.include_router(admin.router)


# ==================== RUN SERVER ====================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
