"""FastAPI API endpoints under /api.

Endpoint groups: settings (health, creator options), sessions, character
draft (edit, randomize, finalize) and game (state, action). A session's
child resources are nested under /api/sessions/{sid}/.
"""

from fastapi import APIRouter

from .characters import router as characters_router
from .game import router as game_router
from .sessions import router as sessions_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(sessions_router)
router.include_router(characters_router)
router.include_router(game_router)
