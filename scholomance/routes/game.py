"""Game loop endpoints: read the turn state, submit an action."""

from fastapi import APIRouter, HTTPException, Request

from scholomance.engine import EngineBusyError, TurnEngine

from .models import ActionBody
from .sessions import get_session_or_404

router = APIRouter()


def _engine(request: Request, sid: str) -> TurnEngine:
    session = get_session_or_404(request, sid)
    if session.engine is None:
        raise HTTPException(409, "No character yet, finalize the draft first")
    return session.engine


@router.get("/sessions/{sid}/game")
async def get_game(request: Request, sid: str):
    """Current scene, image, choices, history and turn counter."""
    return _engine(request, sid).state.model_dump()


@router.post("/sessions/{sid}/game/action")
async def submit_action(request: Request, sid: str, body: ActionBody):
    """Resolve one player action. `advanced` is false if the scene did not change."""
    engine = _engine(request, sid)
    try:
        advanced = await engine.submit_action(body.action)
    except EngineBusyError as e:
        raise HTTPException(409, str(e))
    return {"advanced": advanced, "state": engine.state.model_dump()}
