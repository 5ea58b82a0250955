"""Session lifecycle endpoints."""

from fastapi import APIRouter, HTTPException, Request

from scholomance.sessions import Session, SessionStore

router = APIRouter()


def _store(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_session_or_404(request: Request, sid: str) -> Session:
    session = _store(request).get(sid)
    if session is None:
        raise HTTPException(404, "Session not found")
    return session


@router.post("/sessions")
async def create_session(request: Request):
    """Start a new session with a default draft."""
    return _store(request).create().summary()


@router.get("/sessions/{sid}")
async def get_session(request: Request, sid: str):
    """Session phase, draft, character and game state."""
    return get_session_or_404(request, sid).summary()


@router.delete("/sessions/{sid}")
async def delete_session(request: Request, sid: str):
    """End a session and drop its state."""
    if not _store(request).delete(sid):
        raise HTTPException(404, "Session not found")
    return {"ok": True}
