"""Character draft endpoints: edit, randomize, finalize."""

import logging

from fastapi import APIRouter, HTTPException, Request

from scholomance.draft import DraftValidationError
from scholomance.sessions import FinalizeInProgressError

from .models import UpdateDraft
from .sessions import get_session_or_404

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sessions/{sid}/draft")
async def get_draft(request: Request, sid: str):
    """Current draft selections with the live stat preview."""
    return get_session_or_404(request, sid).draft.model_dump()


@router.patch("/sessions/{sid}/draft")
async def update_draft(request: Request, sid: str, body: UpdateDraft):
    """Set one or more draft fields."""
    draft = get_session_or_404(request, sid).draft
    draft.update(**body.model_dump(exclude_none=True))
    return draft.model_dump()


@router.post("/sessions/{sid}/draft/randomize")
async def randomize_draft(request: Request, sid: str):
    """Randomize race, class, background and alignment."""
    draft = get_session_or_404(request, sid).draft
    draft.randomize()
    return draft.model_dump()


@router.post("/sessions/{sid}/draft/finalize")
async def finalize_draft(request: Request, sid: str):
    """Generate the character and start the game."""
    session = get_session_or_404(request, sid)
    try:
        await session.create_character(request.app.state.client)
    except DraftValidationError as e:
        raise HTTPException(400, str(e))
    except FinalizeInProgressError as e:
        raise HTTPException(409, str(e))
    except Exception:
        logger.exception("Character creation failed for session %s", sid)
        raise HTTPException(500, "Initialization Failed. Please try again.")
    return session.summary()
