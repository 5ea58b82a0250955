"""Health check and creator option endpoints."""

from fastapi import APIRouter

from scholomance.constants import options

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/options")
async def get_options():
    """Option sets for the character creator (races, classes, appearance)."""
    return options()
