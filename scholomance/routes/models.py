"""Pydantic request models for API endpoints."""

from pydantic import BaseModel


class UpdateDraft(BaseModel):
    name: str | None = None
    race: str | None = None
    class_type: str | None = None
    alignment: str | None = None
    background: str | None = None
    hair_style: str | None = None
    hair_color: str | None = None
    eye_color: str | None = None
    cybernetics: str | None = None


class ActionBody(BaseModel):
    action: str
