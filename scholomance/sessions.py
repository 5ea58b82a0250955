"""In-memory player sessions.

A session walks through two phases:
  creating : only a draft exists; the player edits and finalizes it.
  playing  : finalize() produced a Character and a started TurnEngine.

Sessions live only as long as the process; nothing is written to disk.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field

from scholomance.draft import CharacterDraft
from scholomance.engine import TurnEngine
from scholomance.generative import GenerativeClient
from scholomance.models import Character

logger = logging.getLogger(__name__)


class FinalizeInProgressError(RuntimeError):
    """Raised when a second finalize starts before the first resolved."""


@dataclass
class Session:
    id: str
    draft: CharacterDraft = field(default_factory=CharacterDraft)
    character: Character | None = None
    engine: TurnEngine | None = None
    finalizing: bool = False

    async def create_character(self, client: GenerativeClient) -> Character:
        """Finalize the draft and start a fresh game for the new character.

        Errors leave the session in the creating phase so the player can retry.
        """
        if self.finalizing:
            raise FinalizeInProgressError("Character creation already in progress")
        self.finalizing = True
        try:
            character = await self.draft.finalize(client)
        finally:
            self.finalizing = False

        if self.engine is not None:
            self.engine.close()
        self.character = character
        self.engine = TurnEngine(character, client)
        self.engine.start()
        logger.info("Session %s: %s enters Scholomance", self.id, character.name)
        return character

    def summary(self) -> dict:
        return {
            "id": self.id,
            "phase": "playing" if self.engine else "creating",
            "draft": self.draft.model_dump(),
            "character": self.character.model_dump() if self.character else None,
            "game": self.engine.state.model_dump() if self.engine else None,
        }


class SessionStore:
    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}

    def create(self) -> Session:
        session = Session(id=uuid.uuid4().hex)
        self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        if session.engine is not None:
            session.engine.close()
        return True

    def __len__(self) -> int:
        return len(self._sessions)
