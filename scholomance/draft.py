"""Character draft: the creator screen's mutable selections.

A draft holds name, race, class, alignment, background and the appearance
fields. Setting a field is a plain assignment; the only validation happens in
finalize(), which requires a non-blank name before anything is generated.

finalize() asks the generative client for details (backstory + skills), then
for a portrait built from the appearance fields and the start of the
backstory, and composes a Character at full HP/energy:
  max_hp     = VIT * 10
  max_energy = INT * 10
"""

from __future__ import annotations

import logging
import random
from typing import Any

from pydantic import BaseModel, computed_field

from scholomance.constants import (
    ALIGNMENTS,
    BACKGROUNDS,
    CLASSES,
    CYBERNETICS,
    HAIR_STYLES,
    RACES,
)
from scholomance.generative import GenerativeClient
from scholomance.models import Character, Stats
from scholomance.prompts import APPEARANCE_DESCRIPTION, render_prompt
from scholomance.stats import calculate_stats

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Character Name is required"


class DraftValidationError(ValueError):
    """Raised by finalize() when the draft cannot become a character."""


class CharacterDraft(BaseModel):
    name: str = ""
    race: str = RACES[0]
    class_type: str = CLASSES[0]
    alignment: str = "True Neutral"
    background: str = BACKGROUNDS[0]
    hair_style: str = HAIR_STYLES[0]
    hair_color: str = "#06d6e5"
    eye_color: str = "#ff00ff"
    cybernetics: str = CYBERNETICS[0]

    @computed_field
    @property
    def stats(self) -> Stats:
        """Live stat preview; recomputed on every access."""
        return calculate_stats(self.race, self.class_type)

    def update(self, **fields: Any) -> None:
        """Assign several fields at once. Unknown names raise KeyError."""
        for key, value in fields.items():
            if key not in type(self).model_fields:
                raise KeyError(key)
            setattr(self, key, value)

    def randomize(self, rng: random.Random | None = None) -> None:
        """Pick race, class, background and alignment independently at random.

        Name and appearance are left alone.
        """
        rng = rng or random.Random()
        self.race = rng.choice(RACES)
        self.class_type = rng.choice(CLASSES)
        self.background = rng.choice(BACKGROUNDS)
        self.alignment = rng.choice(ALIGNMENTS)

    def appearance_description(self) -> str:
        return render_prompt(APPEARANCE_DESCRIPTION, self.model_dump())

    async def finalize(self, client: GenerativeClient) -> Character:
        """Generate details and portrait, and return the finished Character.

        Raises DraftValidationError for a blank name without calling the client.
        The character is built from the selections as they were when finalize
        was called; edits made while it is generating do not leak in.
        """
        if not self.name.strip():
            raise DraftValidationError(NAME_REQUIRED)

        draft = self.model_copy()
        logger.info("Finalizing character %r (%s %s)", draft.name, draft.race, draft.class_type)
        details = await client.generate_character_details(
            draft.name, draft.race, draft.class_type, draft.background, draft.alignment,
        )
        portrait_url = await client.generate_character_portrait(
            draft.race,
            draft.class_type,
            f"{draft.appearance_description()} {details.backstory[:100]}",
        )

        stats = draft.stats
        return Character(
            name=draft.name,
            race=draft.race,
            class_type=draft.class_type,
            background=draft.background,
            alignment=draft.alignment,
            stats=stats,
            skills=list(details.skills),
            backstory=details.backstory,
            portrait_url=portrait_url,
            hp=stats.VIT * 10,
            max_hp=stats.VIT * 10,
            energy=stats.INT * 10,
            max_energy=stats.INT * 10,
        )
