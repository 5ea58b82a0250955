"""Generative client: the game's four calls to the text/image backend.

Capabilities and their failure policy:

  generate_character_details   one attempt, fixed fallback backstory + skills
  generate_image_with_retry    one attempt + one retry with a softened prompt,
                               then the error propagates
  generate_character_portrait  image with retry, fixed placeholder on failure
  generate_scene_image         image with retry, fixed placeholder on failure
  generate_next_scene          one attempt, fixed fallback scene + choices

Every capability runs through resilient_call(); only the image calls retry.
Text responses must validate against the pydantic models or the call failed.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from scholomance.genai import GenAI, GenAIError
from scholomance.models import Character, CharacterDetails, HistoryEntry, Scene, Skill
from scholomance.prompts import (
    CHARACTER_DETAILS_PROMPT,
    NEXT_SCENE_PROMPT,
    PORTRAIT_PROMPT,
    SCENE_IMAGE_PROMPT,
    render_prompt,
)
from scholomance.resilience import resilient_call

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


# ---------------------------------------------------------------------------
# Fallback payloads
# ---------------------------------------------------------------------------

FALLBACK_DETAILS = CharacterDetails(
    backstory="A mysterious transfer student with a redacted file.",
    skills=[
        Skill(name="Void Strike", description="Attacks with cosmic energy.",
              type="Active", stat_scale="STR"),
        Skill(name="Tech Shield", description="Deploys a kinetic barrier.",
              type="Active", stat_scale="INT"),
        Skill(name="Survivor", description="Resilient against harsh environments.",
              type="Passive", stat_scale="VIT"),
    ],
)

FALLBACK_SCENE = Scene(
    description=(
        "The void fluctuates, causing a momentary lapse in reality data. "
        "The path ahead is unclear."
    ),
    choices=["Attempt to recalibrate", "Wait for the glitch to pass", "Proceed with caution"],
)

PORTRAIT_PLACEHOLDER = (
    "https://lh3.googleusercontent.com/aida-public/AB6AXuCLAKx5KilVQ6C2HBWpxyj2eFD3ag0Duo"
    "idnW4L2zf3ROVbYTqHvzG8DLdpqHkBYJVOaTqrSGGkFFVE8am3QXa4y0AlJGYhB2Sr0GTEl1YdCm2DA2Qd1Y"
    "KhVcV6OqDaZAL214j2NCx288CF95gNA12R42C8OQ7yXIIW3EXAyFs41m8F3ivDpJ-XQT2I83_ykyf5Y98aKb"
    "z3phuzVJLjrVerfQT73xizbR8FWlmuOMBK2GRuI7X_M093P4zgps1a353nwGEbl0zGr5Km"
)

SCENE_PLACEHOLDER = (
    "https://lh3.googleusercontent.com/aida-public/AB6AXuBSpMXZpauCMb9Iq8akecPXFGb_05yQxe"
    "Zb7f3oj2gr_9lSH-V8UIbFE1ItN3BhA4DAFBsHxmssYwIQm8a3eAY47W67Wh_fvK-d2FL6Pr5AE0VnNHWkg6"
    "IBmDHvvXpdhckJnb0jtx8I4ozbOVTrIF3BrveS7SDGG9VRYJiZqvrYvH4awyRU7qVfDwPCQkUPX5_lGFIvgz"
    "s55osc-QndtakOI0kKGJ75_J0YEMSA7sVUz0Bdrtqgnf8LKJBxzkw_W-QdirrcIAQVejyy"
)


# ---------------------------------------------------------------------------
# Response schemas (Gemini OpenAPI subset)
# ---------------------------------------------------------------------------

DETAILS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "backstory": {"type": "STRING"},
        "skills": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "name": {"type": "STRING"},
                    "description": {"type": "STRING"},
                    "type": {"type": "STRING", "enum": ["Active", "Passive"]},
                    "statScale": {"type": "STRING", "enum": ["STR", "DEX", "INT", "CHA", "VIT"]},
                },
                "required": ["name", "description", "type", "statScale"],
            },
        },
    },
    "required": ["backstory", "skills"],
}

SCENE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "description": {"type": "STRING"},
        "choices": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["description", "choices"],
}


# ---------------------------------------------------------------------------
# Prompt softening for image retries
# ---------------------------------------------------------------------------

# (phrase, replacement): first occurrence only
SOFTENING_SUBSTITUTIONS: list[tuple[str, str]] = [
    ("Japanese manga style", "Sci-fi art style"),
    ("highly attractive", "heroic"),
    ("stunning", "detailed"),
    ("alluring", "cool"),
    ("intense gaze", "focused look"),
    ("masterpiece, 8k", ""),
]


def soften_prompt(prompt: str) -> str:
    """Swap phrases that tend to trip image moderation for tamer ones."""
    for phrase, replacement in SOFTENING_SUBSTITUTIONS:
        prompt = prompt.replace(phrase, replacement, 1)
    return prompt


# ---------------------------------------------------------------------------
# GenerativeClient
# ---------------------------------------------------------------------------

class GenerativeClient:
    """The game's view of the generative backend.

    Args:
        transport: Anything matching the GenAI protocol (GeminiHTTP in production).
    """

    def __init__(self, transport: GenAI) -> None:
        self._transport = transport

    def _structured(self, model: type[M], schema: dict) -> Callable[[str], Awaitable[M]]:
        """Return a request that generates JSON and validates it as `model`."""

        async def request(prompt: str) -> M:
            data = await self._transport.generate_json(prompt, schema)
            try:
                return model.model_validate(data)
            except ValidationError as e:
                raise GenAIError(f"Response does not match {model.__name__}: {e}") from e

        return request

    async def generate_character_details(
        self,
        name: str,
        race: str,
        class_type: str,
        background: str,
        alignment: str,
    ) -> CharacterDetails:
        prompt = render_prompt(CHARACTER_DETAILS_PROMPT, {
            "name": name,
            "race": race,
            "class_type": class_type,
            "background": background,
            "alignment": alignment,
        })
        return await resilient_call(
            self._structured(CharacterDetails, DETAILS_SCHEMA),
            prompt,
            fallback=FALLBACK_DETAILS,
            label="Character details generation",
        )

    async def generate_image_with_retry(self, prompt: str, retries: int = 1) -> str:
        """Generate an image, softening the prompt before each retry.

        Raises GenAIError once all `retries + 1` attempts have failed.
        """
        return await resilient_call(
            self._transport.generate_image,
            prompt,
            retries=retries,
            mutate=soften_prompt,
            label="Image generation",
        )

    async def generate_character_portrait(self, race: str, class_type: str, description: str) -> str:
        prompt = render_prompt(PORTRAIT_PROMPT, {
            "race": race,
            "class_type": class_type,
            "description": description,
        })
        return await self._image_or_placeholder(prompt, PORTRAIT_PLACEHOLDER, "Portrait generation")

    async def generate_scene_image(self, description: str) -> str:
        prompt = render_prompt(SCENE_IMAGE_PROMPT, {"description": description})
        return await self._image_or_placeholder(prompt, SCENE_PLACEHOLDER, "Scene image generation")

    async def _image_or_placeholder(self, prompt: str, placeholder: str, label: str) -> str:
        return await resilient_call(
            self._transport.generate_image,
            prompt,
            retries=1,
            mutate=soften_prompt,
            fallback=placeholder,
            label=label,
        )

    async def generate_next_scene(
        self,
        history: Sequence[HistoryEntry],
        action: str,
        character: Character,
    ) -> Scene:
        prompt = render_prompt(NEXT_SCENE_PROMPT, {
            "char": character.model_dump(),
            "history": [entry.model_dump() for entry in history],
            "action": action,
        })
        return await resilient_call(
            self._structured(Scene, SCENE_SCHEMA),
            prompt,
            fallback=FALLBACK_SCENE,
            label="Scene generation",
        )
