"""Handlebars prompt templates for the generative calls."""

from collections.abc import Callable
from typing import Any

import pybars

_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class PromptError(Exception):
    """Raised when a Handlebars template fails to compile or render."""


# ── Templates ────────────────────────────────────────────
# Triple-stash everywhere: prompts are plain text, not HTML.

CHARACTER_DETAILS_PROMPT = """\
Generate a short, compelling backstory (max 80 words) and 3 unique special skills for a character in a Space Opera RPG named "Scholomance".
Character: {{{name}}}, Race: {{{race}}}, Class: {{{class_type}}}, Background: {{{background}}}, Alignment: {{{alignment}}}.

The skills should be creative, powerful, and fit a high-tech anime/sci-fi magic school theme.
Each skill must have a 'statScale' (STR, DEX, INT, CHA, or VIT).
"""

PORTRAIT_PROMPT = """\
Japanese manga style, charismatic, very high level of detail, 8k resolution, masterpiece.
Character portrait of a {{{race}}} {{{class_type}}} in a futuristic sci-fi Scholomance academy setting.
The character should look visually impressive, stylish, and heroic.
{{{description}}}.
Dynamic neon lighting, vibrant colors, clear features.
Upper body shot, detailed face and eyes.
"""

SCENE_IMAGE_PROMPT = """\
Japanese manga style, stunning sci-fi aesthetic, very high level of detail, masterpiece, 8k.
Sci-fi space opera background scenery for the Scholomance Academy.
{{{description}}}.
No text, atmospheric, dramatic lighting, detailed background art, neon cyberpunk accents.
"""

NEXT_SCENE_PROMPT = """\
You are the Game Master (GM) of a Space Opera RPG called Scholomance.
The player is a {{{char.race}}} {{{char.class_type}}} named {{{char.name}}}.

Previous Context:
{{#each history}}{{{role}}}: {{{text}}}
{{/each}}
Player Action: {{{action}}}

Task:
1. Describe the outcome and the new scene (max 60 words). Keep it dramatic, anime-style, engaging and slightly edgy.
2. Provide 3 distinct, short choices for the player's next move.
"""

APPEARANCE_DESCRIPTION = """\
Hair: {{{hair_style}}} ({{{hair_color}}}). Eyes: {{{eye_color}}}. Cybernetics: {{{cybernetics}}}. \
A {{{alignment}}} {{{background}}} character."""


def render_prompt(template_str: str, context: dict[str, Any]) -> str:
    """Compile and render a Handlebars template with the given context.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return str(compiled(context))
    except Exception as e:
        raise PromptError(f"Template error: {e}") from e
