"""Tests for Handlebars prompt rendering and the game's templates."""

import pytest

from scholomance.prompts import (
    APPEARANCE_DESCRIPTION,
    NEXT_SCENE_PROMPT,
    PromptError,
    render_prompt,
)


def test_render_simple_variable():
    assert render_prompt("Hello {{name}}!", {"name": "World"}) == "Hello World!"


def test_render_missing_variable():
    assert render_prompt("Hello {{name}}!", {}) == "Hello !"


def test_render_invalid_template():
    with pytest.raises(PromptError):
        render_prompt("{{> missing_partial}}", {})


def test_appearance_not_html_escaped():
    text = render_prompt(APPEARANCE_DESCRIPTION, {
        "hair_style": "Long & Flowing",
        "hair_color": "#06d6e5",
        "eye_color": "#ff00ff",
        "cybernetics": "None",
        "alignment": "True Neutral",
        "background": "Academy Legacy",
    })
    assert "Hair: Long & Flowing (#06d6e5)." in text
    assert "A True Neutral Academy Legacy character." in text


def test_next_scene_lists_history_in_order():
    text = render_prompt(NEXT_SCENE_PROMPT, {
        "char": {"race": "Draconian", "class_type": "Star-Knight", "name": "Vex"},
        "history": [
            {"role": "narrator", "text": "The shuttle lands."},
            {"role": "player", "text": "Step off"},
        ],
        "action": "Step off",
    })
    assert "The player is a Draconian Star-Knight named Vex." in text
    assert text.index("narrator: The shuttle lands.") < text.index("player: Step off")
    assert "Player Action: Step off" in text
