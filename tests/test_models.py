"""Tests for scholomance.models."""

import pytest
from pydantic import ValidationError

from scholomance.models import CharacterDetails, HistoryEntry, Scene, Skill, Stats, TurnState


def _skill(name: str = "Void Strike", stat: str = "STR") -> dict:
    return {"name": name, "description": "x", "type": "Active", "statScale": stat}


class TestSkill:
    def test_wire_name_accepted(self) -> None:
        s = Skill.model_validate(_skill(stat="INT"))
        assert s.stat_scale == "INT"

    def test_field_name_accepted(self) -> None:
        s = Skill(name="Survivor", description="x", type="Passive", stat_scale="VIT")
        assert s.stat_scale == "VIT"

    def test_invalid_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Skill.model_validate({**_skill(), "type": "Reactive"})

    def test_invalid_stat_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Skill.model_validate(_skill(stat="LUK"))


class TestCharacterDetails:
    def test_three_skills(self) -> None:
        d = CharacterDetails.model_validate({
            "backstory": "Born in the void.",
            "skills": [_skill("a"), _skill("b"), _skill("c")],
        })
        assert [s.name for s in d.skills] == ["a", "b", "c"]

    def test_extra_skills_dropped(self) -> None:
        d = CharacterDetails.model_validate({
            "backstory": "Born in the void.",
            "skills": [_skill(n) for n in "abcde"],
        })
        assert [s.name for s in d.skills] == ["a", "b", "c"]

    def test_too_few_skills_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CharacterDetails.model_validate({"backstory": "x", "skills": [_skill()]})

    def test_missing_backstory_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CharacterDetails.model_validate({"skills": [_skill()] * 3})


class TestScene:
    def test_variable_choice_count(self) -> None:
        s = Scene(description="A corridor.", choices=["a", "b", "c", "d"])
        assert len(s.choices) == 4

    def test_empty_choices_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Scene(description="A corridor.", choices=[])

    def test_empty_description_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Scene(description="", choices=["a"])


class TestCharacter:
    def test_frozen(self, character) -> None:
        with pytest.raises(ValidationError):
            character.hp = 1

    def test_percentages(self, character) -> None:
        assert character.hp_percent == 100.0
        assert character.energy_percent == 100.0
        assert character.model_dump()["hp_percent"] == 100.0

    def test_percent_clamped(self, character) -> None:
        hurt = character.model_copy(update={"hp": 50, "energy": -5})
        assert hurt.hp_percent == 100.0
        assert hurt.energy_percent == 0.0

    def test_zero_maximum(self, character) -> None:
        empty = character.model_copy(update={"max_energy": 0})
        assert empty.energy_percent == 0.0


def test_stats_negative_rejected() -> None:
    with pytest.raises(ValidationError):
        Stats(STR=-1, DEX=0, INT=0, CHA=0, VIT=0)


def test_history_role_restricted() -> None:
    assert HistoryEntry(role="narrator", text="x").role == "narrator"
    with pytest.raises(ValidationError):
        HistoryEntry(role="model", text="x")


def test_turn_state_defaults() -> None:
    s = TurnState(scene_description="Intro", choices=["a"])
    assert s.scene_image_url == ""
    assert s.history == []
    assert s.turn_count == 1
    assert s.busy is False
