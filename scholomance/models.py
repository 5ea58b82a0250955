"""Core domain models.

The draft, the generative client and the turn engine all exchange these types.
Pydantic is used for validation and serialisation at every data boundary,
including the structured JSON the text model returns.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

StatKey = Literal["STR", "DEX", "INT", "CHA", "VIT"]

SkillType = Literal["Active", "Passive"]

Role = Literal["player", "narrator"]


class Stats(BaseModel):
    """The five core attributes. Always fully populated."""

    model_config = ConfigDict(frozen=True)

    STR: int = Field(ge=0)
    DEX: int = Field(ge=0)
    INT: int = Field(ge=0)
    CHA: int = Field(ge=0)
    VIT: int = Field(ge=0)


class Skill(BaseModel):
    # Accept both the wire name (statScale) and the field name
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    type: SkillType
    stat_scale: StatKey = Field(alias="statScale")


class CharacterDetails(BaseModel):
    """Backstory and skills produced by the text model for a new character."""

    backstory: str = Field(min_length=1)
    skills: list[Skill] = Field(min_length=3)

    @field_validator("skills")
    @classmethod
    def _keep_three(cls, skills: list[Skill]) -> list[Skill]:
        return skills[:3]


class Scene(BaseModel):
    """One narrator response: the new scene and the player's next options."""

    description: str = Field(min_length=1)
    choices: list[str] = Field(min_length=1)


class Character(BaseModel):
    """A finished character. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    name: str
    race: str
    class_type: str
    background: str
    alignment: str
    stats: Stats
    skills: list[Skill]
    backstory: str
    portrait_url: str  # URL or data: URI
    hp: int
    max_hp: int
    energy: int
    max_energy: int

    @computed_field
    @property
    def hp_percent(self) -> float:
        return _percent(self.hp, self.max_hp)

    @computed_field
    @property
    def energy_percent(self) -> float:
        return _percent(self.energy, self.max_energy)


def _percent(current: int, maximum: int) -> float:
    if maximum <= 0:
        return 0.0
    return min(100.0, max(0.0, current / maximum * 100))


class HistoryEntry(BaseModel):
    """A single entry in the append-only turn history."""

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str


class TurnState(BaseModel):
    """Everything the game screen shows. Owned by one TurnEngine."""

    scene_description: str
    scene_image_url: str = ""
    choices: list[str]
    history: list[HistoryEntry] = Field(default_factory=list)
    turn_count: int = 1
    busy: bool = False
