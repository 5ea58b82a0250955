import pytest

from scholomance.generative import GenerativeClient
from scholomance.genai import GenAIError
from scholomance.models import Character, Skill, Stats


class StubGenAI:
    """Scripted transport. Replies are consumed in order; an exception in the
    queue is raised instead of returned, and an empty queue fails the call."""

    def __init__(self) -> None:
        self.json_replies: list = []
        self.image_replies: list = []
        self.json_prompts: list[str] = []
        self.image_prompts: list[str] = []

    async def generate_json(self, prompt: str, schema: dict):
        self.json_prompts.append(prompt)
        return self._next(self.json_replies)

    async def generate_image(self, prompt: str) -> str:
        self.image_prompts.append(prompt)
        return self._next(self.image_replies)

    @staticmethod
    def _next(queue: list):
        if not queue:
            raise GenAIError("no scripted reply")
        reply = queue.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def genai() -> StubGenAI:
    return StubGenAI()


@pytest.fixture
def client(genai: StubGenAI) -> GenerativeClient:
    return GenerativeClient(genai)


@pytest.fixture
def character() -> Character:
    stats = Stats(STR=3, DEX=10, INT=8, CHA=4, VIT=4)
    return Character(
        name="Kira",
        race="Cyber-Elf",
        class_type="Tech-Rogue",
        background="Slum Survivor",
        alignment="Chaotic Good",
        stats=stats,
        skills=[
            Skill(name="Ghost Step", description="Vanish from sensors.",
                  type="Active", stat_scale="DEX"),
            Skill(name="Backdoor", description="Opens any lock.",
                  type="Active", stat_scale="INT"),
            Skill(name="Street Sense", description="Never caught off guard.",
                  type="Passive", stat_scale="CHA"),
        ],
        backstory="Raised in the undercity of a derelict ring station.",
        portrait_url="data:image/png;base64,AAAA",
        hp=40,
        max_hp=40,
        energy=80,
        max_energy=80,
    )
