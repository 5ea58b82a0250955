"""Turn engine: the game loop for one character.

Turn flow (submit_action):
  1. Refuse if a turn is already in flight (busy).
  2. Capture the history pair: narrator's current scene, then the player's action.
  3. Ask the generative client for the next scene.
  4. On success: replace scene + choices, commit the history, bump turn_count,
     and schedule a background scene-image refresh.
     On failure: leave every field as it was.
  5. Clear busy.

Scene images arrive asynchronously. Each refresh is tagged with the turn it
was requested for and is dropped if the game has moved on by the time it
resolves, so a slow image from turn N never replaces the image of turn N+1.
"""

from __future__ import annotations

import asyncio
import logging

from scholomance.generative import GenerativeClient
from scholomance.models import Character, HistoryEntry, TurnState

logger = logging.getLogger(__name__)

INTRO_SCENE = (
    "You step off the transport shuttle onto the obsidian landing platform of "
    "Scholomance. The massive academy floats in the void, tethered to a dying star. "
    "Other cadets surround you, a mix of anxiety and arrogance on their faces."
)

INTRO_CHOICES = [
    "Look for the registration desk",
    "Inspect the other cadets",
    "Commune with the void",
]

LANDING_IMAGE_DESCRIPTION = (
    "Scholomance academy landing platform, space opera, floating in void near "
    "dying star, anime style"
)


class EngineBusyError(RuntimeError):
    """Raised when an action is submitted while another is still resolving."""


class TurnEngine:
    def __init__(self, character: Character, client: GenerativeClient) -> None:
        self.character = character
        self._client = client
        self.state = TurnState(
            scene_description=INTRO_SCENE,
            choices=list(INTRO_CHOICES),
        )
        self._image_tasks: set[asyncio.Task] = set()
        self._started = False

    @property
    def busy(self) -> bool:
        return self.state.busy

    def start(self) -> None:
        """Kick off the landing-platform image. Only the first call does anything."""
        if self._started:
            return
        self._started = True
        self._schedule_image(LANDING_IMAGE_DESCRIPTION)

    async def submit_action(self, action: str) -> bool:
        """Resolve one player action. Returns True if the scene advanced."""
        if self.state.busy:
            raise EngineBusyError("A turn is already in progress")
        self.state.busy = True

        history = [
            *self.state.history,
            HistoryEntry(role="narrator", text=self.state.scene_description),
            HistoryEntry(role="player", text=action),
        ]

        try:
            scene = await self._client.generate_next_scene(history, action, self.character)
        except Exception:
            logger.exception("Turn %d failed; scene left unchanged", self.state.turn_count)
            return False
        finally:
            # Also on cancellation
            self.state.busy = False

        logger.info("Turn %d resolved for %s", self.state.turn_count, self.character.name)
        self.state.scene_description = scene.description
        self.state.choices = list(scene.choices)
        self.state.history = history
        self.state.turn_count += 1

        self._schedule_image(scene.description)
        return True

    # ── Background scene images ──────────────────────────

    def _schedule_image(self, description: str) -> None:
        task = asyncio.create_task(self._refresh_image(description, self.state.turn_count))
        self._image_tasks.add(task)
        task.add_done_callback(self._image_tasks.discard)

    async def _refresh_image(self, description: str, epoch: int) -> None:
        try:
            image = await self._client.generate_scene_image(description)
        except Exception:
            logger.exception("Scene image refresh for turn %d failed", epoch)
            return
        if epoch != self.state.turn_count:
            logger.debug("Discarding stale image for turn %d (now turn %d)",
                         epoch, self.state.turn_count)
            return
        if image:
            self.state.scene_image_url = image

    async def wait_for_images(self) -> None:
        """Wait until every scheduled image refresh has finished."""
        while self._image_tasks:
            await asyncio.gather(*list(self._image_tasks), return_exceptions=True)

    def close(self) -> None:
        """Cancel outstanding image refreshes."""
        for task in list(self._image_tasks):
            task.cancel()
