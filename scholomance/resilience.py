"""Retry-then-fallback wrapper shared by every generative capability."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from scholomance.genai import GenAIError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NO_FALLBACK: Any = object()


async def resilient_call(
    request: Callable[[str], Awaitable[T]],
    prompt: str,
    *,
    retries: int = 0,
    mutate: Callable[[str], str] | None = None,
    fallback: T = _NO_FALLBACK,
    label: str = "generative call",
) -> T:
    """Run `request(prompt)`, retrying and then falling back on GenAIError.

    Each retry first passes the prompt through `mutate` (when given); there
    is no delay between attempts, so at most `retries + 1` requests are made.
    Once the budget is spent the fallback is returned, or the last error is
    re-raised when no fallback was supplied.
    """
    attempt = prompt
    while True:
        try:
            return await request(attempt)
        except GenAIError as e:
            if retries > 0:
                retries -= 1
                logger.warning("%s failed, retrying with adjusted prompt: %s", label, e)
                if mutate is not None:
                    attempt = mutate(attempt)
                continue
            if fallback is _NO_FALLBACK:
                raise
            logger.error("%s failed, using fallback: %s", label, e)
            return fallback
