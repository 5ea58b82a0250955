"""Gemini client: HTTP connection to the generative text/image backend.

The generative client is written against a transport matching the protocol:

    async def generate_json(self, prompt: str, schema: dict) -> Any: ...
    async def generate_image(self, prompt: str) -> str: ...

`generate_json` returns the decoded JSON the text model produced under the
given response schema. `generate_image` returns the first inline image as a
`data:<mime>;base64,<payload>` URI.

Production code constructs a GeminiHTTP from Settings and hands it to the
GenerativeClient. Tests use a stub transport (see conftest.py) instead.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import httpx

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Protocol: every transport must match these signatures
# ---------------------------------------------------------------------------

class GenAI(Protocol):
    async def generate_json(self, prompt: str, schema: dict) -> Any: ...

    async def generate_image(self, prompt: str) -> str: ...


# ---------------------------------------------------------------------------
# GeminiHTTP: connects to the Generative Language REST API
# ---------------------------------------------------------------------------

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


class GeminiHTTP:
    """Async HTTP client for Gemini `generateContent`.

    Text:   POST {api_base}/models/{text_model}:generateContent
            with a JSON response schema; the reply text is parsed as JSON.
    Image:  POST {api_base}/models/{image_model}:generateContent
            Response parts are scanned for the first `inlineData` payload.

    Args:
        api_key:     API credential, sent as the x-goog-api-key header.
        text_model:  Model used for structured text generation.
        image_model: Model used for image generation.
        api_base:    Base URL of the REST API.
        timeout:     HTTP timeout in seconds. Defaults to 120.
    """

    def __init__(
        self,
        api_key: str,
        text_model: str = "gemini-2.5-flash",
        image_model: str = "gemini-2.5-flash-image",
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 120.0,
    ) -> None:
        self._api_key = api_key
        self._text_model = text_model
        self._image_model = image_model
        self._base_url = api_base.rstrip("/")
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json", "x-goog-api-key": self._api_key}

    def _url(self, model: str) -> str:
        return f"{self._base_url}/models/{model}:generateContent"

    async def _post(self, model: str, body: dict) -> dict:
        if not self._api_key:
            raise GenAIError("No API key configured for the generative backend")

        url = self._url(model)
        logger.debug("genai call model=%s url=%s", model, url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(url, json=body, headers=self._headers())
                resp.raise_for_status()
        except httpx.ConnectError as e:
            raise GenAIError(f"Cannot connect to generative backend at {self._base_url}") from e
        except httpx.HTTPStatusError as e:
            raise GenAIError(
                f"Generative backend returned HTTP {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            raise GenAIError(f"Generative backend timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            raise GenAIError(f"Request to generative backend failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise GenAIError("Generative backend returned a non-JSON body") from e
        if not isinstance(data, dict):
            raise GenAIError("Unexpected response format from generative backend")
        return data

    async def generate_json(self, prompt: str, schema: dict) -> Any:
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": schema,
            },
        }
        data = await self._post(self._text_model, body)
        text = "".join(
            part["text"] for part in _parts(data) if isinstance(part.get("text"), str)
        )
        if not text:
            raise GenAIError("No text returned from generative backend")
        try:
            result = json.loads(text)
        except json.JSONDecodeError as e:
            raise GenAIError(f"Generative backend returned invalid JSON: {e}") from e
        logger.debug("genai text response len=%d", len(text))
        return result

    async def generate_image(self, prompt: str) -> str:
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        data = await self._post(self._image_model, body)
        for part in _parts(data):
            inline = part.get("inlineData")
            if isinstance(inline, dict) and isinstance(inline.get("data"), str) and inline["data"]:
                mime = inline.get("mimeType") or "image/png"
                logger.debug("genai image response mime=%s", mime)
                return f"data:{mime};base64,{inline['data']}"
        raise GenAIError("No image data in response")


def _parts(data: dict) -> list[dict]:
    """Content parts of the first candidate, or [] when absent."""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return []
    content = candidates[0].get("content")
    if not isinstance(content, dict):
        return []
    parts = content.get("parts")
    if not isinstance(parts, list):
        return []
    return [p for p in parts if isinstance(p, dict)]


# ---------------------------------------------------------------------------
# GenAIError: raised for all connection, protocol and payload failures
# ---------------------------------------------------------------------------

class GenAIError(RuntimeError):
    """Raised when the generative backend cannot be reached or returns no usable payload."""
