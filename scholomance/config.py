"""Process configuration read from the environment (and .env via python-dotenv)."""

import os
from collections.abc import Mapping

from pydantic import BaseModel

from scholomance.genai import DEFAULT_API_BASE, GeminiHTTP


class Settings(BaseModel):
    api_key: str = ""
    api_base: str = DEFAULT_API_BASE
    text_model: str = "gemini-2.5-flash"
    image_model: str = "gemini-2.5-flash-image"
    timeout: float = 120.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables; unset ones keep defaults.

        GEMINI_API_KEY wins over the generic API_KEY.
        """
        env = os.environ if env is None else env
        fields: dict[str, str] = {}
        api_key = env.get("GEMINI_API_KEY") or env.get("API_KEY")
        if api_key:
            fields["api_key"] = api_key
        for var, name in (
            ("GEMINI_API_BASE", "api_base"),
            ("TEXT_MODEL", "text_model"),
            ("IMAGE_MODEL", "image_model"),
            ("GENAI_TIMEOUT", "timeout"),
            ("LOG_LEVEL", "log_level"),
        ):
            if env.get(var):
                fields[name] = env[var]
        return cls.model_validate(fields)

    def transport(self) -> GeminiHTTP:
        return GeminiHTTP(
            api_key=self.api_key,
            text_model=self.text_model,
            image_model=self.image_model,
            api_base=self.api_base,
            timeout=self.timeout,
        )
