"""Runtime settings for the render handler, resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from core.models import ResponseFormat
from core.providers import resolve_api_key

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com"
DEFAULT_API_VERSION = "v1"
DEFAULT_MODEL = "gemini-pro"
DEFAULT_TIMEOUT_S = 60.0

API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY")


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    api_version: str = DEFAULT_API_VERSION
    api_base: str = DEFAULT_API_BASE
    response_format: ResponseFormat = ResponseFormat.NONE
    timeout_s: float = DEFAULT_TIMEOUT_S

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        base = self.api_base.rstrip("/")
        return f"{base}/{self.api_version}/models/{self.model}:generateContent"

    @classmethod
    def from_env(cls, api_key: str | None = None) -> Settings:
        """Build settings from environment variables.

        An explicit ``api_key`` wins over ``GEMINI_API_KEY``/``GOOGLE_API_KEY``.
        A missing key is not an error here; the handler reports it per request.
        """
        raw_format = os.environ.get("GEMINI_RESPONSE_FORMAT", "").strip().lower() or "none"
        try:
            response_format = ResponseFormat(raw_format)
        except ValueError:
            valid = [f.value for f in ResponseFormat]
            raise ValueError(
                f"Unknown GEMINI_RESPONSE_FORMAT: {raw_format}. Available: {valid}"
            ) from None

        raw_timeout = os.environ.get("GEMINI_TIMEOUT_S", "").strip()
        try:
            timeout_s = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_S
        except ValueError:
            raise ValueError(f"GEMINI_TIMEOUT_S must be a number, got {raw_timeout!r}") from None

        return cls(
            api_key=resolve_api_key(api_key, *API_KEY_ENV_VARS),
            model=os.environ.get("GEMINI_IMAGE_MODEL", "").strip() or DEFAULT_MODEL,
            api_version=os.environ.get("GEMINI_API_VERSION", "").strip() or DEFAULT_API_VERSION,
            api_base=os.environ.get("GEMINI_API_BASE", "").strip() or DEFAULT_API_BASE,
            response_format=response_format,
            timeout_s=timeout_s,
        )
