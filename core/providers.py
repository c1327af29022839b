"""Gemini generateContent client used to request fairing renders."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

import httpx

from core.models import ResponseFormat

if TYPE_CHECKING:
    from core.config import Settings

logger = logging.getLogger(__name__)

GENERATION_CONFIGS: dict[ResponseFormat, dict[str, Any]] = {
    ResponseFormat.NONE: {},
    ResponseFormat.MIME_TYPE: {"responseMimeType": "image/png"},
    ResponseFormat.MODALITIES: {"responseModalities": ["TEXT", "IMAGE"]},
}


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if given, else the first non-empty env var."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


class UpstreamError(RuntimeError):
    """The image API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Gemini API returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class GeminiImageClient:
    """Issues a single generateContent call per render request."""

    provider_name = "gemini"

    def __init__(self, settings: Settings, http: httpx.Client | None = None) -> None:
        if not settings.has_api_key:
            raise ValueError(
                "Gemini API key is required. Set GEMINI_API_KEY or pass api_key."
            )
        self.settings = settings
        self._http = http

    def build_payload(self, prompt: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ]
        }
        generation_config = GENERATION_CONFIGS[self.settings.response_format]
        if generation_config:
            payload["generationConfig"] = dict(generation_config)
        return payload

    def generate_content(self, prompt: str) -> Any:
        """POST the prompt and return the decoded JSON response.

        Raises ``UpstreamError`` with the raw body on a non-2xx status.
        """
        logger.info(
            "Requesting render via Gemini model=%s format=%s",
            self.settings.model,
            self.settings.response_format.value,
        )
        if self._http is not None:
            resp = self._post(self._http, prompt)
        else:
            with httpx.Client(timeout=self.settings.timeout_s) as http:
                resp = self._post(http, prompt)

        if not resp.is_success:
            raise UpstreamError(resp.status_code, resp.text)
        return resp.json()

    def _post(self, http: httpx.Client, prompt: str) -> httpx.Response:
        return http.post(
            self.settings.endpoint,
            params={"key": self.settings.api_key},
            json=self.build_payload(prompt),
            timeout=self.settings.timeout_s,
        )
