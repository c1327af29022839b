"""Render pipeline: validate the request, compose the prompt, call Gemini, map the reply."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import Settings
from core.models import (
    ImageFound,
    Malformed,
    RenderRequest,
    ResponseEnvelope,
    TextFound,
    UpstreamResult,
)
from core.prompt_builder import compose_prompt
from core.providers import GeminiImageClient, UpstreamError
from core.response_parser import parse_generate_content

logger = logging.getLogger(__name__)

MAX_DETAIL_TEXT = 2000

METHOD_NOT_ALLOWED = "Method not allowed"
MISSING_FIELDS = "Missing prompt or model information"
MISSING_API_KEY = "GEMINI_API_KEY is not configured"
UPSTREAM_FAILED = "Gemini API failed"
TEXT_INSTEAD_OF_IMAGE = (
    "Gemini API does not support direct image generation. "
    "Consider using Google Imagen API or another image generation service."
)
NO_IMAGE_DATA = "No image data returned from Gemini API"
INTERNAL_ERROR = "Internal server error"


def map_result(result: UpstreamResult) -> ResponseEnvelope:
    """Turn a parsed upstream result into the caller-facing envelope."""
    if isinstance(result, ImageFound):
        return ResponseEnvelope.ok(result.data_url)

    if isinstance(result, TextFound):
        logger.error("Gemini returned text instead of image: %.200s", result.text)
        return ResponseEnvelope.fail(
            500,
            TEXT_INSTEAD_OF_IMAGE,
            details={
                "text": result.text[:MAX_DETAIL_TEXT],
                "candidateCount": result.candidate_count,
                "partKeys": list(result.part_keys),
            },
        )

    if isinstance(result, Malformed):
        logger.warning("Unusable Gemini response: %s", result.reason)
        return ResponseEnvelope.fail(
            500,
            NO_IMAGE_DATA,
            details={"reason": result.reason, "response": result.payload},
        )

    raise TypeError(f"Unexpected upstream result: {type(result).__name__}")


class RenderPipeline:
    """Handles one render request end to end. Holds no per-request state."""

    def __init__(self, settings: Settings, http: httpx.Client | None = None) -> None:
        self.settings = settings
        self.http = http

    def handle(self, method: str | None, body: Any) -> ResponseEnvelope:
        if method != "POST":
            return ResponseEnvelope.fail(405, METHOD_NOT_ALLOWED)

        if not self.settings.has_api_key:
            logger.error("Render rejected: no Gemini API key configured")
            return ResponseEnvelope.fail(500, MISSING_API_KEY)

        try:
            return self._render(body)
        except UpstreamError as e:
            logger.error("Gemini call failed with HTTP %d", e.status_code)
            return ResponseEnvelope.fail(502, UPSTREAM_FAILED, details=e.body)
        except Exception as e:
            logger.exception("Render failed")
            return ResponseEnvelope.fail(500, INTERNAL_ERROR, details=str(e))

    def _render(self, body: Any) -> ResponseEnvelope:
        request = RenderRequest.from_body(body)
        if not request.is_complete:
            return ResponseEnvelope.fail(400, MISSING_FIELDS)

        prompt = compose_prompt(request)
        client = GeminiImageClient(self.settings, http=self.http)
        data = client.generate_content(prompt)
        return map_result(parse_generate_content(data))
