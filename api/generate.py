"""Vercel serverless entrypoint for fairing render requests.

POST a JSON body with ``prompt`` and/or ``model`` (plus optional styling fields)
and receive ``{"success": true, "imageDataUrl": "data:image/png;base64,..."}``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.config import Settings
from core.models import ResponseEnvelope
from core.pipeline import METHOD_NOT_ALLOWED, RenderPipeline

load_dotenv()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _request_parts(request: Any) -> tuple[str | None, Any]:
    if isinstance(request, Mapping):
        method = request.get("httpMethod") or request.get("method")
        return method, request.get("body")
    return getattr(request, "method", None), getattr(request, "body", None)


def handler(request, settings: Settings | None = None):
    """Vercel Python serverless function handler."""
    method, body = _request_parts(request)
    if method != "POST":
        return ResponseEnvelope.fail(405, METHOD_NOT_ALLOWED).to_response()
    if settings is None:
        try:
            settings = Settings.from_env()
        except ValueError as e:
            logger.error("Invalid render configuration: %s", e)
            return ResponseEnvelope.fail(500, "Invalid server configuration", details=str(e)).to_response()
    envelope = RenderPipeline(settings).handle(method, body)
    return envelope.to_response()
