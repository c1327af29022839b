"""Tolerant parser for Gemini generateContent responses."""

from __future__ import annotations

from typing import Any

from core.models import ImageFound, Malformed, TextFound, UpstreamResult

DEFAULT_MIME_TYPE = "image/png"


def _first_candidate_parts(data: Any) -> tuple[list[Any] | None, int, str]:
    if not isinstance(data, dict):
        return None, 0, "response is not a JSON object"

    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None, 0, "response has no candidates"

    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return None, len(candidates), "first candidate has no content parts"
    return parts, len(candidates), ""


def parse_generate_content(data: Any) -> UpstreamResult:
    """Classify a response as an inline image, a text reply, or neither.

    Only the first candidate is inspected. An image part wins over a text
    part regardless of order.
    """
    parts, candidate_count, reason = _first_candidate_parts(data)
    if parts is None:
        return Malformed(reason=reason, payload=data)

    for part in parts:
        inline = part.get("inlineData") if isinstance(part, dict) else None
        if isinstance(inline, dict) and inline.get("data"):
            return ImageFound(
                data=str(inline["data"]),
                mime_type=inline.get("mimeType") or DEFAULT_MIME_TYPE,
            )

    for part in parts:
        text = part.get("text") if isinstance(part, dict) else None
        if text:
            part_keys = tuple(
                sorted({key for p in parts if isinstance(p, dict) for key in p})
            )
            return TextFound(
                text=str(text),
                candidate_count=candidate_count,
                part_keys=part_keys,
            )

    return Malformed(reason="no inline image or text part", payload=data)
