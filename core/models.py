"""Data models for the fairing render API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class ResponseFormat(str, Enum):
    NONE = "none"
    MIME_TYPE = "mime_type"
    MODALITIES = "modalities"


# Request body key -> RenderRequest attribute
REQUEST_FIELDS: dict[str, str] = {
    "prompt": "prompt",
    "model": "model",
    "yearRange": "year_range",
    "styleName": "style_name",
    "primaryColors": "primary_colors",
    "accents": "accents",
    "finish": "finish",
    "brandLogos": "brand_logos",
}


def _clean(value: Any) -> str | None:
    if value is None or value == "" or value is False:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass
class RenderRequest:
    prompt: str | None = None
    model: str | None = None
    year_range: str | None = None
    style_name: str | None = None
    primary_colors: str | None = None
    accents: str | None = None
    finish: str | None = None
    brand_logos: str | None = None

    @classmethod
    def from_body(cls, body: Any) -> RenderRequest:
        """Build a request from a parsed body, a JSON string or raw bytes.

        Anything that does not decode to a JSON object yields an empty request.
        Invalid JSON text raises ``json.JSONDecodeError``.
        """
        if isinstance(body, (bytes, bytearray)):
            body = body.decode("utf-8")
        if isinstance(body, str):
            body = json.loads(body) if body.strip() else {}
        if not isinstance(body, dict):
            body = {}
        return cls(**{attr: _clean(body.get(key)) for key, attr in REQUEST_FIELDS.items()})

    @property
    def is_complete(self) -> bool:
        return bool(self.prompt or self.model)


# --- Tagged results of parsing a generateContent response ---


@dataclass(frozen=True)
class ImageFound:
    data: str
    mime_type: str = "image/png"

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


@dataclass(frozen=True)
class TextFound:
    text: str
    candidate_count: int = 0
    part_keys: tuple[str, ...] = ()


@dataclass(frozen=True)
class Malformed:
    reason: str
    payload: Any = None


UpstreamResult = Union[ImageFound, TextFound, Malformed]


@dataclass
class ResponseEnvelope:
    success: bool
    status_code: int = 200
    image_data_url: str | None = None
    error: str | None = None
    details: Any = None
    headers: dict[str, str] = field(default_factory=lambda: {"content-type": "application/json"})

    @classmethod
    def ok(cls, image_data_url: str) -> ResponseEnvelope:
        return cls(success=True, image_data_url=image_data_url)

    @classmethod
    def fail(cls, status_code: int, error: str, details: Any = None) -> ResponseEnvelope:
        return cls(success=False, status_code=status_code, error=error, details=details)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON body, omitting keys that are not set."""
        body: dict[str, Any] = {"success": self.success}
        if self.image_data_url is not None:
            body["imageDataUrl"] = self.image_data_url
        if self.error is not None:
            body["error"] = self.error
        if self.details is not None:
            body["details"] = self.details
        return body

    def to_response(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": json.dumps(self.to_dict()),
        }
