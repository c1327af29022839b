"""Prompt builder that turns a render request into the final Gemini prompt."""

from __future__ import annotations

import logging
from dataclasses import asdict
from string import Template

from core.models import RenderRequest
from prompts.templates import FALLBACKS, RENDER_TEMPLATE, SYSTEM_PREFIX

logger = logging.getLogger(__name__)


def resolve_fields(request: RenderRequest) -> dict[str, str]:
    """Return every template field, with fallbacks for the ones left empty."""
    values = asdict(request)
    fields = {
        name: values.get(name) or fallback
        for name, fallback in FALLBACKS.items()
        if name != "description"
    }
    fields["description"] = request.prompt or FALLBACKS["description"]
    return fields


def compose_prompt(
    request: RenderRequest,
    template: Template = RENDER_TEMPLATE,
    system_prefix: str = SYSTEM_PREFIX,
) -> str:
    """Build the render prompt. User text is interpolated verbatim."""
    prompt = template.safe_substitute(system_prefix=system_prefix, **resolve_fields(request))
    logger.debug("Composed prompt for model=%s (%d chars)", request.model, len(prompt))
    return prompt
