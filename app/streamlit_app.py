"""Streamlit preview for fairing renders.

Runs the same render pipeline as the serverless handler so operators can try
prompts, models and response formats locally before deploying.
"""

from __future__ import annotations

import base64
import dataclasses
import logging
import os
import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.config import Settings
from core.models import REQUEST_FIELDS, RenderRequest, ResponseFormat
from core.pipeline import RenderPipeline
from core.prompt_builder import compose_prompt
from prompts.templates import FALLBACKS

load_dotenv()
logging.basicConfig(level=logging.INFO)

st.set_page_config(
    page_title="Fairing Render Preview",
    layout="wide",
    initial_sidebar_state="expanded",
)

FIELD_LABELS: dict[str, str] = {
    "model": "Motorcycle model",
    "yearRange": "Year range",
    "styleName": "Fairing / style name",
    "primaryColors": "Primary colors",
    "accents": "Accent decals",
    "finish": "Material finish",
    "brandLogos": "Brand logos",
}

# ============================================================================
# Sidebar: upstream configuration
# ============================================================================

with st.sidebar:
    st.markdown("### Configuration")

    api_key = st.text_input(
        "Gemini API Key",
        value="",
        type="password",
        help="Optional: leave blank to use GEMINI_API_KEY or GOOGLE_API_KEY from your environment/.env.",
    )
    if api_key:
        st.caption("Using Gemini key from sidebar input.")
    elif os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY"):
        st.caption("Using Gemini key from environment (.env).")

    try:
        base_settings = Settings.from_env(api_key=api_key)
    except ValueError as e:
        st.error(str(e))
        st.stop()

    gemini_model = st.text_input("Gemini model", value=base_settings.model)
    formats = [f.value for f in ResponseFormat]
    response_format = st.selectbox(
        "Response format",
        options=formats,
        index=formats.index(base_settings.response_format.value),
        help="none: plain request; mime_type: ask for image/png; modalities: ask for TEXT + IMAGE parts.",
    )
    timeout_s = st.number_input("Timeout (s)", min_value=5.0, max_value=300.0, value=base_settings.timeout_s)

settings = dataclasses.replace(
    base_settings,
    model=gemini_model.strip() or base_settings.model,
    response_format=ResponseFormat(response_format),
    timeout_s=float(timeout_s),
)

# ============================================================================
# Render form
# ============================================================================

st.title("Fairing Render Preview")

with st.form("render"):
    col1, col2 = st.columns(2)
    body: dict[str, str] = {}
    for idx, (key, label) in enumerate(FIELD_LABELS.items()):
        target = col1 if idx % 2 == 0 else col2
        body[key] = target.text_input(label, placeholder=FALLBACKS[REQUEST_FIELDS[key]])
    body["prompt"] = st.text_area("Description", placeholder=FALLBACKS["description"])
    submitted = st.form_submit_button("Render", type="primary")

if submitted:
    request = RenderRequest.from_body(body)
    with st.expander("Composed prompt"):
        st.code(compose_prompt(request), language=None)

    with st.spinner("Rendering via Gemini..."):
        envelope = RenderPipeline(settings).handle("POST", body)

    if envelope.success:
        _, encoded = envelope.image_data_url.split(",", 1)
        st.image(base64.b64decode(encoded), caption=request.style_name or request.model)
    else:
        st.error(f"HTTP {envelope.status_code}: {envelope.error}")
        if isinstance(envelope.details, str):
            st.code(envelope.details, language=None)
        elif envelope.details is not None:
            st.json(envelope.details)
