from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.models import RenderRequest
from core.prompt_builder import compose_prompt, resolve_fields
from prompts.templates import FALLBACKS, SYSTEM_PREFIX


def test_all_fallbacks_used_for_empty_request():
    prompt = compose_prompt(RenderRequest())
    for fallback in FALLBACKS.values():
        assert fallback in prompt


def test_supplied_values_replace_fallbacks():
    request = RenderRequest(
        prompt="exploded fairing kit, all parts",
        model="Yamaha YZF-R1",
        year_range="2015–2020",
        style_name="Racing Blue Edition",
        primary_colors="metallic blue + white",
        accents="R1 decals",
        finish="matte carbon",
        brand_logos="Yamaha, R1",
    )
    prompt = compose_prompt(request)

    assert "Motorcycle model: Yamaha YZF-R1" in prompt
    assert "Year range: 2015–2020" in prompt
    assert "Fairing / Style name: Racing Blue Edition" in prompt
    assert "Primary colors: metallic blue + white" in prompt
    assert "Accent decals: R1 decals" in prompt
    assert "Material finish: matte carbon" in prompt
    assert "Brand logos: Yamaha, R1" in prompt
    assert "exploded fairing kit, all parts" in prompt
    assert FALLBACKS["finish"] not in prompt
    assert FALLBACKS["description"] not in prompt


def test_partial_request_mixes_values_and_fallbacks():
    prompt = compose_prompt(RenderRequest(model="Honda CBR600RR", finish="satin black"))
    assert "Motorcycle model: Honda CBR600RR" in prompt
    assert "Material finish: satin black" in prompt
    assert f"Fairing / Style name: {FALLBACKS['style_name']}" in prompt
    assert f"Brand logos: {FALLBACKS['brand_logos']}" in prompt
    assert FALLBACKS["description"] in prompt


def test_prompt_starts_with_system_prefix_and_ends_with_requirements():
    prompt = compose_prompt(RenderRequest(model="Kawasaki ZX-6R"))
    assert SYSTEM_PREFIX in prompt
    assert prompt.index("GLOBAL STYLE RULES") < prompt.index("USER-SPECIFIC MOTORCYCLE DETAILS")
    assert prompt.rstrip().endswith("Only produce ONE final PNG image")


def test_user_text_is_not_escaped_or_substituted():
    prompt = compose_prompt(RenderRequest(prompt="use $finish and ${model} <b>literally</b>"))
    assert "use $finish and ${model} <b>literally</b>" in prompt


def test_composition_is_deterministic():
    request = RenderRequest(model="Suzuki GSX-R750", accents="gold pinstripes")
    assert compose_prompt(request) == compose_prompt(request)


def test_resolve_fields_maps_prompt_to_description():
    fields = resolve_fields(RenderRequest(prompt="tail section only"))
    assert fields["description"] == "tail section only"
    assert fields["model"] == FALLBACKS["model"]
    assert set(fields) == set(FALLBACKS)


def test_system_prefix_keeps_exact_wording():
    assert SYSTEM_PREFIX.startswith("\nYou are a professional motorcycle visualization engine")
    assert "“side view”, “3/4 angle”, “studio shot”, “track bike”." in SYSTEM_PREFIX
    assert "“exploded”, “fairing kit”, “all parts”, \"separate pieces\"." in SYSTEM_PREFIX
    assert "If the user’s intention is unclear:" in SYSTEM_PREFIX
    assert "• Subtle reflections  \n" in SYSTEM_PREFIX
    assert SYSTEM_PREFIX.endswith("premium commercial product image  \n")


def test_prompt_layout_around_system_prefix():
    prompt = compose_prompt(RenderRequest(model="R1"))
    assert prompt.startswith("\n\nYou are a professional")
    assert "product image  \n\n\n-------------------------------------------\nUSER-SPECIFIC" in prompt
    assert prompt.endswith("• Only produce ONE final PNG image  \n")
