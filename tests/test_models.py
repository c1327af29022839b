from pathlib import Path
import json
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.models import RenderRequest, ResponseEnvelope


def test_from_body_maps_camel_case_fields():
    request = RenderRequest.from_body({
        "prompt": "side panel only",
        "model": "Ducati Panigale V4",
        "yearRange": "2018–2022",
        "styleName": "Corsa",
        "primaryColors": "red",
        "accents": "white stripes",
        "finish": "gloss",
        "brandLogos": "Ducati",
        "ignored": "value",
    })
    assert request == RenderRequest(
        prompt="side panel only",
        model="Ducati Panigale V4",
        year_range="2018–2022",
        style_name="Corsa",
        primary_colors="red",
        accents="white stripes",
        finish="gloss",
        brand_logos="Ducati",
    )


def test_from_body_accepts_json_string_and_bytes():
    raw = json.dumps({"model": "BMW S1000RR"})
    assert RenderRequest.from_body(raw).model == "BMW S1000RR"
    assert RenderRequest.from_body(raw.encode("utf-8")).model == "BMW S1000RR"


@pytest.mark.parametrize("body", [None, "", "   ", [], "[1, 2]", "42"])
def test_from_body_treats_non_objects_as_empty(body):
    request = RenderRequest.from_body(body)
    assert request == RenderRequest()
    assert request.is_complete is False


def test_from_body_rejects_invalid_json_text():
    with pytest.raises(json.JSONDecodeError):
        RenderRequest.from_body("{not json")


def test_empty_strings_count_as_absent_and_scalars_are_stringified():
    request = RenderRequest.from_body({"prompt": "", "model": "", "yearRange": 2019})
    assert request.prompt is None
    assert request.model is None
    assert request.year_range == "2019"
    assert request.is_complete is False


def test_either_prompt_or_model_completes_request():
    assert RenderRequest(prompt="anything").is_complete
    assert RenderRequest(model="anything").is_complete


def test_envelope_omits_unset_keys():
    assert ResponseEnvelope.ok("data:image/png;base64,QQ==").to_dict() == {
        "success": True,
        "imageDataUrl": "data:image/png;base64,QQ==",
    }
    assert ResponseEnvelope.fail(405, "Method not allowed").to_dict() == {
        "success": False,
        "error": "Method not allowed",
    }


def test_envelope_to_response_serializes_body():
    response = ResponseEnvelope.fail(502, "Gemini API failed", details="boom").to_response()
    assert response["statusCode"] == 502
    assert response["headers"] == {"content-type": "application/json"}
    assert json.loads(response["body"]) == {
        "success": False,
        "error": "Gemini API failed",
        "details": "boom",
    }
