"""Tests for request composition."""

import base64

import pytest
from google.genai import types

from services.errors import InvalidImage
from services.prompt_builder import (
    build_auto_career_prompt,
    build_career_prompt,
    compose_request,
    strip_data_url,
)

RAW = b"\x89PNG\r\n\x1a\nhello"
DATA_URL = "data:image/png;base64," + base64.b64encode(RAW).decode()


def test_two_parts_in_order_with_prompt():
    parts = compose_request(DATA_URL, "image/png", "Chef")
    assert len(parts) == 2
    assert parts[0].inline_data is not None
    assert parts[0].inline_data.data == RAW
    assert parts[0].inline_data.mime_type == "image/png"
    assert parts[1].text is not None
    assert parts[1].inline_data is None


def test_prompt_template_has_reason_marker_only():
    text = compose_request(DATA_URL, "image/png", "Astronaut")[1].text
    assert "이유:" in text
    assert "직업명:" not in text
    assert '"Astronaut"' in text
    assert "BOTH the generated image AND the text" in text


@pytest.mark.parametrize("prompt", [None, "", "   "])
def test_auto_template_has_both_markers(prompt):
    text = compose_request(DATA_URL, "image/jpeg", prompt)[1].text
    assert text.index("직업명:") < text.index("이유:")
    assert "BOTH the generated image AND the text" in text


def test_mime_type_passed_through():
    parts = compose_request(DATA_URL, "image/webp", "")
    assert parts[0].inline_data.mime_type == "image/webp"


def test_strip_data_url():
    assert strip_data_url("data:image/png;base64,QUJD") == "QUJD"
    assert strip_data_url("QUJD") == "QUJD"


def test_bare_base64_payload_accepted():
    parts = compose_request(base64.b64encode(RAW).decode(), "image/png")
    assert parts[0].inline_data.data == RAW


def test_invalid_base64_rejected():
    with pytest.raises(InvalidImage):
        compose_request("data:image/png;base64,not base64!!", "image/png", "Chef")


def test_empty_payload_rejected():
    with pytest.raises(InvalidImage):
        compose_request("data:image/png;base64,", "image/png", "Chef")


def test_templates_are_distinct():
    assert build_career_prompt("Pilot") != build_auto_career_prompt()
    assert isinstance(compose_request(DATA_URL, "image/png")[1], types.Part)
