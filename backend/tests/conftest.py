"""Shared fixtures: Gemini response builders."""

import pytest
from google.genai import types

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-bytes"


def _build_response(
    parts=None,
    finish_reason=types.FinishReason.STOP,
    safety_ratings=None,
    candidates=True,
    block_reason=None,
):
    prompt_feedback = None
    if block_reason is not None:
        prompt_feedback = types.GenerateContentResponsePromptFeedback(block_reason=block_reason)
    if not candidates:
        return types.GenerateContentResponse(candidates=[], prompt_feedback=prompt_feedback)
    candidate = types.Candidate(
        content=types.Content(role="model", parts=parts or []),
        finish_reason=finish_reason,
        safety_ratings=safety_ratings,
    )
    return types.GenerateContentResponse(candidates=[candidate], prompt_feedback=prompt_feedback)


@pytest.fixture
def make_response():
    """Factory for GenerateContentResponse objects."""
    return _build_response


@pytest.fixture
def image_part():
    def _make(data: bytes = PNG_BYTES, mime_type: str = "image/png") -> types.Part:
        return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))
    return _make


@pytest.fixture
def text_part():
    def _make(text: str) -> types.Part:
        return types.Part(text=text)
    return _make
