"""Turn a Gemini image-edit response into a GenerationResult.

The model is asked for one image and one marked-up Korean text. Neither is
guaranteed, so the interpreter:

1. Rejects responses without candidates (prompt-level block)
2. Picks the last image part and last text part of the first candidate
3. Classifies a missing image/text by safety signal, finish reason, or
   plain incompleteness, in that order
4. Parses the text into a title and description via literal markers

Marker parsing is lenient: when the markers are absent the whole text
becomes the description instead of failing.
"""

import base64
import logging
import re

from google.genai import types

from models.responses import GenerationResult, ParsedAnalysis
from services.errors import AbnormalStop, BlockedRequest, GenerationError, IncompletePayload, SafetyBlocked

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "분석 결과"

_TITLE_RE = re.compile(r"(?:Job Title|직업명):\s*(.*?)\n", re.IGNORECASE)
_REASON_RE = re.compile(r"(?:Reason|이유):\s*(.*)", re.IGNORECASE | re.DOTALL)

_RETRY_HINT = "Please try a different image or prompt."


def _enum_value(value) -> str | None:
    if value is None:
        return None
    return getattr(value, "value", value)


def parse_analysis_text(text: str, prompt: str | None = None) -> ParsedAnalysis:
    """Split the model's text into a title and a description."""
    if prompt and prompt.strip():
        reason = _REASON_RE.search(text)
        description = reason.group(1).strip() if reason else text.strip()
        return ParsedAnalysis(title=prompt, description=description)

    title_match = _TITLE_RE.search(text)
    reason = _REASON_RE.search(text)

    title = title_match.group(1).strip() if title_match else DEFAULT_TITLE
    if reason:
        description = reason.group(1).strip()
    elif title_match:
        description = text.replace(title_match.group(0), "", 1).strip()
    else:
        description = text

    return ParsedAnalysis(title=title, description=description)


def _extract_parts(candidate: types.Candidate) -> tuple[str | None, str | None]:
    """Return (image data URL, text) from the candidate; last part of each kind wins."""
    image = None
    text = None
    parts = candidate.content.parts if candidate.content and candidate.content.parts else []
    for part in parts:
        if part.inline_data is not None and part.inline_data.data:
            encoded = base64.b64encode(part.inline_data.data).decode("ascii")
            image = f"data:{part.inline_data.mime_type};base64,{encoded}"
        elif part.text:
            text = part.text
    return image, text


def _classify_incomplete(candidate: types.Candidate, has_image: bool, has_text: bool) -> GenerationError:
    finish_reason = _enum_value(candidate.finish_reason)
    safety_ratings = candidate.safety_ratings or []

    logger.error(
        "Incomplete response from Gemini: has_image=%s has_text=%s finish_reason=%s safety_ratings=%s",
        has_image,
        has_text,
        finish_reason,
        [(_enum_value(r.category), r.blocked) for r in safety_ratings],
    )

    if finish_reason == types.FinishReason.SAFETY.value:
        return SafetyBlocked(
            "Generation failed due to safety concerns. The model cannot process this request. " + _RETRY_HINT
        )

    blocked = next((r for r in safety_ratings if r.blocked), None)
    if blocked is not None:
        return SafetyBlocked(
            f"Generation failed due to the safety policy for '{_enum_value(blocked.category)}'. " + _RETRY_HINT
        )

    if finish_reason and finish_reason != types.FinishReason.STOP.value:
        return AbnormalStop(f"Generation stopped unexpectedly: {finish_reason}. " + _RETRY_HINT)

    if has_image:
        detail = "The API returned an image but no descriptive text. The model might have failed to generate the analysis part."
    elif has_text:
        detail = "The API returned an analysis but no image. The model might have failed to generate the image part."
    else:
        detail = "API did not return both an image and text. The model may have been unable to fulfill the request."
    return IncompletePayload(f"{detail} Please try again with a different image or prompt.")


def interpret(response: types.GenerateContentResponse, prompt: str | None = None) -> GenerationResult:
    """Build a GenerationResult from the response, or raise a classified GenerationError."""
    if not response.candidates:
        block_reason = _enum_value(response.prompt_feedback.block_reason) if response.prompt_feedback else None
        if block_reason:
            raise BlockedRequest(f"Request blocked: {block_reason}. Please adjust your input.")
        raise BlockedRequest(
            "The request was blocked, likely for safety reasons. " + _RETRY_HINT
        )

    candidate = response.candidates[0]
    image, text = _extract_parts(candidate)

    if not image or not text:
        raise _classify_incomplete(candidate, has_image=bool(image), has_text=bool(text))

    parsed = parse_analysis_text(text, prompt)
    return GenerationResult(image=image, title=parsed.title, description=parsed.description)
