"""Prompt templates and request composition for the image-edit call."""

import base64
import binascii

from google.genai import types

from services.errors import InvalidImage

REASON_MARKER = "이유:"
JOB_TITLE_MARKER = "직업명:"


def build_career_prompt(career: str) -> str:
    """Instruction for a user-chosen career: edit toward it, explain with 이유:."""
    return f"""You are a creative AI image editor. Your task is to modify the provided photo so the person represents a "{career}", then describe your changes.

CRITICAL INSTRUCTIONS:
1. GENERATE THE IMAGE FIRST: You MUST produce a new image by editing the original to reflect the "{career}" career. This is your primary task. For example, for a 'developer' you could add a laptop showing code.
2. GENERATE THE TEXT SECOND: After the image, you MUST write a description in Korean using exactly this format:
   "{REASON_MARKER} [이미지에서 '{career}' 직업을 표현하기 위해 무엇을 변경했는지 설명하세요.]"

MANDATORY OUTPUT: Your response MUST contain BOTH the generated image AND the text description. Never respond with text only."""


def build_auto_career_prompt() -> str:
    """Instruction when no career is given: pick one, edit, name it, explain."""
    return f"""You are a creative AI image editor. Your task is to choose a suitable career for the person in the provided photo, modify the image to represent that career, then describe your changes.

CRITICAL INSTRUCTIONS:
1. GENERATE THE IMAGE FIRST: You MUST produce a new image. Analyze the person, choose a fitting career, then edit the original to reflect it. This is your primary task. For example, for a 'chef' you could add a kitchen background.
2. GENERATE THE TEXT SECOND: After the image, you MUST write a description in Korean using exactly this format:
   "{JOB_TITLE_MARKER} [선택한 직업]"
   "{REASON_MARKER} [왜 이 직업을 선택했고 이미지에서 무엇을 변경했는지 설명하세요.]"

MANDATORY OUTPUT: Your response MUST contain BOTH the generated image AND the text description. Never respond with text only."""


def strip_data_url(image_data: str) -> str:
    """Drop the ``data:<mime>;base64,`` prefix, keeping what follows the first comma."""
    _, sep, payload = image_data.partition(",")
    return payload if sep else image_data


def compose_request(image_data: str, mime_type: str, prompt: str | None = None) -> list[types.Part]:
    """Build the two-part payload: image first, instruction second."""
    try:
        raw = base64.b64decode(strip_data_url(image_data), validate=True)
    except (binascii.Error, ValueError):
        raise InvalidImage("The uploaded image could not be decoded. Please upload a PNG, JPEG or WEBP file.")
    if not raw:
        raise InvalidImage("The uploaded image is empty.")

    prompt = (prompt or "").strip()
    instruction = build_career_prompt(prompt) if prompt else build_auto_career_prompt()

    return [
        types.Part.from_bytes(data=raw, mime_type=mime_type),
        types.Part.from_text(text=instruction),
    ]
