"""Upload validation and data: URL conversion for user photos."""

import base64
import binascii
import re

from config import settings
from models.requests import UploadedImage
from services.errors import InvalidImage

ACCEPTED_MIME_TYPES = frozenset({"image/png", "image/jpeg", "image/webp"})

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[^,]*)?;base64,(?P<data>.*)$", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


def to_data_url(content: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def validate_upload(filename: str | None, mime_type: str | None, size: int) -> None:
    """Reject unsupported, empty, or oversized uploads."""
    if mime_type not in ACCEPTED_MIME_TYPES:
        raise InvalidImage("Only PNG, JPEG and WEBP images are accepted")
    if size == 0:
        raise InvalidImage(f"Uploaded file '{filename or 'image'}' is empty")
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if size > max_bytes:
        raise InvalidImage(f"File too large. Max size: {settings.max_upload_size_mb}MB")


def load_upload(filename: str | None, mime_type: str | None, content: bytes) -> UploadedImage:
    validate_upload(filename, mime_type, len(content))
    return UploadedImage(
        filename=filename or "image",
        mime_type=mime_type,
        data_url=to_data_url(content, mime_type),
    )


def data_url_mime_type(data_url: str) -> str | None:
    match = _DATA_URL_RE.match(data_url)
    return match.group("mime") if match else None


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    """Split a base64 data: URL into (mime_type, raw bytes)."""
    match = _DATA_URL_RE.match(data_url)
    if not match or not match.group("mime"):
        raise InvalidImage("Image must be a base64 data: URL")
    try:
        content = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError):
        raise InvalidImage("Image data is not valid base64")
    return match.group("mime"), content


def download_filename(title: str) -> str:
    """File name offered when saving a generated image."""
    return f"{_WHITESPACE_RE.sub('_', title)}_career_vision.png"
