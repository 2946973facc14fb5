"""Google Gemini image-edit client."""

import logging

from google import genai
from google.genai import types

from config import settings
from services.errors import MissingCredential

logger = logging.getLogger(__name__)

_client: "GeminiImageClient | None" = None


class GeminiImageClient:
    """Thin wrapper over ``genai.Client`` for one-shot image+text generation.

    The API key is injected explicitly; construction fails when it is missing
    so an unconfigured service never reaches the network.
    """

    def __init__(self, api_key: str, model: str | None = None):
        if not api_key:
            raise MissingCredential("GEMINI_API_KEY environment variable is not set")
        self.model = model or settings.gemini_image_model
        self._genai = genai.Client(api_key=api_key)

    async def generate(self, parts: list[types.Part]) -> types.GenerateContentResponse:
        """Send the composed parts and return the raw response. Single attempt."""
        return await self._genai.aio.models.generate_content(
            model=self.model,
            contents=types.Content(role="user", parts=parts),
            config=types.GenerateContentConfig(
                response_modalities=[types.Modality.IMAGE, types.Modality.TEXT],
            ),
        )


def get_client() -> GeminiImageClient:
    global _client
    if _client is None:
        if not settings.gemini_api_key:
            logger.warning("No GEMINI_API_KEY set - generation disabled")
        _client = GeminiImageClient(api_key=settings.gemini_api_key)
    return _client
