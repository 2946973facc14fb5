"""One generation cycle: compose the request, call Gemini, interpret the answer."""

import logging

from models.responses import GenerationResult
from services import prompt_builder, response_interpreter
from services.errors import GenerationError, UnknownFailure
from services.gemini_client import GeminiImageClient

logger = logging.getLogger(__name__)


class CareerVisionGenerator:
    def __init__(self, client: GeminiImageClient):
        self.client = client

    async def generate(self, image_data: str, mime_type: str, prompt: str = "") -> GenerationResult:
        """Edit the photo toward ``prompt`` (or a model-chosen career) and explain it.

        Raises a GenerationError subclass on any failure; there is no retry.
        """
        if prompt and prompt.strip():
            logger.info("Generating career vision for prompt %r", prompt)
        else:
            logger.info("Generating career vision with model-chosen career")

        parts = prompt_builder.compose_request(image_data, mime_type, prompt)

        try:
            response = await self.client.generate(parts)
            return response_interpreter.interpret(response, prompt)
        except GenerationError as e:
            logger.warning("Generation failed (%s): %s", e.kind, e.message)
            raise
        except Exception as e:
            logger.exception("Gemini API error")
            detail = str(e).strip()
            message = "An unknown error occurred during the API call."
            if detail:
                message = f"{message} ({detail})"
            raise UnknownFailure(message) from e
