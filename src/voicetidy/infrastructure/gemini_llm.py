"""Gemini LLM service implementation."""

from google import genai

from voicetidy.domain.models import CleanupRequest
from voicetidy.exceptions import CleanupError

from .interfaces import LLMService


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(self, client: genai.Client):
        self._client = client

    def generate(self, request: CleanupRequest) -> str | None:
        """
        Sends the user content to Gemini with the system prompt as the
        system instruction.

        Raises:
            CleanupError: If the Gemini API call fails.
        """
        try:
            response = self._client.models.generate_content(
                model=request.model,
                contents=request.user_content,
                config={
                    "system_instruction": request.system_prompt,
                    "temperature": request.temperature,
                },
            )
        except Exception as e:
            raise CleanupError(request.model, e) from e

        return response.text
