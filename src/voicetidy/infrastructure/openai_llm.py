"""OpenAI chat-completions implementation of the LLMService interface."""

from openai import OpenAI

from voicetidy.domain.models import CleanupRequest
from voicetidy.exceptions import CleanupError

from .interfaces import LLMService


class OpenAILLMService(LLMService):
    """LLM service implementation using OpenAI chat completions."""

    def __init__(self, client: OpenAI):
        self._client = client

    def generate(self, request: CleanupRequest) -> str | None:
        """
        Sends the conversation to OpenAI and returns the first completion.

        Raises:
            CleanupError: If the OpenAI API call fails.
        """
        try:
            response = self._client.chat.completions.create(
                model=request.model,
                messages=[m.model_dump() for m in request.messages],
                temperature=request.temperature,
            )
        except Exception as e:
            raise CleanupError(request.model, e) from e

        if not response.choices:
            return None
        message = response.choices[0].message
        return message.content if message is not None else None
