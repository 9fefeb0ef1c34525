"""Abstract interface for LLM service operations."""

from abc import ABC, abstractmethod

from voicetidy.domain.models import CleanupRequest


class LLMService(ABC):
    """Abstract base class for text-generation backends."""

    @abstractmethod
    def generate(self, request: CleanupRequest) -> str | None:
        """
        Runs a chat completion and returns the generated text.

        Args:
            request: Model id, role-tagged messages and temperature.

        Returns:
            The content of the first completion, or None if it has none.

        Raises:
            CleanupError: If the LLM call fails.
        """
        pass
