"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from voicetidy.domain.models import TranscriptionRequest, TranscriptionResult


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, request: TranscriptionRequest) -> TranscriptionResult:
        """
        Transcribes an audio payload into plain text.

        Args:
            request: Audio payload plus model, language and response format.

        Returns:
            TranscriptionResult with the transcript text.

        Raises:
            TranscriptionError: If transcription fails.
        """
        pass
