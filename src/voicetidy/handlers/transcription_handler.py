"""Handler for the transcription stage."""

import logging
import time

from voicetidy.domain import AudioArtifact, TranscriptionRequest, TranscriptionResult
from voicetidy.exceptions import TranscriptionError
from voicetidy.infrastructure.interfaces import TranscriptionService

logger = logging.getLogger(__name__)


class TranscriptionHandler:
    """Orchestrates audio-to-transcript operations."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        model: str,
        language: str = "en",
        response_format: str = "text",
    ):
        self._transcription_service = transcription_service
        self._model = model
        self._language = language
        self._response_format = response_format

    def build_request(self, artifact: AudioArtifact) -> TranscriptionRequest:
        """Reads the audio file and wraps it in a TranscriptionRequest."""
        return TranscriptionRequest(
            payload=artifact.path.read_bytes(),
            file_name=artifact.file_name,
            mime_type=artifact.mime_type,
            model=self._model,
            language=self._language,
            response_format=self._response_format,
        )

    def process(self, artifact: AudioArtifact) -> TranscriptionResult:
        """
        Transcribes a validated audio file.

        Args:
            artifact: The audio file returned by the validator.

        Returns:
            TranscriptionResult with the raw transcript.

        Raises:
            TranscriptionError: If reading the file or the provider call fails.
        """
        try:
            request = self.build_request(artifact)
        except OSError as e:
            raise TranscriptionError(artifact.file_name, e) from e

        logger.info(
            "Sending transcription request (%s)",
            self._model,
            extra={"audio_file": artifact.file_name, "model": self._model},
        )
        started = time.perf_counter()

        try:
            result = self._transcription_service.transcribe(request)
        except TranscriptionError:
            raise
        except Exception as e:
            raise TranscriptionError(artifact.file_name, e) from e

        text = result.text or ""
        logger.info(
            "Transcription completed: %d characters in %.2fs",
            len(text),
            time.perf_counter() - started,
            extra={"audio_file": artifact.file_name, "characters": len(text)},
        )

        return TranscriptionResult(text=text)
