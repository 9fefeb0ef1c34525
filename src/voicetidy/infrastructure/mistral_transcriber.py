"""Mistral implementation of the TranscriptionService interface."""

import logging

from mistralai import Mistral

from voicetidy.domain.models import TranscriptionRequest, TranscriptionResult
from voicetidy.exceptions import TranscriptionError

from .interfaces import TranscriptionService

logger = logging.getLogger(__name__)

SPEECH_MODEL_MARKERS = ("whisper", "voxtral")


def is_speech_model(model_id: str) -> bool:
    return any(marker in model_id for marker in SPEECH_MODEL_MARKERS)


class MistralTranscriber(TranscriptionService):
    """Handles audio transcription using Mistral's Voxtral models."""

    def __init__(self, client: Mistral):
        self._client = client

    def transcribe(self, request: TranscriptionRequest) -> TranscriptionResult:
        """
        Uploads the audio payload to Mistral and returns the transcript.

        The SDK always answers with a JSON body whose ``text`` field is the
        plain transcript, so ``request.response_format`` needs no mapping.
        """
        try:
            response = self._client.audio.transcriptions.complete(
                model=request.model,
                file={
                    "file_name": request.file_name,
                    "content": request.payload,
                    "content_type": request.mime_type,
                },
                language=request.language,
            )
        except Exception as e:
            logger.exception(
                "Mistral transcription failed",
                extra={"file_name": request.file_name, "model": request.model},
            )
            raise TranscriptionError(request.file_name, e) from e

        return TranscriptionResult(text=getattr(response, "text", None) or "")

    def list_models(self) -> list[str]:
        """Returns the ids of every model visible to the API key."""
        models = self._client.models.list()
        return [model.id for model in models.data or []]
