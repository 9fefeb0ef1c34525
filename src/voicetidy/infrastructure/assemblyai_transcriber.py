"""AssemblyAI implementation of the TranscriptionService interface."""

import logging
import tempfile
from pathlib import Path

import assemblyai as aai

from voicetidy.domain.models import TranscriptionRequest, TranscriptionResult
from voicetidy.exceptions import TranscriptionError

from .interfaces import TranscriptionService

logger = logging.getLogger(__name__)


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    def transcribe(self, request: TranscriptionRequest) -> TranscriptionResult:
        """
        Transcribes the audio payload using AssemblyAI.

        Writes audio to a temp file (required by AssemblyAI SDK) and
        returns the plain transcript text.
        """
        suffix = Path(request.file_name).suffix or ".wav"

        try:
            config = aai.TranscriptionConfig(
                language_code=request.language,
                speech_model=aai.SpeechModel(request.model),
            )

            with tempfile.NamedTemporaryFile(suffix=suffix, delete=True) as temp_file:
                temp_file.write(request.payload)
                temp_file.flush()

                transcript = self._transcriber.transcribe(temp_file.name, config=config)

            if transcript.status == aai.TranscriptStatus.error:
                raise TranscriptionError(
                    request.file_name, Exception(transcript.error)
                )

        except TranscriptionError:
            raise
        except Exception as e:
            logger.exception(
                "AssemblyAI transcription failed",
                extra={"file_name": request.file_name},
            )
            raise TranscriptionError(request.file_name, e) from e

        return TranscriptionResult(text=transcript.text or "")
