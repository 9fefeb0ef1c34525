"""Sequences validation, transcription and cleanup for one audio file."""

import logging
import time
from pathlib import Path

from voicetidy.domain import AudioValidator, CleanupMode, PipelineOutcome
from voicetidy.handlers import CleanupHandler, TranscriptionHandler

logger = logging.getLogger(__name__)


class TranscriptionPipeline:
    """Runs validate -> transcribe -> cleanup for a single audio file."""

    def __init__(
        self,
        validator: AudioValidator,
        transcription_handler: TranscriptionHandler,
        cleanup_handler: CleanupHandler,
    ):
        self._validator = validator
        self._transcription = transcription_handler
        self._cleanup = cleanup_handler

    def run(
        self,
        audio_path: str | Path,
        mode: CleanupMode = CleanupMode.FILLER_REMOVAL,
    ) -> PipelineOutcome:
        """
        Turns an audio file into cleaned-up text.

        Args:
            audio_path: Location of the audio file.
            mode: Which cleanup instruction bundle to use.

        Returns:
            PipelineOutcome whose ``text`` is safe to print as-is.

        Raises:
            AudioFileNotFoundError: If the audio file does not exist.
            AudioFileTooSmallError: If the audio file is below the threshold.
            TranscriptionError: If transcription fails. Cleanup is not attempted.
        """
        timings: dict[str, float] = {}

        started = time.perf_counter()
        artifact = self._validator.validate(audio_path)
        timings["validate"] = time.perf_counter() - started

        started = time.perf_counter()
        transcription = self._transcription.process(artifact)
        timings["transcribe"] = time.perf_counter() - started

        started = time.perf_counter()
        cleanup = self._cleanup.process(transcription.text, mode)
        timings["cleanup"] = time.perf_counter() - started

        logger.info(
            "Pipeline finished in %.2fs",
            sum(timings.values()),
            extra={"degraded": cleanup.degraded, "timings": timings},
        )

        return PipelineOutcome(
            text=cleanup.text,
            mode=mode,
            degraded=cleanup.degraded,
            timings=timings,
        )
