"""Handler for the best-effort cleanup stage."""

import logging
import time
from collections.abc import Mapping

from voicetidy.domain import CleanupMode, CleanupProfile, CleanupResult
from voicetidy.infrastructure.interfaces import LLMService

logger = logging.getLogger(__name__)


class CleanupHandler:
    """Cleans up a raw transcript, falling back to it on any failure."""

    def __init__(
        self,
        llm_service: LLMService,
        profiles: Mapping[CleanupMode, CleanupProfile],
    ):
        self._llm = llm_service
        self._profiles = dict(profiles)

    def profile_for(self, mode: CleanupMode) -> CleanupProfile:
        return self._profiles[CleanupMode(mode)]

    def process(
        self, raw_text: str, mode: CleanupMode = CleanupMode.FILLER_REMOVAL
    ) -> CleanupResult:
        """
        Sends the transcript to the LLM with the instruction for ``mode``.

        Never raises: provider errors and empty completions both return
        ``raw_text`` unchanged with ``degraded`` set.
        """
        profile = self.profile_for(mode)
        request = profile.build_request(raw_text)

        logger.info(
            "Cleaning up text with %s",
            profile.model,
            extra={"model": profile.model, "mode": CleanupMode(mode).value},
        )
        started = time.perf_counter()

        try:
            cleaned = self._llm.generate(request)
        except Exception as e:
            logger.warning(
                "Text cleanup failed, falling back to original transcription: %s",
                e,
                extra={"model": profile.model},
            )
            return CleanupResult(text=raw_text, degraded=True)

        if not cleaned:
            logger.warning(
                "Text cleanup returned no content, falling back to original transcription",
                extra={"model": profile.model},
            )
            return CleanupResult(text=raw_text, degraded=True)

        logger.info(
            "Text cleanup completed: %d -> %d characters in %.2fs",
            len(raw_text),
            len(cleaned),
            time.perf_counter() - started,
            extra={"model": profile.model},
        )
        return CleanupResult(text=cleaned)
