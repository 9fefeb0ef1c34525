"""Pre-flight checks on the audio file before any network call."""

import logging
from pathlib import Path

from voicetidy.domain.models import AudioArtifact
from voicetidy.exceptions import AudioFileNotFoundError, AudioFileTooSmallError

logger = logging.getLogger(__name__)

DEFAULT_MIN_SIZE_BYTES = 1000
DEFAULT_MIME_TYPE = "audio/wav"

AUDIO_MIME_TYPES = {
    ".wav": "audio/wav",
    ".mp3": "audio/mpeg",
    ".m4a": "audio/mp4",
    ".flac": "audio/flac",
    ".ogg": "audio/ogg",
    ".webm": "audio/webm",
}


def get_audio_mime_type(path: str | Path) -> str:
    """Returns the MIME type for an audio file based on its extension."""
    return AUDIO_MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


class AudioValidator:
    """Checks that an audio file exists and is large enough to hold speech."""

    def __init__(self, min_size_bytes: int = DEFAULT_MIN_SIZE_BYTES):
        self._min_size_bytes = min_size_bytes

    @property
    def min_size_bytes(self) -> int:
        return self._min_size_bytes

    def validate(self, path: str | Path) -> AudioArtifact:
        """
        Resolves an audio path into an AudioArtifact.

        Args:
            path: Location of the audio file on disk.

        Returns:
            AudioArtifact with size and MIME type filled in.

        Raises:
            AudioFileNotFoundError: If the path is not an existing file.
            AudioFileTooSmallError: If the file is below the size threshold.
        """
        audio_path = Path(path)
        if not audio_path.is_file():
            raise AudioFileNotFoundError(str(path))

        artifact = AudioArtifact(
            path=audio_path,
            size_bytes=audio_path.stat().st_size,
            mime_type=get_audio_mime_type(audio_path),
        )

        logger.info(
            "Processing audio file %s (%.2f MB)",
            audio_path,
            artifact.size_mb,
            extra={"audio_file": str(audio_path), "size_bytes": artifact.size_bytes},
        )

        # Below the threshold the recording is treated as silent.
        if artifact.size_bytes < self._min_size_bytes:
            raise AudioFileTooSmallError(
                str(path), artifact.size_bytes, self._min_size_bytes
            )

        return artifact
