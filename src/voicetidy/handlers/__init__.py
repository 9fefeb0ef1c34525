"""Handler layer exports."""

from .cleanup_handler import CleanupHandler
from .transcription_handler import TranscriptionHandler

__all__ = ["CleanupHandler", "TranscriptionHandler"]
