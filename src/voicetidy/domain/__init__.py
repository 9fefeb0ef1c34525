"""Domain layer exports."""

from .audio_validator import AudioValidator, get_audio_mime_type
from .cleanup_profiles import build_cleanup_profiles
from .models import (
    AudioArtifact,
    ChatMessage,
    CleanupMode,
    CleanupProfile,
    CleanupRequest,
    CleanupResult,
    PipelineOutcome,
    TranscriptionRequest,
    TranscriptionResult,
)

__all__ = [
    "AudioArtifact",
    "AudioValidator",
    "ChatMessage",
    "CleanupMode",
    "CleanupProfile",
    "CleanupRequest",
    "CleanupResult",
    "PipelineOutcome",
    "TranscriptionRequest",
    "TranscriptionResult",
    "build_cleanup_profiles",
    "get_audio_mime_type",
]
