"""Domain models for the transcription and cleanup pipeline."""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class CleanupMode(str, Enum):
    """Selects the instruction bundle used by the cleanup stage."""

    FILLER_REMOVAL = "filler-removal"
    GENERAL_ASSISTANT = "general-assistant"


class AudioArtifact(BaseModel, frozen=True):
    """A validated audio file on local disk."""

    path: Path
    size_bytes: int = Field(ge=0)
    mime_type: str

    @property
    def file_name(self) -> str:
        return self.path.name

    @property
    def size_mb(self) -> float:
        return round(self.size_bytes / 1024 / 1024, 2)


class TranscriptionRequest(BaseModel, frozen=True):
    """Everything the transcription provider needs for one call."""

    payload: bytes = Field(repr=False)
    file_name: str
    mime_type: str
    model: str
    language: str = "en"
    response_format: str = "text"


class TranscriptionResult(BaseModel, frozen=True):
    """Raw transcript returned by the transcription provider."""

    text: str = ""


class ChatMessage(BaseModel, frozen=True):
    """A single role-tagged message sent to the generation provider."""

    role: Literal["system", "user"]
    content: str


class CleanupRequest(BaseModel, frozen=True):
    """A chat-completion call for cleaning up a transcript."""

    model: str
    messages: tuple[ChatMessage, ...]
    temperature: float

    @property
    def system_prompt(self) -> str:
        return "\n\n".join(m.content for m in self.messages if m.role == "system")

    @property
    def user_content(self) -> str:
        return "\n\n".join(m.content for m in self.messages if m.role == "user")


class CleanupResult(BaseModel, frozen=True):
    """
    Output of the cleanup stage.

    ``degraded`` is set when ``text`` is the untouched transcript because the
    generation provider failed or returned nothing.
    """

    text: str
    degraded: bool = False


class CleanupProfile(BaseModel, frozen=True):
    """One entry of the mode table used by the cleanup stage."""

    model: str
    system_prompt: str
    temperature: float
    user_template: str = "{text}"

    def build_request(self, raw_text: str) -> CleanupRequest:
        """Builds the system + user conversation for ``raw_text``."""
        return CleanupRequest(
            model=self.model,
            messages=(
                ChatMessage(role="system", content=self.system_prompt),
                ChatMessage(
                    role="user", content=self.user_template.format(text=raw_text)
                ),
            ),
            temperature=self.temperature,
        )


class PipelineOutcome(BaseModel, frozen=True):
    """Final result of one pipeline run."""

    text: str
    mode: CleanupMode
    degraded: bool = False
    timings: dict[str, float] = Field(default_factory=dict)
