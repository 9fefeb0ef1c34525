import logging

import pytest

from voicetidy.config import OpenAIConfig
from voicetidy.domain import (
    AudioValidator,
    CleanupMode,
    CleanupRequest,
    TranscriptionRequest,
    TranscriptionResult,
    build_cleanup_profiles,
)
from voicetidy.handlers import CleanupHandler, TranscriptionHandler
from voicetidy.infrastructure.interfaces import LLMService, TranscriptionService
from voicetidy.pipeline import TranscriptionPipeline

ENV_VARS = [
    "TRANSCRIPTION_PROVIDER",
    "CLEANUP_PROVIDER",
    "TRANSCRIPTION_LANGUAGE",
    "MIN_AUDIO_BYTES",
    "MISTRAL_API_KEY",
    "MISTRAL_TRANSCRIPTION_MODEL",
    "ASSEMBLYAI_API_KEY",
    "ASSEMBLYAI_SPEECH_MODEL",
    "OPENAI_API_KEY",
    "OPENAI_FILLER_MODEL",
    "OPENAI_ASSISTANT_MODEL",
    "GEMINI_API_KEY",
    "GEMINI_FILLER_MODEL",
    "GEMINI_ASSISTANT_MODEL",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


class FakeTranscriptionService(TranscriptionService):
    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.requests: list[TranscriptionRequest] = []

    def transcribe(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return TranscriptionResult(text=self.text)


class FakeLLMService(LLMService):
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.requests: list[CleanupRequest] = []

    def generate(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return self.reply


def default_cleanup_profiles():
    openai = OpenAIConfig(api_key="test")
    return build_cleanup_profiles(
        {
            CleanupMode.FILLER_REMOVAL: openai.filler_model,
            CleanupMode.GENERAL_ASSISTANT: openai.assistant_model,
        }
    )


def make_pipeline(transcriber, llm, min_size_bytes=1000):
    return TranscriptionPipeline(
        validator=AudioValidator(min_size_bytes),
        transcription_handler=TranscriptionHandler(transcriber, model="voxtral-mini-latest"),
        cleanup_handler=CleanupHandler(llm, default_cleanup_profiles()),
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "note.wav"
    path.write_bytes(b"\x00" * 5000)
    return path
