"""Application configuration loaded from environment variables."""

import os
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from voicetidy.domain.models import CleanupMode
from voicetidy.exceptions import ConfigurationError, MissingCredentialError


class MistralConfig(BaseModel, frozen=True):
    """Mistral transcription configuration."""

    api_key: str
    speech_model: str = "voxtral-mini-latest"


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    speech_model: str = "best"


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI chat-completions configuration."""

    api_key: str
    filler_model: str = "gpt-5-nano"
    assistant_model: str = "gpt-5-mini"


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str
    filler_model: str = "gemini-2.5-flash-lite"
    assistant_model: str = "gemini-2.5-flash"


class LoggingConfig(BaseModel, frozen=True):
    """Diagnostic output configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["text", "json"] = "text"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    transcription_provider: Literal["mistral", "assemblyai"] = "mistral"
    cleanup_provider: Literal["openai", "gemini"] = "openai"
    language: str = "en"
    min_audio_bytes: int = Field(default=1000, ge=0)
    mistral: MistralConfig
    assemblyai: AssemblyAIConfig
    openai: OpenAIConfig
    gemini: GeminiConfig
    logging: LoggingConfig = LoggingConfig()

    @property
    def transcription_model(self) -> str:
        if self.transcription_provider == "assemblyai":
            return self.assemblyai.speech_model
        return self.mistral.speech_model

    @property
    def cleanup_models(self) -> dict[CleanupMode, str]:
        llm = self.gemini if self.cleanup_provider == "gemini" else self.openai
        return {
            CleanupMode.FILLER_REMOVAL: llm.filler_model,
            CleanupMode.GENERAL_ASSISTANT: llm.assistant_model,
        }

    def require_credentials(self) -> None:
        """
        Checks that both selected providers have an API key.

        Raises:
            MissingCredentialError: Naming the first missing variable.
        """
        if self.transcription_provider == "assemblyai":
            transcription_key = ("ASSEMBLYAI_API_KEY", self.assemblyai.api_key)
        else:
            transcription_key = ("MISTRAL_API_KEY", self.mistral.api_key)

        if self.cleanup_provider == "gemini":
            cleanup_key = ("GEMINI_API_KEY", self.gemini.api_key)
        else:
            cleanup_key = ("OPENAI_API_KEY", self.openai.api_key)

        for env_var, value in (transcription_key, cleanup_key):
            if not value.strip():
                raise MissingCredentialError(env_var)


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        ConfigurationError: If a provider name or numeric value is invalid.
    """
    try:
        return AppConfig(
            transcription_provider=os.getenv("TRANSCRIPTION_PROVIDER", "mistral").lower(),
            cleanup_provider=os.getenv("CLEANUP_PROVIDER", "openai").lower(),
            language=os.getenv("TRANSCRIPTION_LANGUAGE", "en"),
            min_audio_bytes=os.getenv("MIN_AUDIO_BYTES", "1000"),
            mistral=MistralConfig(
                api_key=os.getenv("MISTRAL_API_KEY", ""),
                speech_model=os.getenv("MISTRAL_TRANSCRIPTION_MODEL", "voxtral-mini-latest"),
            ),
            assemblyai=AssemblyAIConfig(
                api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
                speech_model=os.getenv("ASSEMBLYAI_SPEECH_MODEL", "best"),
            ),
            openai=OpenAIConfig(
                api_key=os.getenv("OPENAI_API_KEY", ""),
                filler_model=os.getenv("OPENAI_FILLER_MODEL", "gpt-5-nano"),
                assistant_model=os.getenv("OPENAI_ASSISTANT_MODEL", "gpt-5-mini"),
            ),
            gemini=GeminiConfig(
                api_key=os.getenv("GEMINI_API_KEY", ""),
                filler_model=os.getenv("GEMINI_FILLER_MODEL", "gemini-2.5-flash-lite"),
                assistant_model=os.getenv("GEMINI_ASSISTANT_MODEL", "gemini-2.5-flash"),
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO").upper(),
                format=os.getenv("LOG_FORMAT", "text").lower(),
            ),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", cause=e) from e
