"""Dependency injection configuration for the voicetidy pipeline."""

import logging

import assemblyai as aai
from google import genai
from mistralai import Mistral
from openai import OpenAI

from voicetidy.config import AppConfig
from voicetidy.domain import AudioValidator, build_cleanup_profiles
from voicetidy.handlers import CleanupHandler, TranscriptionHandler
from voicetidy.infrastructure import (
    AssemblyAITranscriber,
    GeminiLLMService,
    MistralTranscriber,
    OpenAILLMService,
)
from voicetidy.infrastructure.interfaces import LLMService, TranscriptionService
from voicetidy.pipeline import TranscriptionPipeline

logger = logging.getLogger(__name__)


def get_mistral_transcriber(config: AppConfig) -> MistralTranscriber:
    """Returns a Mistral transcriber bound to the configured API key."""
    return MistralTranscriber(Mistral(api_key=config.mistral.api_key))


def get_transcription_service(config: AppConfig) -> TranscriptionService:
    """Returns the transcription service for the configured provider."""
    if config.transcription_provider == "assemblyai":
        aai.settings.api_key = config.assemblyai.api_key
        return AssemblyAITranscriber(aai.Transcriber())
    return get_mistral_transcriber(config)


def get_llm_service(config: AppConfig) -> LLMService:
    """Returns the LLM service for the configured provider."""
    if config.cleanup_provider == "gemini":
        return GeminiLLMService(genai.Client(api_key=config.gemini.api_key))
    return OpenAILLMService(OpenAI(api_key=config.openai.api_key))


def build_pipeline(
    config: AppConfig,
    transcription_service: TranscriptionService | None = None,
    llm_service: LLMService | None = None,
) -> TranscriptionPipeline:
    """
    Wires the pipeline from configuration.

    Services can be passed in to replace the SDK-backed ones.
    """
    transcription_service = transcription_service or get_transcription_service(config)
    llm_service = llm_service or get_llm_service(config)

    logger.debug(
        "Pipeline adapters: transcription=%s, cleanup=%s",
        type(transcription_service).__name__,
        type(llm_service).__name__,
    )

    return TranscriptionPipeline(
        validator=AudioValidator(config.min_audio_bytes),
        transcription_handler=TranscriptionHandler(
            transcription_service,
            model=config.transcription_model,
            language=config.language,
        ),
        cleanup_handler=CleanupHandler(
            llm_service, build_cleanup_profiles(config.cleanup_models)
        ),
    )
