"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .gemini_llm import GeminiLLMService
from .mistral_transcriber import MistralTranscriber
from .openai_llm import OpenAILLMService

__all__ = [
    "AssemblyAITranscriber",
    "GeminiLLMService",
    "MistralTranscriber",
    "OpenAILLMService",
]
