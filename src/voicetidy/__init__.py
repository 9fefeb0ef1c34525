"""voicetidy: transcribe audio and clean up the transcript with an LLM."""

__version__ = "0.1.0"
