"""Custom exceptions for the voicetidy pipeline."""


class VoicetidyError(Exception):
    """Base class for errors raised by the pipeline."""


class ConfigurationError(VoicetidyError):
    """Raised when a configuration value is unknown or malformed."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class MissingCredentialError(VoicetidyError):
    """Raised when a required API key is not set in the environment."""

    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"{env_var} environment variable is required")


class AudioFileNotFoundError(VoicetidyError):
    """Raised when the audio path does not point to an existing file."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Audio file not found: {path}")


class AudioFileTooSmallError(VoicetidyError):
    """Raised when the audio file is below the minimum size threshold."""

    def __init__(self, path: str, size_bytes: int, min_size_bytes: int):
        self.path = path
        self.size_bytes = size_bytes
        self.min_size_bytes = min_size_bytes
        super().__init__(
            f"Audio file is too small ({size_bytes} bytes < {min_size_bytes}) - "
            "likely silent or no audio recorded"
        )


class TranscriptionError(VoicetidyError):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        message = f"Failed to transcribe audio file '{file_name}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class CleanupError(VoicetidyError):
    """Raised when the generation provider call fails."""

    def __init__(self, model: str, cause: Exception | None = None):
        self.model = model
        self.cause = cause
        message = f"Text cleanup with '{model}' failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
