"""Custom exceptions for the transcription service."""


class ConfigurationError(Exception):
    """Raised at startup when a required setting is missing."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"{variable} is not set")


class TransientFileError(Exception):
    """Raised when an upload cannot be written to a transient file."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to store upload '{file_name}'")


class TranscriptionError(Exception):
    """Raised when the provider fails to transcribe an audio file."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}'")
