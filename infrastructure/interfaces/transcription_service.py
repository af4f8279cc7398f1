"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from domain.models import TranscriptionRequest


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, request: TranscriptionRequest) -> str:
        """
        Transcribes the audio file referenced by the request.

        Args:
            request: Path of the transient audio file and the options to apply.

        Returns:
            The transcript as plain text.

        Raises:
            TranscriptionError: If transcription fails.
        """
        pass
