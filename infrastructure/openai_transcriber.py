"""OpenAI implementation of the TranscriptionService interface."""

from openai import OpenAI

from config import ProviderConfig
from domain.models import TranscriptionRequest
from exceptions import TranscriptionError
from log_config import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


def build_openai_client(config: ProviderConfig) -> OpenAI:
    """Creates an OpenAI client with the SDK's default timeout and retry policy."""
    return OpenAI(api_key=config.api_key, base_url=config.base_url)


class OpenAITranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI audio API."""

    def __init__(self, client: OpenAI, model: str = "whisper-1"):
        self._client = client
        self._model = model

    def transcribe(self, request: TranscriptionRequest) -> str:
        """
        Sends the transient audio file to the provider and returns its text.

        The call blocks until the provider responds or fails.
        """
        options = request.options
        file_name = request.audio_path.name

        try:
            with request.audio_path.open("rb") as audio_file:
                transcription = self._client.audio.transcriptions.create(
                    model=self._model,
                    file=audio_file,
                    language=options.language,
                    response_format=options.response_format,
                    temperature=options.temperature,
                )
        except Exception as e:
            logger.exception(
                "OpenAI transcription failed",
                extra={"file_name": file_name, "model": self._model},
            )
            raise TranscriptionError(file_name, e) from e

        # The text response format comes back as a bare string.
        text = transcription if isinstance(transcription, str) else transcription.text

        logger.info(
            "Audio transcription successful",
            extra={"file_name": file_name, "characters": len(text)},
        )
        return text
