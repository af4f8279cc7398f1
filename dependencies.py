"""FastAPI dependency injection configuration."""

from fastapi import Request
from openai import OpenAI

from config import AppConfig
from handlers import TranscriptionHandler
from infrastructure import OpenAITranscriber, build_openai_client
from infrastructure.interfaces import TranscriptionService


def build_transcription_service(
    config: AppConfig, client: OpenAI | None = None
) -> TranscriptionService:
    """Creates the provider-backed transcription service for a configuration."""
    client = client or build_openai_client(config.provider)
    return OpenAITranscriber(client, model=config.provider.model)


def get_config(request: Request) -> AppConfig:
    """Returns the configuration the application was created with."""
    return request.app.state.config


def get_transcription_service(request: Request) -> TranscriptionService:
    """Returns the transcription service the application was created with."""
    return request.app.state.transcription_service


def get_handler(request: Request) -> TranscriptionHandler:
    """Returns a handler wired to the application's service and settings."""
    config = get_config(request)
    return TranscriptionHandler(
        get_transcription_service(request),
        config.options,
        config.upload,
    )
