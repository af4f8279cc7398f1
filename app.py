"""FastAPI application factory."""

from fastapi import FastAPI

from config import AppConfig
from dependencies import build_transcription_service
from infrastructure.interfaces import TranscriptionService
from log_config import setup_logging
from routes import frontend_router, transcribe_router

logger = setup_logging()


def create_app(
    config: AppConfig,
    transcription_service: TranscriptionService | None = None,
) -> FastAPI:
    """
    Builds the application from an explicit configuration.

    Args:
        config: Loaded application configuration.
        transcription_service: Optional replacement for the provider-backed
            service, e.g. a stub in tests.
    """
    app = FastAPI(title="Audio Transcription Service")
    app.state.config = config
    app.state.transcription_service = (
        transcription_service or build_transcription_service(config)
    )
    app.include_router(transcribe_router)
    app.include_router(frontend_router)

    logger.info(
        "Application created",
        extra={
            "provider_base_url": config.provider.base_url,
            "model": config.provider.model,
        },
    )
    return app
