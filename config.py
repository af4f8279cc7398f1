"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, field_validator

from domain.models import TranscriptionOptions
from exceptions import ConfigurationError


class ProviderConfig(BaseModel, frozen=True):
    """Speech-to-text provider connection configuration."""

    api_key: str
    base_url: str = "https://api.openai.com/v1"
    model: str = "whisper-1"

    @field_validator("api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("api_key must not be empty")
        return value


class UploadConfig(BaseModel, frozen=True):
    """Transient file settings for incoming uploads."""

    temp_prefix: str = "audio"
    default_suffix: str = ".wav"
    temp_dir: str | None = None


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    provider: ProviderConfig
    upload: UploadConfig = UploadConfig()
    options: TranscriptionOptions = TranscriptionOptions()


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        ConfigurationError: If OPENAI_API_KEY is missing or blank.
    """
    api_key = os.getenv("OPENAI_API_KEY", "")
    if not api_key.strip():
        raise ConfigurationError("OPENAI_API_KEY")

    return AppConfig(
        provider=ProviderConfig(
            api_key=api_key,
            base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1"),
            model=os.getenv("TRANSCRIPTION_MODEL", "whisper-1"),
        ),
        upload=UploadConfig(
            temp_dir=os.getenv("TRANSCRIBE_TEMP_DIR") or None,
        ),
    )
