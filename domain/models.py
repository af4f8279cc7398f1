"""Domain models for the transcription service."""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel


class TranscriptionOptions(BaseModel, frozen=True):
    """Fixed provider options applied to every request."""

    language: str = "en"
    response_format: Literal["text"] = "text"
    temperature: float = 0.0


class Upload(BaseModel, frozen=True):
    """An uploaded audio file, valid for the duration of one request."""

    filename: str
    content_type: str | None = None
    # Readable binary file object owned by the web framework.
    stream: Any


class TranscriptionRequest(BaseModel, frozen=True):
    """A transient audio file paired with the options to transcribe it with."""

    audio_path: Path
    options: TranscriptionOptions


class TranscriptionResult(BaseModel, frozen=True):
    """Plain-text result of a transcription."""

    text: str
    content_type: str = "text/plain"
