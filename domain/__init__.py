"""Domain layer exports."""

from .models import TranscriptionOptions, TranscriptionRequest, TranscriptionResult, Upload
from .transient_file import suffix_for, transient_file

__all__ = [
    "TranscriptionOptions",
    "TranscriptionRequest",
    "TranscriptionResult",
    "Upload",
    "suffix_for",
    "transient_file",
]
