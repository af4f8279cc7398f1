"""Response models for the transcription API."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned when a transcription request fails."""

    detail: str
