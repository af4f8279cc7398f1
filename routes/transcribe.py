"""Audio transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, UploadFile
from fastapi.responses import PlainTextResponse

from dependencies import get_handler
from domain import Upload
from exceptions import TranscriptionError, TransientFileError
from handlers import TranscriptionHandler
from log_config import setup_logging
from response_models import ErrorResponse

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["transcription"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_handler)]


@router.post(
    "/transcribe",
    response_class=PlainTextResponse,
    responses={500: {"model": ErrorResponse}},
)
def transcribe_audio(file: UploadFile, handler: HandlerDep) -> PlainTextResponse:
    """
    Transcribes an uploaded audio file.

    Returns the provider's transcript as plain text.
    """
    upload = Upload(
        filename=file.filename or "",
        content_type=file.content_type,
        stream=file.file,
    )

    try:
        result = handler.process(upload)
    except TransientFileError:
        raise HTTPException(status_code=500, detail="Failed to store upload")
    except TranscriptionError:
        raise HTTPException(status_code=500, detail="Transcription failed")

    return PlainTextResponse(result.text, status_code=200)
