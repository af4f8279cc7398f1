"""Handler for the upload-transcribe-cleanup request lifecycle."""

from config import UploadConfig
from domain import (
    TranscriptionOptions,
    TranscriptionRequest,
    TranscriptionResult,
    Upload,
    suffix_for,
    transient_file,
)
from infrastructure.interfaces import TranscriptionService
from log_config import setup_logging

logger = setup_logging()


class TranscriptionHandler:
    """Orchestrates upload-to-transcript operations for a single request."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        options: TranscriptionOptions,
        upload_config: UploadConfig,
    ):
        self._transcription_service = transcription_service
        self._options = options
        self._upload_config = upload_config

    def process(self, upload: Upload) -> TranscriptionResult:
        """
        Transcribes an uploaded audio file.

        The upload is written to a transient file which is removed before
        this method returns or raises.

        Args:
            upload: The uploaded file and its metadata.

        Returns:
            TranscriptionResult with the provider's plain text.

        Raises:
            TransientFileError: If the upload cannot be written to disk.
            TranscriptionError: If the provider call fails.
        """
        logger.info(
            "Processing upload",
            extra={"file_name": upload.filename, "content_type": upload.content_type},
        )

        suffix = suffix_for(upload.filename, self._upload_config.default_suffix)

        with transient_file(
            upload.stream,
            suffix=suffix,
            prefix=self._upload_config.temp_prefix,
            directory=self._upload_config.temp_dir,
        ) as audio_path:
            request = TranscriptionRequest(audio_path=audio_path, options=self._options)
            text = self._transcription_service.transcribe(request)

        result = TranscriptionResult(text=text)

        logger.info(
            "Upload transcribed",
            extra={"file_name": upload.filename, "characters": len(result.text)},
        )

        return result
