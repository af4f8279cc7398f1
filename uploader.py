"""
Command-line audio uploader.

Sends one audio file to the transcription endpoint as multipart field
``file`` and prints the plain-text transcript.
"""

import argparse
import mimetypes
import sys
from pathlib import Path

import requests

from log_config import setup_logging

logger = setup_logging()

TRANSCRIBE_URL = "http://localhost:8000/api/transcribe"


class AudioUploader:
    """Holds the selected file and the last transcription received."""

    def __init__(self, endpoint_url: str = TRANSCRIBE_URL, session=None):
        self._endpoint_url = endpoint_url
        self._session = session or requests.Session()
        self._file: Path | None = None
        self.transcription = ""

    @property
    def selected_file_name(self) -> str | None:
        return self._file.name if self._file else None

    def select_file(self, path: str | Path) -> None:
        self._file = Path(path)

    def upload(self) -> str | None:
        """
        Posts the selected file and stores the returned transcript.

        Returns:
            The transcript on success, None if the request failed. A failed
            upload is logged and leaves the previous transcription in place.
        """
        if self._file is None:
            logger.error("No file selected")
            return None

        content_type = mimetypes.guess_type(self._file.name)[0] or "application/octet-stream"

        try:
            with self._file.open("rb") as audio_file:
                files = {"file": (self._file.name, audio_file, content_type)}
                response = self._session.post(self._endpoint_url, files=files)
            response.raise_for_status()
        except (OSError, requests.RequestException):
            logger.exception(
                "Error transcribing audio",
                extra={"file_name": self._file.name, "url": self._endpoint_url},
            )
            return None

        self.transcription = response.text
        return self.transcription


def main(argv=None):
    parser = argparse.ArgumentParser(description="Upload an audio file for transcription")
    parser.add_argument("file", help="Path to the audio file")
    args = parser.parse_args(argv)

    uploader = AudioUploader()
    uploader.select_file(args.file)
    print(f"Selected file: {uploader.selected_file_name}")

    if uploader.upload() is None:
        return 1

    print("Transcription Result")
    print(uploader.transcription)
    return 0


if __name__ == "__main__":
    sys.exit(main())
