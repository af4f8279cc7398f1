"""Scoped transient files for provider APIs that require a file on disk."""

import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from exceptions import TransientFileError
from log_config import setup_logging

logger = setup_logging()

SUPPORTED_EXTENSIONS = frozenset(
    {".flac", ".m4a", ".mp3", ".mp4", ".mpeg", ".mpga", ".oga", ".ogg", ".wav", ".webm"}
)


def suffix_for(filename: str | None, default: str = ".wav") -> str:
    """Returns the upload's extension if the provider accepts it, else the default."""
    extension = os.path.splitext(filename or "")[1].lower()
    if extension in SUPPORTED_EXTENSIONS:
        return extension
    return default


@contextmanager
def transient_file(
    stream: BinaryIO,
    suffix: str = ".wav",
    prefix: str = "audio",
    directory: str | None = None,
) -> Iterator[Path]:
    """
    Writes a stream to a uniquely named temporary file and yields its path.

    The file is removed when the block exits, whether it returned or raised.

    Raises:
        TransientFileError: If the stream cannot be written to disk.
    """
    try:
        fd, name = tempfile.mkstemp(suffix=suffix, prefix=prefix, dir=directory)
    except OSError as e:
        logger.exception("Transient file creation failed", extra={"directory": directory})
        raise TransientFileError(prefix + suffix, e) from e

    path = Path(name)
    try:
        try:
            with os.fdopen(fd, "wb") as temp_file:
                shutil.copyfileobj(stream, temp_file)
                temp_file.flush()
        except OSError as e:
            logger.exception("Transient file write failed", extra={"path": str(path)})
            raise TransientFileError(path.name, e) from e

        logger.debug(
            "Transient file created",
            extra={"path": str(path), "size": path.stat().st_size},
        )
        yield path
    finally:
        path.unlink(missing_ok=True)
        logger.debug("Transient file removed", extra={"path": str(path)})
