"""Staging and cleanup of uploaded files."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from uuid import uuid4

from fastapi import UploadFile

from roster.db.errors import ValidationError
from roster.observability.logging import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 64 * 1024


async def stage_upload(upload: UploadFile, directory: Path, max_bytes: int) -> Path:
    """Copy an uploaded file into the staging directory.

    Args:
        upload: The multipart file from the request
        directory: Staging directory, created if missing
        max_bytes: Largest accepted size

    Returns:
        Path of the staged file. The caller owns it and must remove it.

    Raises:
        ValidationError: If the upload is larger than max_bytes
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{uuid4().hex}.csv"
    size = 0

    try:
        with path.open("wb") as out:
            while chunk := await upload.read(CHUNK_SIZE):
                size += len(chunk)
                if size > max_bytes:
                    raise ValidationError(f"Upload exceeds {max_bytes} bytes")
                out.write(chunk)
    except BaseException:
        path.unlink(missing_ok=True)
        raise
    finally:
        await upload.close()

    logger.debug("upload_staged", path=str(path), size=size, filename=upload.filename)
    return path


@contextmanager
def temporary_upload(path: Path) -> Iterator[Path]:
    """Remove a staged upload when the block exits, however it exits."""
    try:
        yield path
    finally:
        try:
            path.unlink()
        except FileNotFoundError:
            logger.warning("upload_already_removed", path=str(path))
        else:
            logger.debug("upload_removed", path=str(path))
