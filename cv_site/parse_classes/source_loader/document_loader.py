"""document_loader.py

Loads an uploaded file from local disk into a RawDocument.
"""

import os

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.exceptions import FileTooLargeError, FileOpenError
from cv_site.models import RawDocument
from cv_site.parse_classes.source_loader.helpers.media_kind import detect_media_kind


def validate_file(file_path: str, max_file_size_mb: float | None = GENERATOR_DEFAULTS.MAX_FILE_SIZE_MB) -> None:
    """Validate whether the file can be loaded.

    Raises:
        FileNotFoundError: Raised if the file cannot be found at file_path
        FileTooLargeError: Raised if the file exceeds the max_file_size_mb
    """
    if not os.path.isfile(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    if max_file_size_mb is not None:
        # Convert MB to bytes (1 MB = 1024 * 1024 bytes)
        max_size_bytes = max_file_size_mb * 1024 * 1024
        actual_size_bytes = os.path.getsize(file_path)

        if actual_size_bytes > max_size_bytes:
            raise FileTooLargeError(
                max_size=max_size_bytes,
                actual_size=actual_size_bytes
            )


def load_uploaded_document(
    file_path: str,
    max_file_size_mb: float | None = GENERATOR_DEFAULTS.MAX_FILE_SIZE_MB,
) -> RawDocument:
    """
    Validate `file_path` and read it into a RawDocument whose media kind is
    derived from the extension.

    Args:
        file_path (str): Path of the uploaded file on local disk.
        max_file_size_mb (float | None): Maximum allowed size. None disables the check.

    Returns:
        RawDocument: The file's bytes, media kind and path.

    Raises:
        FileNotFoundError: If nothing exists at `file_path`.
        FileTooLargeError: If the file exceeds `max_file_size_mb`.
        FileOpenError: If the file exists but cannot be read.
    """
    file_path = str(file_path)
    validate_file(file_path, max_file_size_mb)

    try:
        with open(file_path, "rb") as f:
            content = f.read()
    except OSError as e:
        raise FileOpenError(file_path, str(e))

    return RawDocument(
        content=content,
        media_kind=detect_media_kind(file_path),
        source=file_path,
    )
