"""media_kind.py
Checks file extensions and maps them to the MediaKind used to route documents.
"""

import os
from typing import Iterable

from cv_site.exceptions import FileNotSupportedError
from cv_site.models import MediaKind

EXTENSION_MEDIA_KIND_MAP: dict[str, MediaKind] = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".doc": "doc",
    ".txt": "plain-text",
    ".text": "plain-text",
    ".md": "plain-text",
    ".markdown": "plain-text",
    ".csv": "plain-text",
    ".json": "plain-text",
    ".rtf": "plain-text",
}


def check_file_extension(file_path: str, supported_extensions: Iterable[str]) -> str:
    """
    Validate and return the lowercase file extension for a given file path.
    Supports multi-dot extensions like '.tar.gz'.
    """
    supported_extensions = list(supported_extensions)
    file_name = os.path.basename(str(file_path)).lower()

    # Try to match the longest supported extension
    for ext in sorted(supported_extensions, key=len, reverse=True):
        if file_name.endswith(ext.lower()):
            return ext.lower()

    ext = os.path.splitext(file_name)[1]
    raise FileNotSupportedError(
        extension=ext,
        supported_extensions=supported_extensions,
        context="Failed in check_file_extension() call."
    )


def detect_media_kind(file_path: str) -> MediaKind:
    """
    Map a file path to its MediaKind using the extension only.

    Unknown extensions (images included) map to "unknown-binary" instead of
    raising, since the plain text fallback may still read them.
    """
    try:
        ext = check_file_extension(file_path, EXTENSION_MEDIA_KIND_MAP.keys())
    except FileNotSupportedError:
        return "unknown-binary"
    return EXTENSION_MEDIA_KIND_MAP[ext]
