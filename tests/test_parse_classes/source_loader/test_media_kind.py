"""test_media_kind.py
Test check_file_extension and detect_media_kind.
"""
import pytest

from cv_site.exceptions import FileNotSupportedError

from cv_site.parse_classes.source_loader.helpers.media_kind import (
    check_file_extension,
    detect_media_kind,
)

class TestCheckFileExtension:
    """Tests for the check_file_extension utility."""

    def test_valid_extension_returns_lowercase(self):
        """Return the lowercase file extension if it's supported."""
        assert check_file_extension("cv.PDF", [".pdf", ".docx"]) == ".pdf"

    def test_unsupported_extension_raises_error(self):
        """Raise FileNotSupportedError if extension is not supported."""
        supported = [".pdf", ".docx"]
        with pytest.raises(FileNotSupportedError) as exc_info:
            check_file_extension("cv.png", supported)

        err = exc_info.value
        assert err.extension == ".png"
        assert err.supported_extensions == supported

    def test_longest_extension_wins(self):
        """Multi-dot extensions are matched before their shorter suffixes."""
        assert check_file_extension("archive.tar.gz", [".gz", ".tar.gz"]) == ".tar.gz"


class TestDetectMediaKind:
    """Tests for detect_media_kind."""

    @pytest.mark.parametrize(
        "file_path, expected",
        [
            ("uploads/cv.pdf", "pdf"),
            ("uploads/cv.DOCX", "docx"),
            ("uploads/cv.doc", "doc"),
            ("uploads/cv.txt", "plain-text"),
            ("uploads/cv.md", "plain-text"),
        ]
    )
    def test_known_extensions(self, file_path, expected):
        """Known extensions map to their media kind."""
        assert detect_media_kind(file_path) == expected

    @pytest.mark.parametrize("file_path", ["photo.png", "scan.jpeg", "no_extension"])
    def test_unknown_extensions_are_unknown_binary(self, file_path):
        """Images and anything unrecognised map to unknown-binary instead of raising."""
        assert detect_media_kind(file_path) == "unknown-binary"
