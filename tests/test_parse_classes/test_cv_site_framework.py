"""test_cv_site_framework.py
Run tests on CvSiteFramework
"""
from unittest.mock import MagicMock

import pytest

from cv_site.exceptions import (
    CvSiteConfigError,
    ExtractionInsufficientError,
    SourceUnavailableError,
)
from cv_site.models import Capabilities, GenerateRequestData, RawDocument, ThemeConfig
from cv_site.test_helpers.file_parsing import build_docx_file, build_pdf_file, build_text_file

from cv_site.parse_classes.text_extractor.text_extractor import TextExtractor
from cv_site.parse_classes.cv_site_framework import CvSiteFramework

# Import entire files (for patching in tests)
from cv_site.parse_classes import cv_site_framework

# ---------------------------------------------------------------------
# SETUP TEST VARIABLES
# ---------------------------------------------------------------------
VIABLE_TEXT = (
    "Jane Doe\n"
    "Builds billing systems for small businesses.\n"
    "EXPERIENCE\n"
    "Senior Engineer at Initech, 2019 to 2023\n"
    "EDUCATION\n"
    "BSc Computer Science\n"
    "SKILLS\n"
    "Go, Rust\nPython"
)


class TestCvSiteFrameworkGenerate:
    """Tests for CvSiteFramework.generate."""

    def test_requires_url_or_file(self):
        """A request with neither input is rejected before any work happens."""
        framework = CvSiteFramework(forced_extracted_text=VIABLE_TEXT)
        with pytest.raises(CvSiteConfigError):
            framework.generate(GenerateRequestData())

    def test_forced_text_is_rendered(self):
        framework = CvSiteFramework(forced_extracted_text=VIABLE_TEXT)
        html = framework.generate(GenerateRequestData(uploaded_file_path="ignored.pdf"))

        assert "<h1>Jane Doe</h1>" in html
        assert "Senior Engineer at Initech, 2019 to 2023" in html
        assert html.count('class="skill-chip"') == 3

    @pytest.mark.parametrize("text", ["", "   \n  ", "Jane Doe\nToo short to be a CV"])
    def test_short_text_raises_insufficient(self, text):
        """Text under the viability threshold never produces a page."""
        framework = CvSiteFramework(forced_extracted_text=text)
        with pytest.raises(ExtractionInsufficientError) as exc_info:
            framework.generate(GenerateRequestData(uploaded_file_path="cv.pdf"))
        assert exc_info.value.minimum == 80
        assert exc_info.value.length == len(text.strip())

    def test_threshold_counts_stripped_text(self):
        """Padding does not count towards the threshold."""
        text = "  " + "x" * 79 + "\n\n\n"
        with pytest.raises(ExtractionInsufficientError):
            CvSiteFramework(forced_extracted_text=text).generate(
                GenerateRequestData(uploaded_file_path="cv.txt")
            )

        ok_text = "Jane Doe\n" + "x" * 80
        html = CvSiteFramework(forced_extracted_text=ok_text).generate(
            GenerateRequestData(uploaded_file_path="cv.txt")
        )
        assert "Jane Doe" in html

    def test_theme_is_applied(self):
        framework = CvSiteFramework(forced_extracted_text=VIABLE_TEXT)
        html = framework.generate(GenerateRequestData(
            uploaded_file_path="cv.txt",
            theme=ThemeConfig(theme_type="classic", theme_colors="navy", professional=False),
        ))
        assert "--primary: navy;" in html
        assert "Theme: classic" in html

    def test_negative_threshold_is_rejected(self):
        with pytest.raises(CvSiteConfigError):
            CvSiteFramework(min_viable_text_length=-1)


class TestCvSiteFrameworkExtraction:
    """Tests for acquisition + extraction through real files."""

    def test_text_file_upload(self, tmp_path):
        path = build_text_file(tmp_path / "cv.txt", VIABLE_TEXT)
        html = CvSiteFramework().generate(GenerateRequestData(uploaded_file_path=str(path)))
        assert "<h1>Jane Doe</h1>" in html

    def test_pdf_upload(self, tmp_path):
        path = build_pdf_file(tmp_path / "cv.pdf", VIABLE_TEXT.split("\n"))
        framework = CvSiteFramework(text_extractor=TextExtractor(capabilities=Capabilities()))
        text = framework.extract_text(uploaded_file_path=str(path))
        assert "Senior Engineer at Initech" in text

    def test_docx_upload(self, tmp_path):
        path = build_docx_file(tmp_path / "cv.docx", VIABLE_TEXT.split("\n"))
        html = CvSiteFramework().generate(GenerateRequestData(uploaded_file_path=str(path)))
        assert "BSc Computer Science" in html

    def test_missing_file_is_skipped_then_insufficient(self, tmp_path):
        """A missing upload is logged and skipped, leaving no text."""
        framework = CvSiteFramework()
        assert framework.extract_text(uploaded_file_path=str(tmp_path / "missing.pdf")) == ""
        with pytest.raises(ExtractionInsufficientError):
            framework.generate(GenerateRequestData(uploaded_file_path=str(tmp_path / "missing.pdf")))

    def test_failed_fetch_falls_back_to_upload(self, tmp_path, monkeypatch):
        """An unavailable shared page does not stop the uploaded file from being used."""
        def failing_fetch(url, timeout_seconds=None):
            raise SourceUnavailableError(url, "Fetch failed: 503")

        monkeypatch.setattr(cv_site_framework, "fetch_shared_page", failing_fetch)
        path = build_text_file(tmp_path / "cv.txt", VIABLE_TEXT)

        text = CvSiteFramework().extract_text(
            deepseek_url="https://share.example/abc",
            uploaded_file_path=str(path),
        )
        assert text == VIABLE_TEXT

    def test_scrape_runs_before_upload(self, tmp_path, monkeypatch):
        """Documents reach the extractor page first, upload second."""
        page = RawDocument(b"<html></html>", "html-page", "https://share.example/abc")
        monkeypatch.setattr(cv_site_framework, "fetch_shared_page", lambda url, timeout_seconds=None: page)
        path = build_text_file(tmp_path / "cv.txt", VIABLE_TEXT)

        extractor = MagicMock()
        extractor.extract_all.return_value.text = VIABLE_TEXT
        extractor.extract_all.return_value.source_name = "plain_text"

        CvSiteFramework(text_extractor=extractor).extract_text(
            deepseek_url="https://share.example/abc",
            uploaded_file_path=str(path),
        )
        documents = extractor.extract_all.call_args[0][0]
        assert [d.media_kind for d in documents] == ["html-page", "plain-text"]

    def test_parse_text_and_render(self):
        framework = CvSiteFramework()
        sections = framework.parse_text(VIABLE_TEXT)
        assert sections.experience == "Senior Engineer at Initech, 2019 to 2023"
        assert "<h1>Jane Doe</h1>" in framework.render(sections)
