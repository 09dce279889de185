"""cv_site_framework.py
Holds framework to orchestrate acquisition, TextExtractor(), SectionParser()
and the HTML renderer and return a rendered CV page.
"""

from typing import List, Optional

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.exceptions import (
    CvSiteConfigError,
    ExtractionInsufficientError,
    FileParserError,
    SourceUnavailableError,
)
from cv_site.logging import LoggerFactory
from cv_site.models import CvSections, GenerateRequestData, RawDocument, ThemeConfig

from cv_site.parse_classes.source_loader.document_loader import load_uploaded_document
from cv_site.parse_classes.source_loader.page_fetcher import fetch_shared_page
from cv_site.parse_classes.text_extractor.text_extractor import TextExtractor
from cv_site.parse_classes.section_parser.section_parser import SectionParser
from cv_site.parse_classes.html_renderer.html_renderer import render_cv_page

logger_factory = LoggerFactory()
logger = logger_factory.get_logger(
    name="cv_site_framework",
    logger_type="default"
)


class CvSiteFramework:
    """
    Orchestrates the complete generation process, from a shared-page URL and/or
    an uploaded file to a rendered HTML page.

    Combines:
        - source acquisition (:func:`fetch_shared_page`, :func:`load_uploaded_document`)
        - ``TextExtractor`` (ordered fallback chain of TextSources)
        - ``SectionParser``
        - :func:`render_cv_page`

    This class supports dependency overrides to simplify testing. During tests,
    you can inject:
        * ``forced_extracted_text`` - to bypass acquisition and extraction.

    Example
    -------
    >>> framework = CvSiteFramework()
    >>> html = framework.generate(GenerateRequestData(uploaded_file_path="cv.pdf"))
    """

    def __init__(
        self,
        text_extractor: Optional[TextExtractor] = None,
        section_parser: Optional[SectionParser] = None,
        min_viable_text_length: int = GENERATOR_DEFAULTS.MIN_VIABLE_TEXT_LENGTH,
        max_file_size_mb: Optional[float] = GENERATOR_DEFAULTS.MAX_FILE_SIZE_MB,
        fetch_timeout_seconds: float = GENERATOR_DEFAULTS.FETCH_TIMEOUT_SECONDS,
        forced_extracted_text: Optional[str] = None,
    ):
        """
        Initialize the CvSiteFramework.

        Args:
            text_extractor (TextExtractor | None): Extraction chain. Defaults to a
                TextExtractor built for the detected capabilities.
            section_parser (SectionParser | None): Parser used on the winning text.
            min_viable_text_length (int): Stripped text shorter than this is
                rejected instead of rendered.
            max_file_size_mb (float | None): Maximum allowed upload size in MB.
            fetch_timeout_seconds (float): Timeout of the shared-page fetch.
            forced_extracted_text (str | None): When provided, bypasses acquisition
                and extraction and is used as the extracted text (useful for testing).
        """
        if min_viable_text_length < 0:
            raise CvSiteConfigError(
                f"min_viable_text_length must be >= 0, got {min_viable_text_length}."
            )

        self.min_viable_text_length = min_viable_text_length
        self.max_file_size_mb = max_file_size_mb
        self.fetch_timeout_seconds = fetch_timeout_seconds

        self.text_extractor = text_extractor or TextExtractor(
            min_viable_text_length=min_viable_text_length
        )
        self.section_parser = section_parser or SectionParser()

        # Testing hooks
        self.forced_extracted_text = forced_extracted_text

    # ----------------------
    # Pipeline steps
    # ----------------------
    def _acquire_documents(
        self,
        deepseek_url: Optional[str],
        uploaded_file_path: Optional[str],
    ) -> List[RawDocument]:
        """
        Fetch / load every requested source, scrape first. Sources that cannot
        be acquired are logged and skipped.
        """
        documents: List[RawDocument] = []

        if deepseek_url:
            try:
                documents.append(
                    fetch_shared_page(deepseek_url, timeout_seconds=self.fetch_timeout_seconds)
                )
            except SourceUnavailableError as e:
                logger.warning(f"Skipping shared page: {e}")

        if uploaded_file_path:
            try:
                documents.append(
                    load_uploaded_document(uploaded_file_path, max_file_size_mb=self.max_file_size_mb)
                )
            except (FileNotFoundError, FileParserError) as e:
                logger.warning(f"Skipping uploaded file: {e}")

        return documents

    def extract_text(
        self,
        deepseek_url: Optional[str] = None,
        uploaded_file_path: Optional[str] = None,
    ) -> str:
        """
        Run acquisition and the extraction chain and return the best text found.

        If ``self.forced_extracted_text`` exists it is returned unchanged.

        Returns:
            str: Extracted text, possibly empty.
        """
        if self.forced_extracted_text is not None:
            return self.forced_extracted_text

        documents = self._acquire_documents(deepseek_url, uploaded_file_path)
        result = self.text_extractor.extract_all(documents)

        if result.source_name:
            logger.info(
                f"Extracted {len(result.text.strip())} characters using '{result.source_name}'."
            )
        else:
            logger.info("No source produced any text.")
        return result.text

    def parse_text(self, text: str) -> CvSections:
        return self.section_parser.parse(text)

    def render(self, sections: CvSections, theme: Optional[ThemeConfig] = None) -> str:
        return render_cv_page(sections, theme)

    def generate(self, request: GenerateRequestData) -> str:
        """
        Full pipeline: acquire sources -> extract text -> parse sections -> render.

        Args:
            request (GenerateRequestData): Shared-page URL and/or uploaded file
                path plus the theme to render with.

        Returns:
            str: A complete HTML document.

        Raises:
            CvSiteConfigError: If neither a URL nor an uploaded file path is given.
            ExtractionInsufficientError: If the best text is shorter than
                ``min_viable_text_length`` once stripped.
        """
        if not request.deepseek_url and not request.uploaded_file_path:
            raise CvSiteConfigError(
                "Provide a shared page link (deepseekUrl) or an uploaded file path (uploadedFilePath)."
            )

        text = self.extract_text(
            deepseek_url=request.deepseek_url,
            uploaded_file_path=request.uploaded_file_path,
        )

        stripped_length = len(text.strip())
        if stripped_length < self.min_viable_text_length:
            raise ExtractionInsufficientError(
                length=stripped_length,
                minimum=self.min_viable_text_length,
            )

        sections = self.parse_text(text)
        return self.render(sections, request.theme)
