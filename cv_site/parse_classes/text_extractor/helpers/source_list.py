"""source_list.py
Builds and verifies the ordered list of TextSources used by TextExtractor.
"""

from typing import List, Optional

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.models import Capabilities

from cv_site.parse_classes.text_source.text_source import TextSource
from cv_site.parse_classes.text_source.docx_archive_text_source import DocxArchiveTextSource
from cv_site.parse_classes.text_source.plain_text_source import PlainTextSource


def build_default_source_list(
    capabilities: Capabilities,
    min_viable_text_length: int = GENERATOR_DEFAULTS.MIN_VIABLE_TEXT_LENGTH,
    min_structured_text_length: int = GENERATOR_DEFAULTS.MIN_STRUCTURED_TEXT_LENGTH,
) -> List[TextSource]:
    """
    Build the default priority-ordered source list, highest priority first:

        1. WebPageTextSource       (html-page)
        2. WordDocumentTextSource  (docx / doc)
        3. DocxArchiveTextSource   (docx / doc, only if the text so far is short)
        4. PDFTextSource           (pdf)
        5. PlainTextSource         (plain-text / unknown-binary, or anything still short)

    Sources backed by an optional library are only imported when the matching
    capability flag is set.

    Args:
        capabilities (Capabilities): Which optional backends are installed.
        min_viable_text_length (int): Viability threshold handed to every source.
        min_structured_text_length (int): Threshold that triggers the archive scrape.

    Returns:
        List[TextSource]: Instantiated sources in priority order.
    """
    source_defaults = dict(min_viable_text_length=min_viable_text_length)
    sources: List[TextSource] = []

    if capabilities.web_page:
        from cv_site.parse_classes.text_source.web_page_text_source import WebPageTextSource
        sources.append(WebPageTextSource(**source_defaults))

    if capabilities.word_document:
        from cv_site.parse_classes.text_source.word_document_text_source import WordDocumentTextSource
        sources.append(WordDocumentTextSource(**source_defaults))

    sources.append(
        DocxArchiveTextSource(
            min_structured_text_length=min_structured_text_length,
            **source_defaults,
        )
    )

    if capabilities.pdf:
        from cv_site.parse_classes.text_source.pdf_text_source import PDFTextSource
        sources.append(PDFTextSource(**source_defaults))

    sources.append(PlainTextSource(**source_defaults))

    verify_source_list(sources)
    return sources


def verify_source_list(sources: Optional[List[TextSource]]) -> None:
    """
    Verifies the format and content of a source list.

    Raises:
        TypeError: If `sources` is not a list or holds anything other than
            TextSource instances.
    """
    if not isinstance(sources, list):
        raise TypeError(
            f"sources must be a list, got {type(sources).__name__}"
        )
    for source in sources:
        if not isinstance(source, TextSource):
            raise TypeError(
                f"All items in sources must be TextSource instances, got {type(source).__name__}"
            )
