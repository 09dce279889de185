"""docx_archive_text_source.py

Holds DocxArchiveTextSource, a raw fallback that reads the paragraphs stored
inside a Word archive when structured parsing yields too little text.
"""
import io
import re
import xml.etree.ElementTree as ET
from zipfile import ZipFile, BadZipFile

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.exceptions import FileOpenError
from cv_site.models import RawDocument
from cv_site.parse_classes.text_source.text_source import TextSource

DOCUMENT_XML_PATH = "word/document.xml"


class DocxArchiveTextSource(TextSource):
    """
    Fallback text source for Word documents.

    Opens the upload as a ZIP archive, parses ``word/document.xml`` and joins
    the text runs of every paragraph, one line each. Only runs when the
    best text found so far is shorter than `min_structured_text_length`.

    Args:
        min_structured_text_length (int): Threshold under which the structured
            Word text is considered too short and this scrape is attempted.
    """
    SOURCE_NAME = "docx_archive"
    SUPPORTED_MEDIA_KINDS = ["docx", "doc"]

    def __init__(
        self,
        min_structured_text_length: int = GENERATOR_DEFAULTS.MIN_STRUCTURED_TEXT_LENGTH,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.min_structured_text_length = min_structured_text_length

    def should_run(self, document: RawDocument, current_text: str) -> bool:
        return (
            self.supports(document)
            and len(current_text.strip()) < self.min_structured_text_length
        )

    def extract(self, document: RawDocument) -> str:
        """
        Raises:
            FileOpenError: If the bytes are not a ZIP archive or hold no document part.
            FileEmptyError: If the document part contains no text.
        """
        raw_xml = self._read_document_xml(document)
        try:
            text = read_word_paragraphs(raw_xml)
        except ET.ParseError as e:
            raise FileOpenError(document.source, str(e))
        return self._check_final_text(text, document)

    def _read_document_xml(self, document: RawDocument) -> bytes:
        try:
            with ZipFile(io.BytesIO(document.content)) as archive:
                return archive.read(DOCUMENT_XML_PATH)
        except (BadZipFile, KeyError) as e:
            raise FileOpenError(document.source, str(e))


def read_word_paragraphs(raw_xml: bytes) -> str:
    """
    Walk WordprocessingML and return one line per paragraph (`w:p`). Text runs
    (`w:t`) are concatenated, `w:tab` becomes a space and `w:br` / `w:cr` start
    a new line.
    """
    root = ET.fromstring(raw_xml)
    lines = []
    for paragraph in root.iter():
        if not paragraph.tag.endswith("}p"):
            continue
        parts = []
        for node in paragraph.iter():
            if node.tag.endswith("}t") and node.text:
                parts.append(node.text)
            elif node.tag.endswith("}tab"):
                parts.append(" ")
            elif node.tag.endswith("}br") or node.tag.endswith("}cr"):
                parts.append("\n")
        lines.extend("".join(parts).split("\n"))

    cleaned = (re.sub(r"\s+", " ", line).strip() for line in lines)
    return "\n".join(line for line in cleaned if line)
