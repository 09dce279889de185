"""word_document_text_source.py

Holds WordDocumentTextSource class using docx2txt for structured text extraction.
"""
import io

import docx2txt

from cv_site.exceptions import FileOpenError
from cv_site.models import RawDocument
from cv_site.parse_classes.text_source.text_source import TextSource


class WordDocumentTextSource(TextSource):
    """
    Text source for Microsoft Word documents.

    Uses ``docx2txt`` to extract the document's structured text (including
    textboxes). Legacy ``.doc`` uploads are routed here too; docx2txt fails on
    them and the chain falls through to the next source.
    """

    SOURCE_NAME = "word_document"
    SUPPORTED_MEDIA_KINDS = ["docx", "doc"]
    REQUIRED_CAPABILITY = "word_document"

    def extract(self, document: RawDocument) -> str:
        """
        Raises:
            FileOpenError: If the document cannot be opened or read.
            FileEmptyError: If the document contains no readable text.
        """
        full_text = self._get_docx_contents(document)
        return self._check_final_text(full_text, document)

    def _get_docx_contents(self, document: RawDocument) -> str:
        """
        Opens the Word document bytes using docx2txt and extracts all text content.

        Raises:
            FileOpenError: If the Word document cannot be opened or read.
        """
        try:
            full_text = docx2txt.process(io.BytesIO(document.content))
        except Exception as e:
            raise FileOpenError(document.source, str(e))

        return (full_text or "").strip()
