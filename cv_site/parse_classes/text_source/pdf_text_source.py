"""pdf_text_source.py

Holds PDFTextSource class.
"""
import pymupdf

from cv_site.exceptions import FileOpenError
from cv_site.models import RawDocument

from cv_site.parse_classes.text_source.text_source import TextSource

class PDFTextSource(TextSource):
    """
    Text source for PDF documents.

    Uses PyMuPDF to extract the text of every page. Only used when the `pdf`
    capability is present.

    Attributes:
        SUPPORTED_MEDIA_KINDS (List[str]): Only ``pdf``.
    """
    SOURCE_NAME = "pdf"
    SUPPORTED_MEDIA_KINDS = ["pdf"]
    REQUIRED_CAPABILITY = "pdf"

    def extract(self, document: RawDocument) -> str:
        """
        Returns the text of all pages of the PDF, pages separated by newlines.

        Raises:
            FileOpenError: If the bytes cannot be opened by PyMuPDF.
            FileEmptyError: If the PDF contains no readable text.
        """
        full_text = self._get_pdf_contents(document)
        return self._check_final_text(full_text, document)

    def _get_pdf_contents(self, document: RawDocument) -> str:
        """
        Opens the PDF bytes using PyMuPDF, combines any pages, and returns
        its contents as a string.

        Raises:
            FileOpenError: If the PDF cannot be opened.
        """
        try:
            doc = pymupdf.open(stream=document.content, filetype="pdf")
        except Exception as e:
            raise FileOpenError(document.source, str(e))

        full_text = ""
        try:
            for page_number in range(doc.page_count):
                page = doc.load_page(page_number)
                full_text += page.get_text("text") + "\n"
        finally:
            doc.close()

        return full_text
