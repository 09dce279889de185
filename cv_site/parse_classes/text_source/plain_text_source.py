"""plain_text_source.py

Holds PlainTextSource, the last resort that reads an upload as UTF-8 text.
"""

from cv_site.exceptions import FileOpenError
from cv_site.models import RawDocument
from cv_site.parse_classes.text_source.text_source import TextSource


class PlainTextSource(TextSource):
    """
    Reads the document bytes as strict UTF-8 text.

    Runs for plain-text and unknown-binary uploads, and for any other file kind
    while the best text found so far is below the viability threshold. Binary
    content fails to decode and is reported as unreadable instead of being
    turned into replacement characters.
    """
    SOURCE_NAME = "plain_text"
    SUPPORTED_MEDIA_KINDS = ["plain-text", "unknown-binary"]

    # Fetched pages are never re-read as raw text
    EXCLUDED_MEDIA_KINDS = ["html-page"]

    def should_run(self, document: RawDocument, current_text: str) -> bool:
        if document.media_kind in self.EXCLUDED_MEDIA_KINDS:
            return False
        if self.supports(document):
            return True
        return len(current_text.strip()) < self.min_viable_text_length

    def extract(self, document: RawDocument) -> str:
        """
        Raises:
            FileOpenError: If the bytes are not valid UTF-8 or contain NUL bytes.
            FileEmptyError: If the decoded text is blank.
        """
        if b"\x00" in document.content:
            raise FileOpenError(document.source, "Binary content (NUL bytes) cannot be read as text.")
        try:
            text = document.content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise FileOpenError(document.source, str(e))

        return self._check_final_text(text.replace("\r", ""), document)
