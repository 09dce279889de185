"""dummy_classes.py
Holds dummy TextSource subclasses to test the extraction chain with
"""
from typing import List, Optional

from cv_site.models import RawDocument
from cv_site.parse_classes.text_source.text_source import TextSource


class DummyTextSource(TextSource):
    """A TextSource that returns fixed text and records every call."""
    SOURCE_NAME = "dummy"
    SUPPORTED_MEDIA_KINDS = ["pdf", "docx", "doc", "plain-text", "unknown-binary", "html-page"]

    def __init__(
        self,
        text: str = "dummy",
        source_name: Optional[str] = None,
        required_capability: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.text = text
        if source_name is not None:
            self.SOURCE_NAME = source_name
        self.REQUIRED_CAPABILITY = required_capability
        self.calls: List[RawDocument] = []

    def extract(self, document: RawDocument) -> str:
        self.calls.append(document)
        return self.text


class FailingTextSource(DummyTextSource):
    """A TextSource whose backend always blows up."""
    SOURCE_NAME = "failing"

    def extract(self, document: RawDocument) -> str:
        self.calls.append(document)
        raise RuntimeError("backend exploded")
