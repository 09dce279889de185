"""text_source.py

Holds abstract TextSource class inherited by media-specific text sources.
"""

from typing import List, Optional
from abc import ABC, abstractmethod

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.exceptions import FileEmptyError
from cv_site.models import Capabilities, MediaKind, RawDocument


class TextSource(ABC):
    """
    Abstract base class representing one way of turning a RawDocument into
    plain text.

    All concrete sources must implement the `extract` method. `extract` is
    allowed to raise; the TextExtractor chain catches, logs and moves on to the
    next source.

    Args:
        min_viable_text_length (int): Stripped length below which the current
            candidate text is considered unusable. Sources that act as fallbacks
            use it in `should_run`.

    Attributes:
        SOURCE_NAME (str): Short identifier used in logs and SourceResults.
        SUPPORTED_MEDIA_KINDS (List[MediaKind]): Document kinds this source
            understands (to be overwritten by children).
        REQUIRED_CAPABILITY (str | None): Name of the `Capabilities` flag the
            source depends on, or None if it has no optional backend.
    """
    SOURCE_NAME: str = ""
    SUPPORTED_MEDIA_KINDS: List[MediaKind] = []
    REQUIRED_CAPABILITY: Optional[str] = None

    def __init__(
        self,
        min_viable_text_length: int = GENERATOR_DEFAULTS.MIN_VIABLE_TEXT_LENGTH,
    ):
        self.min_viable_text_length = min_viable_text_length

    @staticmethod
    def _requires_raw_document(func):
        """Decorator to ensure `extract` is handed a RawDocument."""
        def wrapper(self, document, *args, **kwargs):
            if not isinstance(document, RawDocument):
                raise TypeError(
                    f"{type(self).__name__}.{func.__name__} expects a RawDocument, "
                    f"got {type(document).__name__}"
                )
            return func(self, document, *args, **kwargs)
        return wrapper

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "extract" in cls.__dict__:
            cls.extract = cls._requires_raw_document(cls.extract)

    def supports(self, document: RawDocument) -> bool:
        """Return True if the document's media kind is handled by this source."""
        return document.media_kind in self.SUPPORTED_MEDIA_KINDS

    def is_available(self, capabilities: Capabilities) -> bool:
        """Return True if the optional backend this source needs is present."""
        if self.REQUIRED_CAPABILITY is None:
            return True
        return bool(getattr(capabilities, self.REQUIRED_CAPABILITY, False))

    def should_run(self, document: RawDocument, current_text: str) -> bool:
        """
        Decide whether to run for `document` given the best text found so far.
        By default a source runs for every document kind it supports.
        """
        return self.supports(document)

    def _check_final_text(self, full_text: str, document: RawDocument) -> str:
        """
        Validate the extracted text.

        Raises:
            FileEmptyError: If `full_text` is empty or contains only whitespace.
        """
        if not full_text or not full_text.strip():
            raise FileEmptyError(document.source)
        return full_text

    @abstractmethod
    def extract(self, document: RawDocument) -> str:
        """
        Extract plain text from `document`.

        Returns:
            str: Best-effort plain text.

        Raises:
            FileOpenError: If the document bytes cannot be opened by the backend.
            FileEmptyError: If the document holds no readable text.
        """
        pass
