"""text_extractor.py
Runs an ordered chain of TextSources over RawDocuments and keeps the best text.
"""
import sys
from typing import Iterable, List, Optional

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.exceptions import TextSourceConfigError
from cv_site.logging import LoggerFactory
from cv_site.models import Capabilities, RawDocument, SourceResult

from cv_site.parse_classes.text_source.text_source import TextSource
from cv_site.parse_classes.text_extractor.helpers.capabilities import detect_capabilities
from cv_site.parse_classes.text_extractor.helpers.source_list import (
    build_default_source_list,
    verify_source_list,
)

SELECTION_POLICIES = ["longest", "first_viable"]

logger_factory = LoggerFactory()
logger = logger_factory.get_logger(
    name="text_extractor",
    logger_type="extraction"
)


class TextExtractor:
    """
    Best-effort extraction across alternative text sources.

    Every source that supports a document (and whose optional backend is
    available) is tried in priority order. A source that raises is logged and
    skipped, so a single failing backend never fails the request.

    Selection policies:
        - "longest": a source's text replaces the current candidate only when
          it is strictly longer once stripped.
        - "first_viable": the first text reaching `min_viable_text_length`
          wins and later sources are not run.

    Attributes:
        sources (List[TextSource]): Usable sources in priority order.
        capabilities (Capabilities): Backend flags the sources were filtered with.
        selection (str): Active selection policy.
    """
    def __init__(
        self,
        sources: Optional[List[TextSource]] = None,
        capabilities: Optional[Capabilities] = None,
        selection: str = GENERATOR_DEFAULTS.SOURCE_SELECTION,
        min_viable_text_length: int = GENERATOR_DEFAULTS.MIN_VIABLE_TEXT_LENGTH,
    ):
        """
        Args:
            sources (Optional[List[TextSource]]): Ordered sources to use. If None,
                the default list is built for `capabilities`.
            capabilities (Optional[Capabilities]): Declared backend availability.
                If None, the installed backends are detected.
            selection (str): "longest" or "first_viable".
            min_viable_text_length (int): Viability threshold used by "first_viable".
        """
        if selection not in SELECTION_POLICIES:
            raise TextSourceConfigError(
                f"Unknown selection policy '{selection}'. Expected one of {SELECTION_POLICIES}."
            )
        self.selection = selection
        self.min_viable_text_length = min_viable_text_length
        self.capabilities = capabilities if capabilities is not None else detect_capabilities()

        if sources is None:
            sources = build_default_source_list(
                capabilities=self.capabilities,
                min_viable_text_length=min_viable_text_length,
            )
        verify_source_list(sources)

        self.sources = []
        for source in sources:
            if source.is_available(self.capabilities):
                self.sources.append(source)
            else:
                logger.info(
                    f"Source '{source.SOURCE_NAME}' disabled: capability "
                    f"'{source.REQUIRED_CAPABILITY}' is not available."
                )

    def _is_viable(self, text: str) -> bool:
        return len(text.strip()) >= self.min_viable_text_length

    def _run_source(self, source: TextSource, document: RawDocument) -> Optional[str]:
        """
        Run a single source, returning None if it raised.

        Failures are logged to the source-specific failure log, unless running
        under pytest.
        """
        try:
            return source.extract(document)
        except Exception as e:
            logger.warning(
                f"Source '{source.SOURCE_NAME}' failed for '{document.source}': {e}"
            )
            if not any("pytest" in arg for arg in sys.argv):
                logger_factory.get_source_failure_logger(source.SOURCE_NAME).warning(
                    f"{type(e).__name__} while extracting '{document.source}': {e}"
                )
            return None

    def extract(
        self,
        document: RawDocument,
        current: Optional[SourceResult] = None,
    ) -> SourceResult:
        """
        Run the chain over a single document.

        Args:
            document (RawDocument): Document to extract text from.
            current (Optional[SourceResult]): Best result found so far (e.g. from
                an earlier document). It is kept unless a source beats it.

        Returns:
            SourceResult: The winning text and the name of the source that produced it.
        """
        best = current if current is not None else SourceResult()

        for source in self.sources:
            if self.selection == "first_viable" and self._is_viable(best.text):
                break
            if not source.should_run(document, best.text):
                continue

            text = self._run_source(source, document)
            if text is None:
                continue

            if len(text.strip()) > len(best.text.strip()):
                logger.debug(
                    f"Source '{source.SOURCE_NAME}' produced {len(text.strip())} characters "
                    f"(previous best: {len(best.text.strip())})."
                )
                best = SourceResult(source_name=source.SOURCE_NAME, text=text)

        return best

    def extract_all(self, documents: Iterable[RawDocument]) -> SourceResult:
        """
        Run the chain over several documents in order (scrape first, then the
        upload), carrying the best result across them.
        """
        best = SourceResult()
        for document in documents:
            best = self.extract(document, current=best)
        return best
