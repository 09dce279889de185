"""web_page_text_source.py

Holds WebPageTextSource, which pulls CV text out of a shared-page HTML snapshot.
"""
import re
from typing import List, Optional

from bs4 import BeautifulSoup

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.models import RawDocument
from cv_site.parse_classes.text_source.text_source import TextSource
from cv_site.parse_classes.text_source.helpers.noise_filter import filter_page_lines

# Elements whose content is never visible text
STRIPPED_ELEMENTS = ["script", "style", "noscript", "iframe"]

EVENT_HANDLER_ATTRIBUTE_PATTERN = re.compile(r"^on\w+", re.IGNORECASE)

# Ordered list of regions that usually hold the conversation / document body
CONTENT_SELECTORS = [
    "article",
    ".chat",
    ".message",
    ".chat-message",
    ".prose",
    "#root",
    "main",
]


class WebPageTextSource(TextSource):
    """
    Text source for fetched shared pages.

    1. Drops script-like elements and inline event handler attributes.
    2. Tries `CONTENT_SELECTORS` in order; the first selector whose elements add
       up to more than `min_collected_chars` of visible text wins.
    3. Otherwise falls back to the whole body text, filtered line by line for
       navigation chrome and code remnants.

    Args:
        selectors (List[str] | None): Override for `CONTENT_SELECTORS`.
        min_collected_chars (int): Text a selector must yield to be accepted.
        min_element_chars (int): Elements with less text than this are ignored.
    """
    SOURCE_NAME = "web_page"
    SUPPORTED_MEDIA_KINDS = ["html-page"]
    REQUIRED_CAPABILITY = "web_page"

    def __init__(
        self,
        selectors: Optional[List[str]] = None,
        min_collected_chars: int = GENERATOR_DEFAULTS.SCRAPE_MIN_COLLECTED_CHARS,
        min_element_chars: int = GENERATOR_DEFAULTS.SCRAPE_MIN_ELEMENT_CHARS,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.selectors = list(selectors) if selectors is not None else list(CONTENT_SELECTORS)
        self.min_collected_chars = min_collected_chars
        self.min_element_chars = min_element_chars

    def extract(self, document: RawDocument) -> str:
        """
        Raises:
            FileEmptyError: If no visible text survives the filtering.
        """
        soup = BeautifulSoup(document.content, "html.parser")
        self._strip_executable_content(soup)

        collected = self._collect_from_selectors(soup)
        if collected is None:
            collected = self._collect_from_body(soup)

        collected = re.sub(r"\n{3,}", "\n\n", collected).strip()
        return self._check_final_text(collected, document)

    def _strip_executable_content(self, soup: BeautifulSoup) -> None:
        """Remove script-like elements and every on* attribute, in place."""
        for element in soup(STRIPPED_ELEMENTS):
            element.decompose()

        for element in soup.find_all(True):
            for attribute in list(element.attrs):
                if EVENT_HANDLER_ATTRIBUTE_PATTERN.match(attribute):
                    del element.attrs[attribute]

    def _collect_from_selectors(self, soup: BeautifulSoup) -> Optional[str]:
        """
        Return the text of the first selector yielding more than
        `min_collected_chars`, or None if no selector qualifies.
        """
        for selector in self.selectors:
            parts = []
            for element in soup.select(selector):
                text = _visible_text(element)
                if len(text) > self.min_element_chars:
                    parts.append(text)

            collected = "\n\n".join(parts)
            if len(collected.strip()) > self.min_collected_chars:
                return collected
        return None

    def _collect_from_body(self, soup: BeautifulSoup) -> str:
        """Whole page text with navigation chrome and code remnants removed."""
        body = soup.body or soup
        lines = body.get_text(separator="\n").split("\n")
        return "\n".join(filter_page_lines(lines))


def _visible_text(element) -> str:
    """Element text with one trimmed, non-empty line per text block."""
    lines = (line.strip() for line in element.get_text(separator="\n").split("\n"))
    return "\n".join(line for line in lines if line)
