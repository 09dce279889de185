"""sanitize.py
Allowlist HTML sanitizer applied before a generated page is committed.
"""
import re
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Comment

ALLOWED_TAGS = {
    # document scaffolding
    "html", "head", "body", "title", "meta",
    # block content
    "address", "article", "aside", "footer", "header",
    "h1", "h2", "h3", "h4", "h5", "h6", "hgroup", "main", "nav", "section",
    "blockquote", "dd", "div", "dl", "dt", "figcaption", "figure",
    "hr", "li", "ol", "p", "pre", "ul",
    # inline content
    "a", "abbr", "b", "bdi", "bdo", "br", "cite", "code", "data", "dfn",
    "em", "i", "kbd", "mark", "q", "rb", "rp", "rt", "rtc", "ruby",
    "s", "samp", "small", "span", "strong", "sub", "sup", "time", "u", "var", "wbr",
    # tables
    "caption", "col", "colgroup", "table", "tbody", "td", "tfoot", "th", "thead", "tr",
    # extras
    "img", "style",
}

ALLOWED_ATTRIBUTES = {
    "a": {"href", "name", "target", "rel"},
    "img": {"src", "alt", "width", "height"},
    "meta": {"charset", "name", "content"},
    "*": {"class", "id", "style"},
}

ALLOWED_SCHEMES = {"http", "https", "mailto", "tel"}
URL_ATTRIBUTES = {"href", "src"}
EVENT_HANDLER_PATTERN = re.compile(r"^on", re.IGNORECASE)


def is_allowed_url(value: str) -> bool:
    """True for relative links and links whose scheme is allowlisted."""
    # Browsers ignore embedded whitespace and control characters in schemes
    compact = re.sub(r"[\x00-\x20]+", "", value or "")
    scheme = urlparse(compact).scheme.lower()
    return scheme == "" or scheme in ALLOWED_SCHEMES


def _clean_attributes(tag) -> None:
    allowed = ALLOWED_ATTRIBUTES.get(tag.name, set()) | ALLOWED_ATTRIBUTES["*"]
    for attr in list(tag.attrs):
        name = attr.lower()
        if EVENT_HANDLER_PATTERN.match(name) or name not in allowed:
            del tag.attrs[attr]
            continue
        if name in URL_ATTRIBUTES and not is_allowed_url(tag.attrs[attr]):
            del tag.attrs[attr]


def sanitize_generated_html(html: str) -> str:
    """
    Clean a generated page before it is published.

    - `script` elements are removed together with their content
    - tags outside `ALLOWED_TAGS` are unwrapped (their children are kept)
    - attributes outside `ALLOWED_ATTRIBUTES` and every `on*` handler are dropped
    - `href` / `src` values with a non-allowlisted scheme are dropped
    - comments are removed

    Args:
        html (str): Page returned by the generator service.

    Returns:
        str: Sanitized HTML.
    """
    soup = BeautifulSoup(html or "", "html.parser")

    for tag in soup.find_all("script"):
        tag.decompose()

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    for tag in soup.find_all(True):
        if tag.name not in ALLOWED_TAGS:
            tag.unwrap()
            continue
        _clean_attributes(tag)

    return str(soup)
