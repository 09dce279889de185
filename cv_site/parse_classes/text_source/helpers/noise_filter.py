"""noise_filter.py
Line level heuristics for spotting script remnants, bare URLs and page chrome
in scraped or extracted text.
"""

import re
from typing import Iterable, List

# Navigation / UI strings that pollute shared page snapshots (matched case-sensitively)
NAVIGATION_NOISE_TERMS = [
    "Share",
    "Copied",
    "OpenAI",
    "Sign in",
    "Sign up",
    "DeepSeek",
    "Home",
    "About",
    "Log in",
    "Cookie",
]

SCRIPT_CALL_PATTERNS = [
    re.compile(r"\bfunction\s*\("),
    re.compile(r"=>"),
    re.compile(r"^\s*(var|let|const)\s+[\w$]+\s*="),
    re.compile(r"\b(window|document|self)\.[\w$]+"),
    re.compile(r"__NEXT_DATA__|__next_f"),
    re.compile(r'^\s*[\{\[]\s*"'),
    re.compile(r"[\w$\.]+\([^)]*\)\s*;\s*$"),
]

URL_LINE_PATTERN = re.compile(r"^(https?://|www\.)\S+$", re.IGNORECASE)

# A single whitespace-free run longer than this is treated as a token blob
MAX_TOKEN_LENGTH = 60


def has_long_token(line: str, max_token_length: int = MAX_TOKEN_LENGTH) -> bool:
    """Return True if any whitespace separated token exceeds `max_token_length`."""
    return any(len(token) > max_token_length for token in line.split())


def is_noise_line(line: str) -> bool:
    """
    Return True for lines that look like script code, a bare URL or an
    encoded blob rather than human-readable CV text.
    """
    stripped = line.strip()
    if not stripped:
        return False
    if URL_LINE_PATTERN.match(stripped):
        return True
    if has_long_token(stripped):
        return True
    return any(pattern.search(stripped) for pattern in SCRIPT_CALL_PATTERNS)


def contains_navigation_term(line: str, terms: Iterable[str] = NAVIGATION_NOISE_TERMS) -> bool:
    """Return True if `line` contains any navigation chrome term."""
    return any(term in line for term in terms)


def filter_page_lines(
    lines: Iterable[str],
    min_line_length: int = 4,
    navigation_terms: Iterable[str] = NAVIGATION_NOISE_TERMS,
) -> List[str]:
    """
    Keep only the lines of a whole-page text dump that look like content.

    Drops lines that are shorter than `min_line_length` once trimmed, contain
    a navigation term, or are noise according to `is_noise_line`.
    """
    navigation_terms = list(navigation_terms)
    kept = []
    for line in lines:
        s = line.strip()
        if len(s) < min_line_length:
            continue
        if contains_navigation_term(s, navigation_terms):
            continue
        if is_noise_line(s):
            continue
        kept.append(s)
    return kept
