"""section_parser.py
Splits extracted CV text into CvSections with a single keyword scan.
"""
from typing import Dict, List, Optional, Tuple

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.models import CvSections
from cv_site.parse_classes.text_source.helpers.noise_filter import is_noise_line

DEFAULT_NAME_PLACEHOLDER = "Candidate Name"

# Field -> heading keywords. Matching is a case-insensitive substring test and
# the first matching line in document order wins.
DEFAULT_SECTION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "summary": ("summary", "about me", "objective"),
    "experience": ("experience", "work experience", "employment", "work history"),
    "education": ("education", "academic", "qualifications"),
    "skills": ("skills", "skill", "technologies"),
    "projects": ("projects", "project"),
    "achievements": ("achievements", "awards", "certifications", "accomplishments"),
    "contact": ("contact",),
}

# Fields filled from a heading range (summary has its own heuristic)
HEADING_FIELDS = ["experience", "education", "skills", "projects", "achievements", "contact"]

STRICT_HEADING_MAX_WORDS = 4


class SectionParser:
    """
    Deterministic, dependency free CV section splitter.

    The scan works on trimmed, non-empty lines:
        - name: first acceptable line among the first `name_scan_lines`
        - summary: a summary heading's range, else the lines after the name
        - experience, education, skills, projects, achievements, contact:
          lines after the field's first heading line up to the next line that
          contains any heading keyword
        - experience fallback: lines `fallback_start .. fallback_end` when no
          experience heading exists

    Args:
        section_keywords (Dict[str, Tuple[str, ...]] | None): Heading keywords per
            field. Defaults to `DEFAULT_SECTION_KEYWORDS`.
        strict_headings (bool): Also require heading lines to be short and not
            end with a period, so prose that mentions a keyword is not taken for
            a heading. Off by default.
    """

    def __init__(
        self,
        section_keywords: Optional[Dict[str, Tuple[str, ...]]] = None,
        strict_headings: bool = False,
        name_scan_lines: int = GENERATOR_DEFAULTS.NAME_SCAN_LINES,
        name_max_tokens: int = GENERATOR_DEFAULTS.NAME_MAX_TOKENS,
        summary_max_lines: int = GENERATOR_DEFAULTS.SUMMARY_MAX_LINES,
        fallback_start: int = GENERATOR_DEFAULTS.FALLBACK_EXPERIENCE_START,
        fallback_end: int = GENERATOR_DEFAULTS.FALLBACK_EXPERIENCE_END,
    ):
        keywords = section_keywords if section_keywords is not None else DEFAULT_SECTION_KEYWORDS
        self.section_keywords = {
            field: tuple(k.lower() for k in kws) for field, kws in keywords.items()
        }
        # Union of every field's keywords, used to find where a section ends
        self.heading_keywords = tuple(
            k for kws in self.section_keywords.values() for k in kws
        )
        self.strict_headings = strict_headings
        self.name_scan_lines = name_scan_lines
        self.name_max_tokens = name_max_tokens
        self.summary_max_lines = summary_max_lines
        self.fallback_start = fallback_start
        self.fallback_end = fallback_end

    # ----------------------
    # Public interface
    # ----------------------
    def parse(self, text: str) -> CvSections:
        """
        Split `text` into CvSections. `raw` is always `text` unchanged.
        """
        text = text or ""
        lines = split_lines(text)
        sections = CvSections(raw=text)

        name_index = self._find_name_index(lines)
        sections.name = lines[name_index] if name_index is not None else DEFAULT_NAME_PLACEHOLDER

        for field in HEADING_FIELDS:
            if field in self.section_keywords:
                setattr(sections, field, self._extract_heading_range(lines, field))

        sections.summary = self._extract_summary(lines, name_index)

        if not sections.experience and len(lines) > self.fallback_start:
            end = min(len(lines), self.fallback_end)
            sections.experience = "\n".join(lines[self.fallback_start:end])

        return sections

    # ----------------------
    # Heuristics
    # ----------------------
    def _find_name_index(self, lines: List[str]) -> Optional[int]:
        """Index of the first line in the scan window that looks like a name."""
        for i, line in enumerate(lines[:self.name_scan_lines]):
            if is_noise_line(line):
                continue
            if len(line) > 3 and len(line.split()) <= self.name_max_tokens:
                return i
        return None

    def _extract_summary(self, lines: List[str], name_index: Optional[int]) -> str:
        if "summary" in self.section_keywords:
            summary = self._extract_heading_range(lines, "summary")
            if summary:
                return " ".join(summary.split("\n"))

        start = name_index + 1 if name_index is not None else 0
        # Headings inside the window are kept
        return " ".join(lines[start:start + self.summary_max_lines])

    def _extract_heading_range(self, lines: List[str], field: str) -> str:
        """
        Lines after the first heading for `field`, up to the next heading of
        any field (exclusive) or the end of the text.
        """
        heading_index = self._find_heading_index(lines, self.section_keywords[field])
        if heading_index is None:
            return ""

        end = len(lines)
        for j in range(heading_index + 1, len(lines)):
            if self._is_heading(lines[j], self.heading_keywords):
                end = j
                break
        return "\n".join(lines[heading_index + 1:end])

    def _find_heading_index(self, lines: List[str], keywords: Tuple[str, ...]) -> Optional[int]:
        for i, line in enumerate(lines):
            if self._is_heading(line, keywords):
                return i
        return None

    def _is_heading(self, line: str, keywords: Tuple[str, ...]) -> bool:
        lower = line.lower()
        if not any(keyword in lower for keyword in keywords):
            return False
        if self.strict_headings:
            return len(line.split()) <= STRICT_HEADING_MAX_WORDS and not line.rstrip().endswith(".")
        return True


def split_lines(text: str) -> List[str]:
    """Trimmed, non-empty lines of `text` in their original order."""
    lines = (line.strip() for line in text.replace("\r", "").split("\n"))
    return [line for line in lines if line]
