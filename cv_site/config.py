"""config.py
Holds various defaults for the CV site generator settings.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()  # load .env

# --------------------------------------------------------------
# SETUP DEFAULT VALUES
# --------------------------------------------------------------
@dataclass
class GeneratorDefaults:
    """
    Default settings for parameters used across the cv_site repo.
    """
    # ---- Source acquisition settings ----
    MAX_FILE_SIZE_MB: float = field(
        default = 5.0,
        metadata = {
            "description": "Maximum allowed upload size in MB"
    })
    FETCH_TIMEOUT_SECONDS: float = field(
        default = 20,
        metadata = {
            "description": "Timeout for fetching a shared page URL (no retries)"
    })
    UPLOAD_DIR: str = field(
        default = os.getenv("UPLOAD_DIR", "uploads"),
        metadata = {
            "description": "Directory the upload endpoint stores files in"
    })

    # ---- TextExtractor settings ----
    MIN_VIABLE_TEXT_LENGTH: int = field(
        default = 80,
        metadata = {
            "description": "Minimum stripped text length required to render a page"
    })
    MIN_STRUCTURED_TEXT_LENGTH: int = field(
        default = 80,
        metadata = {
            "description": "Below this length the raw docx archive scrape is attempted"
    })
    SOURCE_SELECTION: str = field(
        default = "longest",
        metadata = {
            "description": 'How competing sources are chosen: "longest" or "first_viable"'
    })
    SCRAPE_MIN_COLLECTED_CHARS: int = field(
        default = 400,
        metadata = {
            "description": "Cumulative text a content selector must yield to be accepted"
    })
    SCRAPE_MIN_ELEMENT_CHARS: int = field(
        default = 20,
        metadata = {
            "description": "Elements with less visible text than this are ignored"
    })

    # ---- SectionParser settings ----
    NAME_SCAN_LINES: int = field(
        default = 6,
        metadata = {
            "description": "Number of leading lines searched for the candidate name"
    })
    NAME_MAX_TOKENS: int = field(
        default = 8,
        metadata = {
            "description": "Maximum whitespace separated tokens in a name line"
    })
    SUMMARY_MAX_LINES: int = field(
        default = 5,
        metadata = {
            "description": "Lines after the name line used as the summary"
    })
    FALLBACK_EXPERIENCE_START: int = field(
        default = 6,
        metadata = {
            "description": "First line index used when no experience heading exists"
    })
    FALLBACK_EXPERIENCE_END: int = field(
        default = 60,
        metadata = {
            "description": "Exclusive end line index of the fallback experience block"
    })

    # ---- HTML renderer settings ----
    DEFAULT_THEME_TYPE: str = field(
        default = "modern",
        metadata = {
            "description": "Theme type shown in the page footer"
    })
    DEFAULT_THEME_COLORS: str = field(
        default = "black",
        metadata = {
            "description": "Space separated colour tokens; the first is the primary colour"
    })
    DEFAULT_PRIMARY_COLOR: str = field(
        default = "#0a0a0a",
        metadata = {
            "description": "Primary colour used when no usable colour token is given"
    })
    ACCENT_COLOR: str = field(
        default = "#6c5ce7",
        metadata = {
            "description": "Accent colour of the avatar gradient"
    })


# Import this where needed
GENERATOR_DEFAULTS = GeneratorDefaults()
