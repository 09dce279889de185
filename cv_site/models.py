"""models.py
Holds standardized data models used across various functions.
"""
from typing import Literal, Dict
from dataclasses import dataclass, field, asdict

from cv_site.config import GENERATOR_DEFAULTS

MediaKind = Literal[
    "pdf",
    "docx",
    "doc",
    "plain-text",
    "unknown-binary",
    "html-page",
]


@dataclass
class RawDocument:
    """
    Opaque bytes of an uploaded file or fetched page plus their declared kind.
    Lives only for the duration of a single request.

    Attributes:
        content (bytes): Raw bytes of the document.
        media_kind (MediaKind): Declared kind used to route the document to
            the matching TextSources.
        source (str): Local path or URL the bytes came from (used in logs).
    """
    content: bytes
    media_kind: MediaKind
    source: str = ""


@dataclass
class SourceResult:
    """
    Text produced by a single named TextSource.

    Attributes:
        source_name (str): `SOURCE_NAME` of the TextSource that produced the text.
            Empty when no source produced anything.
        text (str): Extracted plain text. Never None, may be empty.
    """
    source_name: str = ""
    text: str = ""


@dataclass
class CvSections:
    """
    Stores CV sections split out of extracted text.

    Every field defaults to an empty string. `raw` always holds the full
    extracted text the sections were built from.
    """
    name: str = ""
    summary: str = ""
    experience: str = ""
    education: str = ""
    skills: str = ""
    projects: str = ""
    achievements: str = ""
    contact: str = ""
    raw: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class ThemeConfig:
    """
    Presentation options for the rendered page.

    Attributes:
        theme_type (str): Free-form theme label shown in the footer.
        theme_colors (str): Space separated colour tokens. The first token is
            used as the primary colour.
        professional (bool): Professional flag shown in the footer.
    """
    theme_type: str = GENERATOR_DEFAULTS.DEFAULT_THEME_TYPE
    theme_colors: str = GENERATOR_DEFAULTS.DEFAULT_THEME_COLORS
    professional: bool = True


@dataclass(frozen=True)
class Capabilities:
    """
    Which optional extraction backends are usable in this process.
    Detected once at start up and read-only afterwards.
    """
    pdf: bool = True
    word_document: bool = True
    web_page: bool = True


@dataclass
class GenerateRequestData:
    """
    Inputs of a single generate call.
    """
    deepseek_url: str = ""
    uploaded_file_path: str | None = None
    theme: ThemeConfig = field(default_factory=ThemeConfig)


@dataclass
class PublishResult:
    """
    Outcome of committing a generated page to the hosted repository.

    Attributes:
        path (str): Repository path the page was written to.
        html_url (str | None): Browser URL of the committed file, if returned.
        raw_url (str): Raw content URL (valid for public repositories).
        sha (str | None): Blob SHA of the new file content.
        created (bool): True when the file did not exist before.
    """
    path: str
    html_url: str | None
    raw_url: str
    sha: str | None = None
    created: bool = True
