"""html_renderer.py
Renders CvSections into a single self-contained HTML page.
"""
import os
import re
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.models import CvSections, ThemeConfig
from cv_site.parse_classes.section_parser.section_parser import DEFAULT_NAME_PLACEHOLDER

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")
TEMPLATE_NAME = "cv_page.html"

# Only bare colour words and hex colours are allowed into the stylesheet
SAFE_COLOR_PATTERN = re.compile(r"^(#[0-9a-fA-F]{3,8}|[a-zA-Z]{3,30})$")
SKILL_SPLIT_PATTERN = re.compile(r"[,\n]+")

# (field, heading, placeholder) for the main column, in display order
MAIN_BLOCKS = [
    ("experience", "Experience", "No experience section found."),
    ("projects", "Projects", "No projects listed."),
    ("education", "Education", "No education section found."),
    ("achievements", "Achievements", "No achievements listed."),
]
SKILLS_PLACEHOLDER = "No skills found."
CONTACT_PLACEHOLDER = "No contact info found."


def nl2br(value: Optional[str]) -> Markup:
    """Escape `value`, then turn its newlines into <br> tags."""
    return escape(value or "").replace("\n", Markup("<br>"))


def _build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.filters["nl2br"] = nl2br
    return env


_ENVIRONMENT = _build_environment()


def resolve_primary_color(theme_colors: Optional[str]) -> str:
    """
    First whitespace separated token of `theme_colors`, if it is a safe CSS
    colour token; otherwise the default primary colour.
    """
    tokens = (theme_colors or "").split()
    if tokens and SAFE_COLOR_PATTERN.match(tokens[0]):
        return tokens[0]
    return GENERATOR_DEFAULTS.DEFAULT_PRIMARY_COLOR


def split_skills(skills: Optional[str]) -> List[str]:
    """Split a skills block on commas and newlines into trimmed, non-empty tokens."""
    return [token.strip() for token in SKILL_SPLIT_PATTERN.split(skills or "") if token.strip()]


def render_cv_page(sections: CvSections, theme: Optional[ThemeConfig] = None) -> str:
    """
    Render `sections` with `theme` into a complete HTML document.

    Every value is escaped before it reaches the page and newlines are only
    converted after escaping. The output depends on its inputs alone, so
    rendering the same sections and theme twice is byte-identical.

    Args:
        sections (CvSections): Parsed CV sections.
        theme (ThemeConfig | None): Presentation options. Defaults to ThemeConfig().

    Returns:
        str: The rendered page.
    """
    theme = theme or ThemeConfig()
    name = sections.name or DEFAULT_NAME_PLACEHOLDER

    main_blocks = [
        {"label": label, "value": getattr(sections, field), "placeholder": placeholder}
        for field, label, placeholder in MAIN_BLOCKS
    ]

    template = _ENVIRONMENT.get_template(TEMPLATE_NAME)
    return template.render(
        name=name,
        avatar_letter=name[0],
        sections=sections,
        main_blocks=main_blocks,
        skill_chips=split_skills(sections.skills),
        skills_placeholder=SKILLS_PLACEHOLDER,
        contact_placeholder=CONTACT_PLACEHOLDER,
        primary_color=resolve_primary_color(theme.theme_colors),
        accent_color=GENERATOR_DEFAULTS.ACCENT_COLOR,
        theme=theme,
    )
