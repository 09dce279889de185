"""capabilities.py
Detects which optional extraction backends are installed.
"""
from functools import lru_cache
from importlib.util import find_spec

from cv_site.models import Capabilities

# Capability flag -> module that provides it
CAPABILITY_MODULES = {
    "pdf": "pymupdf",
    "word_document": "docx2txt",
    "web_page": "bs4",
}


def _module_available(module_name: str) -> bool:
    try:
        return find_spec(module_name) is not None
    except (ImportError, ValueError):
        return False


@lru_cache(maxsize=1)
def detect_capabilities() -> Capabilities:
    """
    Check the optional backends once and return the resulting flags. The result
    is cached so every TextExtractor in the process shares the same view.
    """
    return Capabilities(
        **{flag: _module_available(module) for flag, module in CAPABILITY_MODULES.items()}
    )
