"""file_parsing.py
Helper functions to build fixture documents on the fly and check extracted text.
"""
import zipfile
from pathlib import Path
from typing import Iterable
from xml.sax.saxutils import escape

from docx import Document
from reportlab.pdfgen import canvas

# Minimal WordprocessingML wrapper used by build_docx_archive()
WORD_XML_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
    "<w:body>{paragraphs}</w:body></w:document>"
)


def build_pdf_file(path: Path, lines: Iterable[str]) -> Path:
    """Write a one-page PDF with one drawn string per line."""
    c = canvas.Canvas(str(path))
    y = 780
    for line in lines:
        c.drawString(72, y, line)
        y -= 16
    c.save()
    return path


def build_docx_file(path: Path, paragraphs: Iterable[str]) -> Path:
    """Write a DOCX with one paragraph per item."""
    doc = Document()
    for paragraph in paragraphs:
        doc.add_paragraph(paragraph)
    doc.save(str(path))
    return path


def build_docx_archive(path: Path, paragraphs: Iterable[str]) -> Path:
    """
    Write a bare ZIP holding only `word/document.xml`. Structured Word readers
    may reject it, but the raw archive scrape can still read it.
    """
    body = "".join(
        f"<w:p><w:r><w:t>{escape(paragraph)}</w:t></w:r></w:p>" for paragraph in paragraphs
    )
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("word/document.xml", WORD_XML_TEMPLATE.format(paragraphs=body))
    return path


def build_text_file(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# Function to check readability of final text
def assert_text_is_readable(
    text: str,
    min_letter_ratio: float = 0.5,
    extra_allowed: str = "–—•◦·"
):
    """
    Assert that extracted text is readable.

    Checks performed:
        1. All characters are printable or whitespace (common CV symbols allowed).
        2. At least `min_letter_ratio` of the characters are alphabetic.

    Raises:
        AssertionError: If any of the checks fail, including a snippet of the offending text.
    """
    non_printable = [
        c for c in text
        if not (c.isprintable() or c.isspace() or c in extra_allowed)
    ]
    if non_printable:
        snippet = "".join(non_printable[:50])
        raise AssertionError(f"Extracted text contains unreadable characters: {snippet!r}")

    letters = sum(c.isalpha() for c in text)
    total_chars = len(text) if len(text) > 0 else 1
    ratio = letters / total_chars
    if ratio < min_letter_ratio:
        raise AssertionError(
            f"Extracted text seems gibberish (letter ratio {ratio:.2f} < {min_letter_ratio}): {text[:100]!r}"
        )
