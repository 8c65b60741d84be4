"""file_parsing.py
Helper functions to build resume files on disk and test loading them in.
"""
from pathlib import Path
from typing import Iterable

import docx
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from resume_engine.models import ResumeText
from resume_engine.parse_classes.file_parser.file_parser import FileParser


# DummyTxtParser to test with
class DummyTxtParser(FileParser):
    """Simple subclass of FileParser to test _validate_file logic."""
    SUPPORTED_EXTENSIONS = [".txt"]

    def _read_raw_text(self) -> str:
        return "dummy text"


def write_pdf(path: Path, lines: Iterable[str]) -> Path:
    """Write `lines` to a one-page PDF with a real text layer (reportlab)."""
    pdf = canvas.Canvas(str(path), pagesize=letter)
    y = 750
    for line in lines:
        pdf.drawString(72, y, line)
        y -= 16
    pdf.showPage()
    pdf.save()
    return path


def write_empty_pdf(path: Path) -> Path:
    """Write a PDF with one blank page and no text layer."""
    pdf = canvas.Canvas(str(path), pagesize=letter)
    pdf.showPage()
    pdf.save()
    return path


def write_docx(path: Path, lines: Iterable[str]) -> Path:
    """Write `lines` as one paragraph each to a .docx file (python-docx)."""
    document = docx.Document()
    for line in lines:
        document.add_paragraph(line)
    document.save(str(path))
    return path


def write_txt(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# Function to check readability of final text
def assert_resume_text_is_readable(
    resume_text: ResumeText,
    min_letter_ratio: float = 0.5,
    extra_allowed: str = "–—•◦·"  # add extra symbols commonly found in resumes
):
    """
    Assert that parsed resume text is readable.

    Checks performed:
        1. All characters are printable or whitespace (includes common resume symbols).
        2. At least a certain proportion of characters are alphabetic.

    Raises:
        AssertionError: If any of the checks fail, including a snippet of the offending text.
    """
    full_text = resume_text.text

    non_printable = [
        c for c in full_text
        if not (c.isprintable() or c.isspace() or c in extra_allowed)
    ]
    if non_printable:
        snippet = "".join(non_printable[:50])
        raise AssertionError(f"Parsed text contains unreadable characters: {snippet!r}")

    letters = sum(c.isalpha() for c in full_text)
    total_chars = len(full_text) if len(full_text) > 0 else 1
    ratio = letters / total_chars
    if ratio < min_letter_ratio:
        snippet = full_text[:100]
        raise AssertionError(
            f"Parsed text seems gibberish (letter ratio {ratio:.2f} < {min_letter_ratio}): {snippet!r}"
        )
