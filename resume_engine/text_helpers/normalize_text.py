"""normalize_text.py
Line-level normalization applied to every resume before parsing.
"""
from typing import Iterable, List

from resume_engine.text_helpers.patterns import BULLET_PREFIX_RE, MULTI_SPACE_RE


def normalize_line(line: str) -> str:
    """Tabs to spaces, collapse runs of spaces, trim. Casing is kept."""
    return MULTI_SPACE_RE.sub(" ", line.replace("\t", " ")).strip()


def normalize_lines(raw_lines: Iterable[str]) -> List[str]:
    """
    Normalize already-split lines and drop those left empty.

    A single item that still holds line breaks is split further, so
    ``normalize_lines(["a\\nb"]) == ["a", "b"]``.
    """
    normalized = []
    for raw_line in raw_lines:
        for line in _split_lines(raw_line):
            line = normalize_line(line)
            if line:
                normalized.append(line)
    return normalized


def normalize_text(raw_text: str) -> List[str]:
    """
    Split raw resume text into normalized, non-empty lines.

    Example:
        >>> normalize_text("Jane  Doe\\r\\n\\n\\tjane@x.com  ")
        ['Jane Doe', 'jane@x.com']
    """
    return normalize_lines([raw_text])


def strip_bullet(line: str) -> str:
    """Remove a leading bullet glyph (•, -, *, ▪ ...) from a line."""
    return BULLET_PREFIX_RE.sub("", line, count=1).strip()


def is_bullet(line: str) -> bool:
    return bool(BULLET_PREFIX_RE.match(line))


def _split_lines(text: str) -> List[str]:
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
