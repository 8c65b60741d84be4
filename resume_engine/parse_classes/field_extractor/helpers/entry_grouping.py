"""entry_grouping.py
Line-level helpers shared by the education, experience and projects extractors.
"""
import re
from dataclasses import dataclass
from typing import List, Optional

from resume_engine.config import PARSER_DEFAULTS
from resume_engine.text_helpers.patterns import (
    DATE_RANGE_RE,
    SINGLE_DATE_RE,
    URL_RE,
    URL_TRAILING_PUNCTUATION,
)

_FRAGMENT_EDGE_CHARACTERS = " ,;:|-–—·•"
_GRADUATION_WORDS_RE = re.compile(
    r"\b(?:expected|anticipated|graduat(?:ed|ion|ing)|class of)\b:?",
    re.IGNORECASE,
)
_EMPTY_PARENS_RE = re.compile(r"\(\s*\)|\[\s*\]")


@dataclass
class DateSpan:
    """Dates found on one line and the line's text with the dates removed."""
    start: str = ""
    end: str = ""
    is_range: bool = False
    remainder: str = ""


def clean_fragment(text: str) -> str:
    """Collapse whitespace and trim separator characters from both ends."""
    text = _EMPTY_PARENS_RE.sub(" ", text)
    return " ".join(text.split()).strip(_FRAGMENT_EDGE_CHARACTERS).strip()


def find_dates(line: str) -> Optional[DateSpan]:
    """
    Return the date range on `line` (or, failing that, its first single date)
    with the remaining text, or None if the line holds no date.

    A single date is reported as `start`; callers decide what it means.

    Example:
        >>> find_dates("Google | Jun 2020 - Present")
        DateSpan(start='Jun 2020', end='Present', is_range=True, remainder='Google')
    """
    match = DATE_RANGE_RE.search(line)
    if match:
        return DateSpan(
            start=" ".join(match.group("start").split()),
            end=" ".join(match.group("end").split()),
            is_range=True,
            remainder=_remove_span(line, match.start(), match.end()),
        )

    match = SINGLE_DATE_RE.search(line)
    if match:
        return DateSpan(
            start=" ".join(match.group(0).split()),
            remainder=_remove_span(line, match.start(), match.end()),
        )
    return None


def _remove_span(line: str, start: int, end: int) -> str:
    remainder = line[:start] + " " + line[end:]
    remainder = _GRADUATION_WORDS_RE.sub(" ", remainder)
    return clean_fragment(remainder)


def word_count(text: str) -> int:
    return len(text.split())


def looks_like_entry_header(
    text: str,
    max_words: int = PARSER_DEFAULTS.ENTRY_HEADER_MAX_WORDS,
) -> bool:
    """
    A short line that does not read like a sentence: at most `max_words`
    words, no trailing period and not starting in lower case.
    """
    return (
        bool(text)
        and word_count(text) <= max_words
        and not text.endswith(".")
        and not text[0].islower()
    )


def starts_lowercase(text: str) -> bool:
    return bool(text) and text[0].islower()


def find_url(text: str) -> str:
    """First URL in `text` with trailing sentence punctuation removed."""
    match = URL_RE.search(text)
    if not match:
        return ""
    return match.group(0).rstrip(URL_TRAILING_PUNCTUATION)


def remove_urls(text: str) -> str:
    return clean_fragment(URL_RE.sub(" ", text))


def unique_casefold(items: List[str]) -> List[str]:
    """Drop case-insensitive duplicates, keeping first-seen casing and order."""
    seen = set()
    unique = []
    for item in items:
        key = item.casefold()
        if item and key not in seen:
            seen.add(key)
            unique.append(item)
    return unique
