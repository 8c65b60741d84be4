"""experience_extractor.py
Extracts work experience entries from the experience section.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from resume_engine.config import PARSER_DEFAULTS
from resume_engine.models import ExperienceEntry, SegmentedResume
from resume_engine.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_engine.parse_classes.field_extractor.helpers.entry_grouping import (
    clean_fragment,
    find_dates,
    looks_like_entry_header,
    starts_lowercase,
    word_count,
)
from resume_engine.text_helpers.normalize_text import is_bullet, strip_bullet
from resume_engine.text_helpers.vocabulary import (
    EXPERIENCE_HEADER_SPLITTERS,
    ROLE_FIRST_SPLITTERS,
    ROLE_KEYWORDS,
)


@dataclass
class _ExperienceDraft:
    header_lines: List[str] = field(default_factory=list)
    description: List[str] = field(default_factory=list)
    start: str = ""
    end: str = ""
    has_dates: bool = False

    @property
    def header_is_complete(self) -> bool:
        """Dates plus either two header lines or one line holding both parts."""
        if not self.has_dates or not self.header_lines:
            return False
        if len(self.header_lines) >= 2:
            return True
        return any(splitter in self.header_lines[0] for splitter in EXPERIENCE_HEADER_SPLITTERS)


def has_role_keyword(text: str) -> bool:
    return any(word.strip(".,()").lower() in ROLE_KEYWORDS for word in text.split())


def split_company_role(header_lines: List[str]) -> Tuple[str, str]:
    """
    Return (company, role) from an entry's header lines.

    "Role at Company" and "Role @ Company" put the role first. For the other
    separators the side holding a role keyword ("Engineer", "Intern", ...) is
    the role, and the company comes first when neither side decides it.
    """
    if not header_lines:
        return "", ""

    first = header_lines[0]
    for splitter in EXPERIENCE_HEADER_SPLITTERS:
        if splitter not in first:
            continue
        left, right = (clean_fragment(part) for part in first.split(splitter, 1))
        if not left or not right:
            continue
        if splitter in ROLE_FIRST_SPLITTERS:
            return right, left
        if has_role_keyword(left) and not has_role_keyword(right):
            return right, left
        return left, right

    first = clean_fragment(first)
    if len(header_lines) == 1:
        return ("", first) if has_role_keyword(first) else (first, "")

    second = clean_fragment(header_lines[1])
    if has_role_keyword(first) and not has_role_keyword(second):
        return second, first
    return first, second


class ExperienceExtractor(FieldExtractor):
    """
    Groups experience lines into entries of header, dates and description.

    Header lines ("Software Engineer at Google", "Google | Jun 2020 - Present")
    open an entry. Bullets and prose become the description, one line per
    bullet; wrapped lines starting in lower case are joined to the bullet
    above them.

    Supports:
        - 'rule': Line grouping by dates, bullets and header-like lines.
    """

    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"
    FIELD_NAME = "experience"

    def __init__(
        self,
        extraction_method: Optional[str] = None,
        header_max_words: int = PARSER_DEFAULTS.ENTRY_HEADER_MAX_WORDS,
    ):
        super().__init__(extraction_method=extraction_method)
        self.header_max_words = header_max_words

    def extract(self, segmented: SegmentedResume) -> List[ExperienceEntry]:
        if self.extraction_method != "rule":
            raise self._unsupported_method()

        drafts = self._group_lines(self._section_lines(segmented, "experience"))
        entries = []
        for draft in drafts:
            company, role = split_company_role(draft.header_lines)
            entries.append(ExperienceEntry(
                company=company,
                role=role,
                description="\n".join(draft.description),
                start=draft.start,
                end=draft.end,
            ))
        return entries

    def _group_lines(self, lines: List[str]) -> List[_ExperienceDraft]:
        drafts: List[_ExperienceDraft] = []
        current: Optional[_ExperienceDraft] = None

        def open_entry() -> _ExperienceDraft:
            draft = _ExperienceDraft()
            drafts.append(draft)
            return draft

        for line in lines:
            bullet = is_bullet(line)
            text = strip_bullet(line)
            if not text:
                continue

            dates = None if bullet else self._find_header_dates(text)
            if dates is not None:
                if current is None or current.has_dates or current.description:
                    current = open_entry()
                current.has_dates = True
                current.start, current.end = dates.start, dates.end
                if dates.remainder:
                    current.header_lines.append(dates.remainder)
                continue

            if bullet:
                if current is None:
                    current = open_entry()
                current.description.append(text)
                continue

            is_header_like = looks_like_entry_header(text, self.header_max_words)
            if current is None:
                current = open_entry()
                current.header_lines.append(text)
            elif current.description:
                if starts_lowercase(text):
                    current.description[-1] = f"{current.description[-1]} {text}"
                elif is_header_like:
                    current = open_entry()
                    current.header_lines.append(text)
                else:
                    current.description.append(text)
            elif not is_header_like or current.header_is_complete:
                current.description.append(text)
            else:
                current.header_lines.append(text)

        return drafts

    def _find_header_dates(self, text: str):
        """
        Dates that belong to an entry header. A single year inside a long
        sentence ("grew revenue 30% in 2021") is description, not a header.
        """
        dates = find_dates(text)
        if dates is None:
            return None
        if word_count(dates.remainder) > self.header_max_words:
            return None
        return dates
