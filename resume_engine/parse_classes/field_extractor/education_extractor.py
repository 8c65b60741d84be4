"""education_extractor.py
Extracts education entries from the education section.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from resume_engine.models import EducationEntry, SegmentedResume
from resume_engine.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_engine.parse_classes.field_extractor.helpers.entry_grouping import (
    clean_fragment,
    find_dates,
    looks_like_entry_header,
)
from resume_engine.text_helpers.normalize_text import is_bullet, strip_bullet
from resume_engine.text_helpers.patterns import DEGREE_RE, SCHOOL_RE

# Separators tried, in order, between school and degree on one line
_SCHOOL_DEGREE_SEPARATORS = (" | ", "|", " — ", " – ", " - ", ", ")


@dataclass
class _EducationDraft:
    text_lines: List[str] = field(default_factory=list)
    start: str = ""
    end: str = ""
    has_dates: bool = False

    @property
    def is_complete(self) -> bool:
        return self.has_dates and bool(self.text_lines)


class EducationExtractor(FieldExtractor):
    """
    Groups education lines into entries.

    A date range (or a lone graduation date) closes an entry. After that, a
    line with a school or degree cue, or any short title-like line, opens the
    next one. Detail lines (GPA, coursework, bullets) stay with their entry.

    Supports:
        - 'rule': Line grouping by dates plus school/degree cues.
    """

    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"
    FIELD_NAME = "education"

    def extract(self, segmented: SegmentedResume) -> List[EducationEntry]:
        if self.extraction_method != "rule":
            raise self._unsupported_method()

        drafts = self._group_lines(self._section_lines(segmented, "education"))
        return [self._build_entry(draft) for draft in drafts]

    def _group_lines(self, lines: List[str]) -> List[_EducationDraft]:
        drafts: List[_EducationDraft] = []
        current: Optional[_EducationDraft] = None

        for line in lines:
            bullet = is_bullet(line)
            text = strip_bullet(line)
            dates = None if bullet else find_dates(text)

            if dates is not None:
                if current is None or current.has_dates:
                    current = _EducationDraft()
                    drafts.append(current)
                current.has_dates = True
                if dates.is_range:
                    current.start, current.end = dates.start, dates.end
                else:
                    # A lone date on an education entry is the graduation date
                    current.end = dates.start
                if dates.remainder:
                    current.text_lines.append(dates.remainder)
                continue

            if current is None or self._opens_new_entry(current, text, bullet):
                current = _EducationDraft()
                drafts.append(current)
            current.text_lines.append(text)

        return [draft for draft in drafts if draft.text_lines or draft.has_dates]

    @staticmethod
    def _opens_new_entry(current: _EducationDraft, text: str, bullet: bool) -> bool:
        if bullet:
            return False
        has_cue = bool(DEGREE_RE.search(text) or SCHOOL_RE.search(text))
        if current.is_complete:
            return has_cue or (looks_like_entry_header(text) and ":" not in text)
        return has_cue and len(current.text_lines) >= 2

    def _build_entry(self, draft: _EducationDraft) -> EducationEntry:
        school, degree = self._split_school_degree(draft.text_lines)
        return EducationEntry(
            school=school,
            degree=degree,
            start=draft.start,
            end=draft.end,
        )

    @staticmethod
    def _split_school_degree(text_lines: List[str]) -> Tuple[str, str]:
        """
        Split the first line between school and degree on a separator, the
        degree side being the one matching the degree pattern. Without a usable
        separator the first line is the school and the next is the degree.
        """
        if not text_lines:
            return "", ""

        first = text_lines[0]
        second = text_lines[1] if len(text_lines) > 1 else ""

        for separator in _SCHOOL_DEGREE_SEPARATORS:
            if separator not in first:
                continue
            left, right = (clean_fragment(part) for part in first.split(separator, 1))
            left_is_degree = bool(DEGREE_RE.search(left))
            right_is_degree = bool(DEGREE_RE.search(right))
            if left_is_degree and not right_is_degree:
                return right, left
            if right_is_degree:
                return left, right
            if separator != ", " and left and right:
                return left, right
            # "University of X, Boston, MA": the comma only separates a location
            break

        first = clean_fragment(first)
        second = clean_fragment(second)
        if DEGREE_RE.search(first) and second and not DEGREE_RE.search(second):
            return second, first
        return first, second
