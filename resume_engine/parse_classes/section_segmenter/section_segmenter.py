"""section_segmenter.py

Holds the SectionSegmenter state machine that attributes resume lines to
sections.
"""
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from resume_engine.config import PARSER_DEFAULTS
from resume_engine.models import ResumeText, SegmentedResume, SectionName, SECTION_NAMES
from resume_engine.text_helpers.patterns import INLINE_LABEL_RE
from resume_engine.text_helpers.vocabulary import (
    SECTION_HEADERS,
    OTHER_HEADERS,
    TECH_STACK_LABELS,
)

_HEADER_EDGE_CHARACTERS = " :-–—*#=_|•~."
_HEADER_JOINER_RE = re.compile(r"\s*(?:&|\band\b|/|\+|,)\s*")


@dataclass(frozen=True)
class HeaderMatch:
    """
    A recognized header line.

    Attributes:
        section (SectionName | None): Section the header opens. ``None`` for
            headers of sections that are not extracted.
        remainder (str): Content that followed an inline header
            (``"Skills: Python, SQL"`` -> ``"Python, SQL"``), else ``""``.
    """
    section: Optional[SectionName]
    remainder: str = ""


def normalize_header(line: str) -> str:
    """Lower-case a candidate header and trim decoration ('EDUCATION:' -> 'education')."""
    return " ".join(line.strip(_HEADER_EDGE_CHARACTERS).lower().split())


class SectionSegmenter:
    """
    Splits normalized resume lines into section buffers.

    The segmenter is a state machine over {None, education, experience,
    projects, skills}. The single transition rule: a recognized header line
    switches the state; any other line is appended to the current state's
    buffer, or discarded when the state is ``None``.

    Args:
        header_max_words (int): Longest line, in words, that can be a header.
    """

    def __init__(self, header_max_words: int = PARSER_DEFAULTS.HEADER_MAX_WORDS):
        self.header_max_words = header_max_words

    def segment(self, resume_text: ResumeText) -> SegmentedResume:
        sections: Dict[SectionName, List[str]] = {name: [] for name in SECTION_NAMES}
        line_sections: List[Optional[SectionName]] = []
        header_indices: List[int] = []
        current_section: Optional[SectionName] = None

        for index, line in enumerate(resume_text.lines):
            header = self.match_header(line, current_section)
            if header is not None:
                current_section = header.section
                header_indices.append(index)
                content = header.remainder
            else:
                content = line

            if current_section is not None and content:
                sections[current_section].append(content)
                line_sections.append(current_section)
            else:
                line_sections.append(None)

        return SegmentedResume(
            lines=resume_text.lines,
            line_sections=tuple(line_sections),
            header_indices=tuple(header_indices),
            sections=sections,
        )

    def match_header(
        self,
        line: str,
        current_section: Optional[SectionName] = None,
    ) -> Optional[HeaderMatch]:
        """
        Return a HeaderMatch when `line` is a section header, otherwise None.

        A standalone header must be a closed-vocabulary entry (or entries
        joined by '&', 'and', '/', '+' or ',') of at most `header_max_words`
        words. An inline header is a skills label followed by ':' and content.
        """
        key = normalize_header(line)
        if not key or len(key.split()) > self.header_max_words:
            return self._match_inline_header(line, current_section)

        standalone = self._lookup(key)
        if standalone is not None:
            return standalone

        parts = [part for part in _HEADER_JOINER_RE.split(key) if part]
        if len(parts) > 1:
            matches = [self._lookup(part) for part in parts]
            if all(match is not None for match in matches):
                return matches[0]

        return self._match_inline_header(line, current_section)

    @staticmethod
    def _lookup(key: str) -> Optional[HeaderMatch]:
        if key in SECTION_HEADERS:
            return HeaderMatch(section=SECTION_HEADERS[key])
        if key in OTHER_HEADERS:
            return HeaderMatch(section=None)
        return None

    def _match_inline_header(
        self,
        line: str,
        current_section: Optional[SectionName],
    ) -> Optional[HeaderMatch]:
        match = INLINE_LABEL_RE.match(line)
        if match is None:
            return None

        label = normalize_header(match.group("label"))
        remainder = match.group("rest").strip()
        if not remainder or SECTION_HEADERS.get(label) != "skills":
            return None

        # "Technologies: React, Node" inside a project is that project's stack
        if label in TECH_STACK_LABELS and current_section in ("projects", "experience"):
            return None

        return HeaderMatch(section="skills", remainder=remainder)
