"""projects_extractor.py
Extracts project entries from the projects section.
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional

from resume_engine.config import PARSER_DEFAULTS
from resume_engine.models import ProjectEntry, SegmentedResume
from resume_engine.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_engine.parse_classes.field_extractor.helpers.entry_grouping import (
    clean_fragment,
    find_url,
    looks_like_entry_header,
    remove_urls,
    starts_lowercase,
    unique_casefold,
)
from resume_engine.parse_classes.field_extractor.helpers.tech_dictionary_scan import find_technologies
from resume_engine.text_helpers.normalize_text import is_bullet, strip_bullet
from resume_engine.text_helpers.patterns import (
    DATE_RANGE_RE,
    INLINE_LABEL_RE,
    PAREN_CONTENT_RE,
    SINGLE_DATE_RE,
    URL_RE,
)
from resume_engine.text_helpers.vocabulary import TECH_STACK_LABELS

_TECH_LIST_SPLIT_RE = re.compile(r"\s*[,;|•·]\s*|\s+and\s+|\s+&\s+")
_LINK_LABELS = frozenset({"link", "links", "demo", "live", "live demo", "url", "github", "repo", "source", "code", "website"})


@dataclass
class _ProjectDraft:
    title: str = ""
    description: List[str] = field(default_factory=list)
    tech_stack: List[str] = field(default_factory=list)
    link: str = ""

    @property
    def has_body(self) -> bool:
        return bool(self.description or self.tech_stack or self.link)


def split_tech_list(text: str) -> List[str]:
    """Split "React, Node.js | PostgreSQL" into individual technology names."""
    return [item for item in (clean_fragment(part) for part in _TECH_LIST_SPLIT_RE.split(text)) if item]


class ProjectsExtractor(FieldExtractor):
    """
    Groups project lines into entries.

    The first line of an entry is its title, optionally followed by a
    technology list in parentheses or after a pipe. "Tech Stack:" style lines
    add to the stack, the first URL becomes the link and everything else is
    the description. Entries without an explicit stack are filled from the
    technology dictionary.

    Normalized text carries no blank lines, so a new entry starts at a short
    title-like line that follows an entry already holding a body.

    Supports:
        - 'rule': Line grouping by title lines, bullets and labels.
    """

    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"
    FIELD_NAME = "projects"

    def __init__(
        self,
        extraction_method: Optional[str] = None,
        header_max_words: int = PARSER_DEFAULTS.ENTRY_HEADER_MAX_WORDS,
        tech_stack_limit: int = PARSER_DEFAULTS.PROJECT_TECH_STACK_LIMIT,
    ):
        super().__init__(extraction_method=extraction_method)
        self.header_max_words = header_max_words
        self.tech_stack_limit = tech_stack_limit

    def extract(self, segmented: SegmentedResume) -> List[ProjectEntry]:
        if self.extraction_method != "rule":
            raise self._unsupported_method()

        drafts = self._group_lines(self._section_lines(segmented, "projects"))
        return [self._build_entry(draft) for draft in drafts]

    def _group_lines(self, lines: List[str]) -> List[_ProjectDraft]:
        drafts: List[_ProjectDraft] = []
        current: Optional[_ProjectDraft] = None

        for line in lines:
            bullet = is_bullet(line)
            text = strip_bullet(line)
            if not text:
                continue

            label = INLINE_LABEL_RE.match(text)
            label_name = label.group("label").strip().lower() if label else ""

            if label and label_name in TECH_STACK_LABELS:
                current = current or self._open(drafts)
                current.tech_stack.extend(split_tech_list(label.group("rest")))
                continue

            if self._is_link_line(text, label_name):
                current = current or self._open(drafts)
                current.link = current.link or find_url(text)
                continue

            if bullet:
                current = current or self._open(drafts)
                current.description.append(text)
                continue

            if current is None or (
                current.has_body and looks_like_entry_header(text, self.header_max_words)
            ):
                current = self._open(drafts)
                self._read_title_line(current, text)
            elif starts_lowercase(text) and current.description:
                current.description[-1] = f"{current.description[-1]} {text}"
            else:
                current.description.append(text)

        return drafts

    @staticmethod
    def _open(drafts: List[_ProjectDraft]) -> _ProjectDraft:
        draft = _ProjectDraft()
        drafts.append(draft)
        return draft

    @staticmethod
    def _is_link_line(text: str, label_name: str) -> bool:
        """A line that is only a URL, optionally behind a 'Link:'-style label."""
        if not URL_RE.search(text):
            return False
        leftover = remove_urls(text)
        return not leftover or leftover.lower().rstrip(":") in _LINK_LABELS or label_name in _LINK_LABELS

    @staticmethod
    def _read_title_line(draft: _ProjectDraft, text: str) -> None:
        """
        Split a title line into title, inline stack and link.

        "Portfolio Site (React, Tailwind) | github.com/jane/site | 2023"
        -> title "Portfolio Site", stack [React, Tailwind], link github.com/jane/site
        """
        draft.link = draft.link or find_url(text)
        text = remove_urls(text)
        text = DATE_RANGE_RE.sub(" ", text)
        text = SINGLE_DATE_RE.sub(" ", text)

        parenthesized = PAREN_CONTENT_RE.search(text)
        if parenthesized:
            draft.tech_stack.extend(split_tech_list(parenthesized.group("content")))
            text = text[:parenthesized.start()] + text[parenthesized.end():]

        title, _, stack = text.partition("|")
        if stack:
            draft.tech_stack.extend(split_tech_list(stack))
        draft.title = clean_fragment(title)

    def _build_entry(self, draft: _ProjectDraft) -> ProjectEntry:
        tech_stack = unique_casefold(draft.tech_stack)
        if not tech_stack:
            entry_text = "\n".join([draft.title, *draft.description])
            tech_stack = find_technologies(entry_text, limit=self.tech_stack_limit)

        link = draft.link
        description_lines = []
        for line in draft.description:
            link = link or find_url(line)
            cleaned = remove_urls(line) if URL_RE.search(line) else line
            if cleaned:
                description_lines.append(cleaned)

        return ProjectEntry(
            title=draft.title,
            description="\n".join(description_lines),
            tech_stack=tech_stack,
            link=link,
        )
