"""skills_extractor.py
Extracts skills from the skills section.
"""
import re
from typing import List, Optional

from resume_engine.config import PARSER_DEFAULTS
from resume_engine.models import SegmentedResume
from resume_engine.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_engine.parse_classes.field_extractor.helpers.entry_grouping import unique_casefold
from resume_engine.parse_classes.field_extractor.helpers.tech_dictionary_scan import find_technologies
from resume_engine.text_helpers.normalize_text import strip_bullet
from resume_engine.text_helpers.patterns import INLINE_LABEL_RE, PAREN_CONTENT_RE
from resume_engine.text_helpers.vocabulary import (
    SKILL_FILLER_WORDS,
    SKILL_SPLIT_CHARACTERS,
    SKILL_STOPLIST,
)

_SKILL_SPLIT_RE = re.compile("[" + re.escape(SKILL_SPLIT_CHARACTERS) + "]")
_LEADING_CONJUNCTION_RE = re.compile(r"^(?:and|or|&)\s+", re.IGNORECASE)
_ITEM_EDGE_CHARACTERS = " :-–—*"


class SkillsExtractor(FieldExtractor):
    """
    Extracts the candidate's skills as an ordered list of unique strings.

    Lines are delimited lists ("Python, React | SQL") or flat short lines.
    Category prefixes ("Languages: ...") are stripped. Items longer than
    `max_words` words or holding a stoplist verb ("Developed", "using", ...)
    are rejected as sentences. Duplicates are removed case-insensitively and
    the first-seen casing is kept.

    Supports:
        - 'rule': Only the skills section is read.
        - 'dictionary': The skills section, then every known technology
          mentioned anywhere in the resume.
    """

    SUPPORTED_EXTRACTION_METHODS = ["rule", "dictionary"]
    DEFAULT_EXTRACTION_METHOD = "rule"
    FIELD_NAME = "skills"

    def __init__(
        self,
        extraction_method: Optional[str] = None,
        max_words: int = PARSER_DEFAULTS.SKILL_MAX_WORDS,
        max_length: int = PARSER_DEFAULTS.SKILL_MAX_LENGTH,
    ):
        super().__init__(extraction_method=extraction_method)
        self.max_words = max_words
        self.max_length = max_length

    def extract(self, segmented: SegmentedResume) -> List[str]:
        """
        Returns:
            List[str]: Skills in detection order. Empty if none were found.
        """
        if self.extraction_method == "rule":
            skills = self._rule_extract(segmented)
        elif self.extraction_method == "dictionary":
            skills = self._rule_extract(segmented) + find_technologies("\n".join(segmented.lines))
        else:
            raise self._unsupported_method()

        return unique_casefold(skills)

    def _rule_extract(self, segmented: SegmentedResume) -> List[str]:
        skills = []
        for line in self._section_lines(segmented, "skills"):
            for item in self.split_skill_line(line):
                if self.is_valid_skill(item):
                    skills.append(item)
        return skills

    @staticmethod
    def split_skill_line(line: str) -> List[str]:
        """
        Split one skills line into candidate items.

        Example:
            >>> SkillsExtractor.split_skill_line("Cloud: AWS (EC2, S3), and Docker.")
            ['AWS', 'EC2', 'S3', 'Docker']
        """
        text = strip_bullet(line)
        label = INLINE_LABEL_RE.match(text)
        if label and label.group("rest"):
            text = label.group("rest")

        # "AWS (EC2, S3)" -> "AWS, EC2, S3"
        text = PAREN_CONTENT_RE.sub(lambda m: ", " + m.group("content") + ",", text)

        items = []
        for part in _SKILL_SPLIT_RE.split(text):
            item = _LEADING_CONJUNCTION_RE.sub("", part.strip())
            item = " ".join(item.split()).strip(_ITEM_EDGE_CHARACTERS).rstrip(".")
            if item:
                items.append(item)
        return items

    def is_valid_skill(self, item: str) -> bool:
        lowered = item.lower()
        words = lowered.split()
        if not words or len(words) > self.max_words or len(item) > self.max_length:
            return False
        if lowered.replace(" ", "").isdigit():
            return False
        if lowered in SKILL_FILLER_WORDS:
            return False
        return not any(word.strip(".,()") in SKILL_STOPLIST for word in words)
