"""personal_info_extractor.py
Extracts name and contact details from a segmented resume.
"""
from typing import Optional, Sequence

from resume_engine.config import PARSER_DEFAULTS
from resume_engine.models import PersonalInfo, SegmentedResume
from resume_engine.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_engine.text_helpers.patterns import (
    AT_HANDLE_RE,
    CAPITALIZED_WORD_RE,
    DATE_RANGE_RE,
    DIGIT_RE,
    EMAIL_RE,
    GITHUB_LABEL_RE,
    GITHUB_MENTION_RE,
    GITHUB_URL_RE,
    LINKEDIN_RE,
    PHONE_CANDIDATE_RE,
    URL_RE,
)
from resume_engine.text_helpers.vocabulary import ROLE_KEYWORDS


class PersonalInfoExtractor(FieldExtractor):
    """
    Extracts the candidate's name, email, phone, GitHub handle and LinkedIn URL.

    The email is the first well-formed email token anywhere in the resume,
    returned exactly as written. Phone, GitHub, LinkedIn and name are only
    searched in the first `lookahead_lines` lines, where contact blocks live.

    Supports:
        - 'regex': Pattern-based extraction with the precompiled contact patterns.
    """

    SUPPORTED_EXTRACTION_METHODS = ["regex"]
    DEFAULT_EXTRACTION_METHOD = "regex"
    FIELD_NAME = "personal"

    def __init__(
        self,
        extraction_method: Optional[str] = None,
        lookahead_lines: int = PARSER_DEFAULTS.CONTACT_LOOKAHEAD_LINES,
        name_max_length: int = PARSER_DEFAULTS.NAME_MAX_LENGTH,
        name_max_words: int = PARSER_DEFAULTS.NAME_MAX_WORDS,
        phone_min_digits: int = PARSER_DEFAULTS.PHONE_MIN_DIGITS,
        phone_max_digits: int = PARSER_DEFAULTS.PHONE_MAX_DIGITS,
    ):
        super().__init__(extraction_method=extraction_method)
        self.lookahead_lines = lookahead_lines
        self.name_max_length = name_max_length
        self.name_max_words = name_max_words
        self.phone_min_digits = phone_min_digits
        self.phone_max_digits = phone_max_digits

    def extract(self, segmented: SegmentedResume) -> PersonalInfo:
        """
        Returns:
            PersonalInfo: Every field is a string, "" when not found.
        """
        if self.extraction_method != "regex":
            raise self._unsupported_method()

        window = segmented.lines[:self.lookahead_lines]
        return PersonalInfo(
            full_name=self._extract_name(segmented),
            email=self._extract_email(segmented.lines),
            phone=self._extract_phone(window),
            github=self._extract_github(window),
            linkedin=self._extract_linkedin(window),
        )

    # ----------------------
    # CONTACT DETAILS
    # ----------------------
    @staticmethod
    def _extract_email(lines: Sequence[str]) -> str:
        for line in lines:
            match = EMAIL_RE.search(line)
            if match:
                return match.group(0)
        return ""

    def _extract_phone(self, window: Sequence[str]) -> str:
        """
        Return the first digit group with `phone_min_digits`..`phone_max_digits`
        digits. Lines holding a date range are skipped so "2019 - 2023" is
        never read as a number.
        """
        for line in window:
            if DATE_RANGE_RE.search(line):
                continue
            for match in PHONE_CANDIDATE_RE.finditer(line):
                candidate = " ".join(match.group(0).split())
                digit_count = len(DIGIT_RE.findall(candidate))
                if self.phone_min_digits <= digit_count <= self.phone_max_digits:
                    return candidate
        return ""

    @staticmethod
    def _extract_github(window: Sequence[str]) -> str:
        """Handle from a github.com URL, or a labelled/@handle near the word GitHub."""
        for line in window:
            match = GITHUB_URL_RE.search(line)
            if match:
                return match.group("handle")
            if not GITHUB_MENTION_RE.search(line):
                continue
            match = GITHUB_LABEL_RE.search(line) or AT_HANDLE_RE.search(line)
            if match:
                return match.group("handle")
        return ""

    @staticmethod
    def _extract_linkedin(window: Sequence[str]) -> str:
        for line in window:
            match = LINKEDIN_RE.search(line)
            if match:
                return f"linkedin.com/in/{match.group('slug')}"
        return ""

    # ----------------------
    # NAME
    # ----------------------
    def _extract_name(self, segmented: SegmentedResume) -> str:
        """
        The earliest line before the first section header that is not contact
        info and looks like a person's name.
        """
        first_header = segmented.header_indices[0] if segmented.header_indices else len(segmented.lines)
        stop = min(first_header, self.lookahead_lines)

        for line in segmented.lines[:stop]:
            if self._is_contact_line(line):
                continue
            if self._looks_like_name(line):
                return line
        return ""

    @staticmethod
    def _is_contact_line(line: str) -> bool:
        return any(
            pattern.search(line)
            for pattern in (EMAIL_RE, URL_RE, LINKEDIN_RE, GITHUB_MENTION_RE, PHONE_CANDIDATE_RE)
        )

    def _looks_like_name(self, line: str) -> bool:
        if len(line) > self.name_max_length or DIGIT_RE.search(line):
            return False

        words = line.split()
        if not 2 <= len(words) <= self.name_max_words:
            return False
        if any(word.lower().strip(".,") in ROLE_KEYWORDS for word in words):
            return False
        return all(CAPITALIZED_WORD_RE.match(word) for word in words)
