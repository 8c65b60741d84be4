"""config.py
Holds various defaults for different resume engine settings.
"""

from dataclasses import dataclass, field

# --------------------------------------------------------------
# SETUP DEFAULT VALUES
# --------------------------------------------------------------
@dataclass
class ParserDefaults:
    """
    Default settings for parameters used across the resume_engine package.
    """
    # ---- FileParser settings ----
    MAX_FILE_SIZE_MB: float = field(
        default = 5.0,
        metadata = {
            "description": "Maximum allowed file size in MB"
    })

    # ---- ResumeExtractor settings ----
    MAX_THREADS: int = field(
        default = 1,
        metadata = {
            "description": "Maximum number of threads to use when running field extractors"
    })

    # ---- PersonalInfoExtractor settings ----
    CONTACT_LOOKAHEAD_LINES: int = field(
        default = 15,
        metadata = {
            "description": "Number of leading lines searched for phone, GitHub, LinkedIn and name"
    })
    NAME_MAX_LENGTH: int = field(
        default = 40,
        metadata = {
            "description": "Longest line (in characters) that can be taken as a full name"
    })
    NAME_MAX_WORDS: int = field(
        default = 4,
        metadata = {
            "description": "Most words a full name line may contain"
    })
    PHONE_MIN_DIGITS: int = field(
        default = 7,
        metadata = {
            "description": "Fewest digits a phone number candidate must contain"
    })
    PHONE_MAX_DIGITS: int = field(
        default = 15,
        metadata = {
            "description": "Most digits a phone number candidate may contain (E.164 limit)"
    })

    # ---- SectionSegmenter settings ----
    HEADER_MAX_WORDS: int = field(
        default = 4,
        metadata = {
            "description": "Most words a line may contain and still be read as a section header"
    })

    # ---- Section extractor settings ----
    SKILL_MAX_WORDS: int = field(
        default = 4,
        metadata = {
            "description": "Most words a single skill item may contain"
    })
    SKILL_MAX_LENGTH: int = field(
        default = 40,
        metadata = {
            "description": "Longest skill item (in characters)"
    })
    ENTRY_HEADER_MAX_WORDS: int = field(
        default = 8,
        metadata = {
            "description": "Most words a non-bullet line may contain and still open a new experience/project entry"
    })
    PROJECT_TECH_STACK_LIMIT: int = field(
        default = 10,
        metadata = {
            "description": "Most technologies kept per project when filled from the technology dictionary"
    })

    # ---- ATSMatcher settings ----
    SUGGESTION_LIMIT: int = field(
        default = 5,
        metadata = {
            "description": "Most missing-keyword suggestions returned in a MatchReport"
    })
    TIP_LIMIT: int = field(
        default = 4,
        metadata = {
            "description": "Most general tips returned in a MatchReport"
    })
    MIN_KEYWORD_LENGTH: int = field(
        default = 2,
        metadata = {
            "description": "Shortest token (in characters) kept as a keyword"
    })
    SHORT_RESUME_WORD_COUNT: int = field(
        default = 200,
        metadata = {
            "description": "Resumes with fewer words than this get a 'resume is short' tip"
    })


# Import this where needed
PARSER_DEFAULTS = ParserDefaults()
