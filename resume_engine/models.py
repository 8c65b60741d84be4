"""models.py
Holds standardized data models used across the parser and the ATS matcher.
"""
from typing import Dict, Iterable, List, Literal, Optional, Tuple
from dataclasses import dataclass, field

from resume_engine.text_helpers.normalize_text import normalize_lines, normalize_text

SectionName = Literal["education", "experience", "projects", "skills"]

SECTION_NAMES: Tuple[SectionName, ...] = ("education", "experience", "projects", "skills")


@dataclass(frozen=True)
class ResumeText:
    """
    Normalized resume text: ordered, trimmed, whitespace-collapsed, non-empty lines.

    Build it with ``ResumeText.from_text`` or ``ResumeText.from_lines`` so the
    normalization rules are always applied.

    Attributes:
        lines (tuple[str, ...]): The normalized lines in document order.
    """
    lines: Tuple[str, ...] = ()

    @classmethod
    def from_text(cls, raw_text: str) -> "ResumeText":
        return cls(lines=tuple(normalize_text(raw_text)))

    @classmethod
    def from_lines(cls, raw_lines: Iterable[str]) -> "ResumeText":
        return cls(lines=tuple(normalize_lines(raw_lines)))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass
class SegmentedResume:
    """
    Result of section segmentation.

    Attributes:
        lines (tuple[str, ...]): All normalized lines of the resume.
        line_sections (tuple[Optional[SectionName], ...]): The section each line
            was attributed to, aligned with ``lines``. Header lines and lines
            outside a recognized section are ``None``.
        sections (dict[SectionName, list[str]]): Content lines per section, in
            document order. Repeated headers append to the same buffer.
        header_indices (tuple[int, ...]): Indices into ``lines`` of every line
            recognized as a section header, including headers of sections that
            are not extracted (summary, awards, ...).
    """
    lines: Tuple[str, ...] = ()
    line_sections: Tuple[Optional[SectionName], ...] = ()
    header_indices: Tuple[int, ...] = ()
    sections: Dict[SectionName, List[str]] = field(
        default_factory=lambda: {name: [] for name in SECTION_NAMES}
    )

    def section(self, name: SectionName) -> List[str]:
        return self.sections.get(name, [])


@dataclass
class PersonalInfo:
    full_name: str = ""
    email: str = ""
    phone: str = ""
    github: str = ""
    linkedin: str = ""
    summary: str = ""


@dataclass
class EducationEntry:
    school: str = ""
    degree: str = ""
    start: str = ""
    end: str = ""


@dataclass
class ExperienceEntry:
    company: str = ""
    role: str = ""
    description: str = ""
    start: str = ""
    end: str = ""


@dataclass
class ProjectEntry:
    title: str = ""
    description: str = ""
    tech_stack: List[str] = field(default_factory=list)
    link: str = ""


@dataclass
class StructuredResume:
    """
    Stores structured information extracted from a resume.

    Every field is always present; absence of information is an empty string
    or an empty list, never ``None``.

    Attributes:
        personal (PersonalInfo): Name and contact details.
        education (list[EducationEntry]): Education entries in document order.
        experience (list[ExperienceEntry]): Work entries in document order.
        projects (list[ProjectEntry]): Project entries in document order.
        skills (list[str]): Case-insensitively unique skills, first-seen casing.
    """
    personal: PersonalInfo = field(default_factory=PersonalInfo)
    education: List[EducationEntry] = field(default_factory=list)
    experience: List[ExperienceEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)


@dataclass
class ParsingConfidence:
    """
    Heuristic 0-100 score of how much of the resume was recognized.

    Attributes:
        score (int): Weighted sum of the detected signals, capped at 100.
        details (list[str]): Human-readable notes on what was not detected.
    """
    score: int = 0
    details: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MatchReport:
    """
    Result of matching a resume against a job description.

    Attributes:
        score (int): Percentage of job keywords found in the resume, 0-100.
        label (str): Score band label.
        matched_keywords (list[str]): Job keywords present in the resume.
        missing_keywords (list[str]): Job keywords absent from the resume.
        suggestions (list[str]): Advice on the most frequent missing keywords.
        job_keywords (list[str]): All keywords extracted from the job description.
        tips (list[str]): General advice based on score band and resume shape.
    """
    score: int
    label: str
    matched_keywords: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    job_keywords: List[str] = field(default_factory=list)
    tips: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScoreColor:
    """CSS class names used to present a score band."""
    text: str
    bg: str
    border: str
    gradient: str
