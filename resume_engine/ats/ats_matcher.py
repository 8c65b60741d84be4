"""ats_matcher.py
Keyword-overlap match between a resume and a job description.
"""
import math
from typing import List, Optional, Set

from resume_engine.config import PARSER_DEFAULTS
from resume_engine.exceptions import InvalidJobDescriptionError, InvalidResumeTextError
from resume_engine.logging import logger_factory
from resume_engine.models import MatchReport, StructuredResume
from resume_engine.text_helpers.vocabulary import ATS_TECH_KEYWORDS

from resume_engine.ats.keyword_extractor import Keyword, extract_keywords, keyword_key_set
from resume_engine.ats.resume_flattener import flatten_resume
from resume_engine.ats.score_bands import clamp_score, get_score_label

logger = logger_factory.get_logger(__name__)

NO_KEYWORDS_SUGGESTION = (
    "No keywords found in the job description. "
    "Paste the full posting, including its requirements and responsibilities."
)
SUGGESTION_TEMPLATE = "Consider adding experience or skills related to: {keyword}."

LIGHT_SKILLS_COUNT = 5
SHORT_DESCRIPTION_LENGTH = 100
ACTION_VERB_SCORE = 60


def calculate_match(resume: StructuredResume, job_description: str) -> MatchReport:
    """
    Match a StructuredResume against a job description.

    The resume is flattened (every text field except the name) and matched
    with ``calculate_match_from_text``. Tips are then based on the resume's
    structure (skill count, description length, projects).

    Raises:
        InvalidResumeTextError: If `resume` is not a StructuredResume.
        InvalidJobDescriptionError: If `job_description` is not a string.
    """
    if not isinstance(resume, StructuredResume):
        raise InvalidResumeTextError(type(resume).__name__)
    _validate_job_description(job_description)

    job_keywords = extract_keywords(job_description)
    report = _build_report(flatten_resume(resume), job_keywords)
    if not job_keywords:
        return report

    tips = _structured_resume_tips(report.score, report.missing_keywords, job_keywords, resume)
    return _with_tips(report, tips)


def calculate_match_from_text(resume_text: str, job_description: str) -> MatchReport:
    """
    Match raw resume text (e.g. from an uploaded document) against a job description.

    A job keyword is matched when its normalized form, or any run of words
    normalizing to it, appears in the resume. Matched and missing keywords
    keep job-description order and surface form. The score is
    ``round(100 * matched / total)`` with halves rounded up, or 0 when the job
    description has no keywords.

    Example:
        >>> report = calculate_match_from_text(
        ...     "Built Python backend services",
        ...     "Looking for a Python developer with React and Docker experience",
        ... )
        >>> report.score, report.matched_keywords, report.missing_keywords
        (33, ['Python'], ['React', 'Docker'])

    Raises:
        InvalidResumeTextError: If `resume_text` is not a string.
        InvalidJobDescriptionError: If `job_description` is not a string.
    """
    if not isinstance(resume_text, str):
        raise InvalidResumeTextError(type(resume_text).__name__)
    _validate_job_description(job_description)

    job_keywords = extract_keywords(job_description)
    report = _build_report(resume_text, job_keywords)
    if not job_keywords:
        return report

    tips = _resume_text_tips(report.score, report.missing_keywords, job_keywords, resume_text)
    return _with_tips(report, tips)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _validate_job_description(job_description) -> None:
    if not isinstance(job_description, str):
        raise InvalidJobDescriptionError(type(job_description).__name__)


def _build_report(resume_text: str, job_keywords: List[Keyword]) -> MatchReport:
    if not job_keywords:
        logger.debug("Job description has no extractable keywords")
        return MatchReport(
            score=0,
            label=get_score_label(0),
            suggestions=[NO_KEYWORDS_SUGGESTION],
        )

    resume_keys: Set[str] = keyword_key_set(resume_text)
    matched = [kw for kw in job_keywords if kw.key in resume_keys]
    missing = [kw for kw in job_keywords if kw.key not in resume_keys]

    score = int(clamp_score(round_half_up(100 * len(matched) / len(job_keywords))))
    logger.debug(f"ATS match: {len(matched)}/{len(job_keywords)} keywords, score {score}")

    return MatchReport(
        score=score,
        label=get_score_label(score),
        matched_keywords=[kw.display for kw in matched],
        missing_keywords=[kw.display for kw in missing],
        suggestions=_missing_keyword_suggestions(missing),
        job_keywords=[kw.display for kw in job_keywords],
    )


def _missing_keyword_suggestions(
    missing: List[Keyword],
    limit: int = PARSER_DEFAULTS.SUGGESTION_LIMIT,
) -> List[str]:
    """Most frequent missing keywords first, ties broken by first occurrence."""
    ranked = sorted(missing, key=lambda kw: (-kw.count, kw.first_index))
    return [SUGGESTION_TEMPLATE.format(keyword=kw.display) for kw in ranked[:limit]]


def _with_tips(report: MatchReport, tips: List[str]) -> MatchReport:
    return MatchReport(
        score=report.score,
        label=report.label,
        matched_keywords=report.matched_keywords,
        missing_keywords=report.missing_keywords,
        suggestions=report.suggestions,
        job_keywords=report.job_keywords,
        tips=tips[:PARSER_DEFAULTS.TIP_LIMIT],
    )


def _missing_technical_skills(missing_displays: List[str], job_keywords: List[Keyword]) -> List[str]:
    by_display = {kw.display: kw for kw in job_keywords}
    technical = []
    for display in missing_displays:
        keyword: Optional[Keyword] = by_display.get(display)
        if display.lower() in ATS_TECH_KEYWORDS or (keyword and keyword.key in ATS_TECH_KEYWORDS):
            technical.append(display)
    return technical[:PARSER_DEFAULTS.SUGGESTION_LIMIT]


def _structured_resume_tips(
    score: int,
    missing_displays: List[str],
    job_keywords: List[Keyword],
    resume: StructuredResume,
) -> List[str]:
    tips = []

    if score < 40:
        tips.append(
            "Your resume has low keyword alignment. Consider tailoring it more closely to this job description."
        )
    elif score < 70:
        tips.append("Good foundation! Adding a few more relevant keywords could improve your match score.")
    else:
        tips.append("Excellent match! Your resume aligns well with this job description.")

    technical = _missing_technical_skills(missing_displays, job_keywords)
    if technical:
        tips.append(f"Consider adding these technical skills if you have them: {', '.join(technical)}")

    if len(resume.skills) < LIGHT_SKILLS_COUNT:
        tips.append("Your skills section seems light. ATS systems heavily weight the skills section.")

    if any(len(entry.description) < SHORT_DESCRIPTION_LENGTH for entry in resume.experience):
        tips.append(
            "Some experience entries have short descriptions. Adding more detail with relevant keywords can help."
        )

    if not resume.projects:
        tips.append("Adding projects that demonstrate the required skills can significantly improve your match.")

    return tips


def _resume_text_tips(
    score: int,
    missing_displays: List[str],
    job_keywords: List[Keyword],
    resume_text: str,
) -> List[str]:
    tips = []

    if score < 40:
        tips.append(
            "This resume has low keyword alignment with the job description. Consider tailoring it more closely."
        )
    elif score < 70:
        tips.append(
            "Good foundation! The resume covers many requirements but could include more relevant keywords."
        )
    else:
        tips.append("Excellent match! This resume aligns well with the job description.")

    technical = _missing_technical_skills(missing_displays, job_keywords)
    if technical:
        tips.append(f"Consider adding these technical skills if applicable: {', '.join(technical)}")

    if len(resume_text.split()) < PARSER_DEFAULTS.SHORT_RESUME_WORD_COUNT:
        tips.append(
            "The resume appears quite short. More detailed descriptions could improve keyword matching."
        )

    if score < ACTION_VERB_SCORE:
        tips.append("Tip: Use action verbs and quantify achievements to make your resume more impactful.")

    return tips
