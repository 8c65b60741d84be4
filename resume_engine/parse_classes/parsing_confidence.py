"""parsing_confidence.py
Scores how much of a resume the parser recognized.
"""
from resume_engine.models import ParsingConfidence, StructuredResume

# Signal -> weight. Weights sum to 100.
CONFIDENCE_WEIGHTS = {
    "name": 25,
    "email": 25,
    "entries": 30,
    "skills": 20,
}

FEW_SKILLS_THRESHOLD = 3


def get_parsing_confidence(resume: StructuredResume) -> ParsingConfidence:
    """
    Weighted completeness score of a parsed resume, 0-100.

    Each signal (a name, an email, at least one education / experience /
    project entry, at least one skill) adds its weight when present, so the
    score never drops when a signal is added. `details` names what is missing.

    Args:
        resume (StructuredResume): Parser output.

    Returns:
        ParsingConfidence: The score and human-readable notes.
    """
    score = 0
    details = []

    if resume.personal.full_name.strip():
        score += CONFIDENCE_WEIGHTS["name"]
    else:
        details.append("Could not detect name")

    if resume.personal.email.strip():
        score += CONFIDENCE_WEIGHTS["email"]
    else:
        details.append("No email found")

    if resume.education or resume.experience or resume.projects:
        score += CONFIDENCE_WEIGHTS["entries"]
    else:
        details.append("No education, experience or project entries parsed")

    if resume.skills:
        score += CONFIDENCE_WEIGHTS["skills"]
        if len(resume.skills) < FEW_SKILLS_THRESHOLD:
            details.append("Few skills detected - consider adding more")
    else:
        details.append("No skills detected")

    return ParsingConfidence(score=min(score, 100), details=details)
