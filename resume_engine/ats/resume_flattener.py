"""resume_flattener.py
Flattens a StructuredResume into one searchable string.
"""
from resume_engine.models import StructuredResume


def flatten_resume(resume: StructuredResume) -> str:
    """
    Join every text field an ATS would read into one string.

    The candidate's name is left out so it can never match a job keyword.
    Skills come first, then experience, projects, education and the summary.

    Args:
        resume (StructuredResume): Parsed or user-edited resume.

    Returns:
        str: Space-joined non-empty field values.
    """
    parts = [" ".join(resume.skills)]

    for experience in resume.experience:
        parts.extend([experience.company, experience.role, experience.description])

    for project in resume.projects:
        parts.extend([project.title, project.description, " ".join(project.tech_stack)])

    for education in resume.education:
        parts.extend([education.school, education.degree])

    parts.append(resume.personal.summary)

    return " ".join(part for part in parts if part and part.strip())
