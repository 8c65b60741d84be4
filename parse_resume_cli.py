"""parse_resume_cli.py
Run ResumeParserFramework from the command line.
Example: `python parse_resume_cli.py path/to/resume.pdf [path/to/job_description.txt]`
"""
import sys

from resume_engine.ats.ats_matcher import calculate_match
from resume_engine.models import StructuredResume
from resume_engine.parse_classes.parsing_confidence import get_parsing_confidence
from resume_engine.parse_classes.resume_parse_framework import ResumeParserFramework


def _or_none(value) -> str:
    return value if value else "None"


def print_resume(resume: StructuredResume) -> None:
    personal = resume.personal
    print("Resume Parsing Result:")
    print(f"Name: {_or_none(personal.full_name)}")
    print(f"Email: {_or_none(personal.email)}")
    print(f"Phone: {_or_none(personal.phone)}")
    print(f"GitHub: {_or_none(personal.github)}")
    print(f"LinkedIn: {_or_none(personal.linkedin)}")

    print("\nEducation:")
    for entry in resume.education:
        print(f"  - {entry.school} | {entry.degree} | {entry.start} - {entry.end}")

    print("\nExperience:")
    for entry in resume.experience:
        print(f"  - {entry.role} @ {entry.company} | {entry.start} - {entry.end}")
        for line in entry.description.splitlines():
            print(f"      {line}")

    print("\nProjects:")
    for entry in resume.projects:
        stack = f" ({', '.join(entry.tech_stack)})" if entry.tech_stack else ""
        print(f"  - {entry.title}{stack} {entry.link}".rstrip())

    print(f"\nSkills: {', '.join(resume.skills) if resume.skills else 'None'}")


def main():
    if len(sys.argv) < 2:
        print("Usage: python parse_resume_cli.py <resume_file> [job_description_file]")
        sys.exit(1)

    file_path = sys.argv[1]

    # Initialize the parser
    resume_parser_framework = ResumeParserFramework()

    # Parse the resume
    resume = resume_parser_framework.parse_resume(file_path)
    print_resume(resume)

    confidence = get_parsing_confidence(resume)
    print(f"\nParsing confidence: {confidence.score}/100")
    for detail in confidence.details:
        print(f"  - {detail}")

    if len(sys.argv) < 3:
        return

    with open(sys.argv[2], "r", encoding="utf-8") as f:
        job_description = f.read()

    report = calculate_match(resume, job_description)
    print(f"\nATS match: {report.score}/100 ({report.label})")
    print(f"Matched: {', '.join(report.matched_keywords) or 'None'}")
    print(f"Missing: {', '.join(report.missing_keywords) or 'None'}")
    for line in report.suggestions + report.tips:
        print(f"  - {line}")


if __name__ == "__main__":
    main()
