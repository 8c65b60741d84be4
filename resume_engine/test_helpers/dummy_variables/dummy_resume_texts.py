"""dummy_resume_texts.py
Resume texts and generators shared across tests.
"""
from resume_engine.test_helpers.mock_resume_generator import (
    MockResumeGenerator,
    ResumeValues,
    ResumeTemplates,
    DUMMY_RESUME_BLOCKS,
)

# Default full resume: contact, summary, experience, education, projects, skills
MOCK_RESUME_GENERATOR_0 = MockResumeGenerator()

# Alternate contact block and a single skills line
MOCK_RESUME_GENERATOR_1 = MockResumeGenerator(
    resume_values=ResumeValues(
        name="Maria Lopez",
        email="Maria.Lopez@Example.org",
        phone="+1 415 555 0199",
        linkedin_name="maria-lopez",
        github_handle="mlopez",
        skills="Go, Kubernetes, Terraform",
    ),
    resume_templates=ResumeTemplates(
        contact_info=DUMMY_RESUME_BLOCKS["contact_info"][1],
        skills=DUMMY_RESUME_BLOCKS["skills"][1],
    ),
)

JANE_DOE_RESUME_TEXT = (
    "Jane Doe\n"
    "jane@example.com\n"
    "555-123-4567\n"
    "EDUCATION\n"
    "MIT, B.S. Computer Science\n"
    "2020 - 2024\n"
    "SKILLS\n"
    "Python, React, SQL"
)

# Every extractable section surrounded by sections that are not extracted
RESUME_WITH_OTHER_SECTIONS_TEXT = """Alex Kim
alex.kim@example.com
OBJECTIVE
Seeking a role building developer tools.
SKILLS
Rust, C++, Linux
CERTIFICATIONS
AWS Certified Developer - 2022
EXPERIENCE
Platform Engineer @ Globex
2021 - 2023
- Maintained the build farm
AWARDS
Hackathon winner 2020
"""

# Text without any recognized header
NO_HEADER_RESUME_TEXT = """Sam Lee
sam@example.com
I have worked on many projects using Python and Java.
"""
