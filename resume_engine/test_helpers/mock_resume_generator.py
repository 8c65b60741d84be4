"""mock_resume_generator.py
Outputs raw resume text that simulates FileParser output before normalization.
"""
from dataclasses import dataclass
from typing import List, Optional
import copy

from resume_engine.models import ResumeText

DEFAULT_SECTION_ORDER = [
    "contact_info",
    "summary",
    "experience",
    "education",
    "projects",
    "skills",
]

# -------------------------------------------------------------------------
# DUMMY RESUME BLOCKS (to construct resumes from)
# -------------------------------------------------------------------------

DUMMY_RESUME_BLOCKS = {
    # ---------------------------------------------------------
    # CONTACT INFO BLOCKS
    # First example is the default used
    # ---------------------------------------------------------
    "contact_info": [
        """{name}
        {email} | {phone} | linkedin.com/in/{linkedin_name} | github.com/{github_handle}
        """,

        """{name}
        Greater New York Area | {phone}
        {email}
        https://www.linkedin.com/in/{linkedin_name}
        GitHub: @{github_handle}
        """,
    ],

    # ---------------------------------------------------------
    # SUMMARY BLOCKS (never extracted)
    # ---------------------------------------------------------
    "summary": [
        """SUMMARY
        Backend engineer focused on reliable data services.
        """,
    ],

    # ---------------------------------------------------------
    # EXPERIENCE BLOCKS
    # ---------------------------------------------------------
    "experience": [
        """EXPERIENCE
        Software Engineer at {company_name}
        Jun 2020 - Present
        • Built REST APIs in Python and FastAPI serving two million requests per day
        • Migrated nightly batch jobs to Airflow, cutting runtime by 40%
        Data Analyst | Initech
        Jan 2018 - May 2020
        • Automated weekly reporting with SQL and Pandas
        """,

        """WORK EXPERIENCE
        {company_name} — Director of Product Management
        May 2018 - Current
        • Streamlined customer support process by using SysAid for ticket
        management, boosting satisfaction ratings by 27%.
        """,
    ],

    # ---------------------------------------------------------
    # EDUCATION BLOCKS
    # ---------------------------------------------------------
    "education": [
        """EDUCATION
        State University | B.S. Computer Science
        2014 - 2018
        """,

        """EDUCATION
        M.S. Computer Science, San Diego State University
        February 2016 - June 2018
        """,
    ],

    # ---------------------------------------------------------
    # PROJECTS BLOCKS
    # ---------------------------------------------------------
    "projects": [
        """PROJECTS
        Resume Parser (Python, FastAPI) | github.com/{github_handle}/resume-parser
        • Parses PDF and DOCX resumes into structured JSON
        Budget Tracker
        • Personal finance dashboard built with React and Firebase
        """,
    ],

    # ---------------------------------------------------------
    # SKILLS BLOCKS
    # ---------------------------------------------------------
    "skills": [
        """SKILLS
        {skills}
        """,

        """Skills: {skills}""",
    ],
}


# -------------------------------------------------------------------------
# MockResumeGenerator INPUT DATA MODELS
# -------------------------------------------------------------------------
@dataclass
class ResumeValues:
    """
    Holds fillable field values that can be overridden when generating a
    mock resume. These are the variable parts of the block templates.
    """
    name: str = "John Doe"
    email: str = "john.doe@example.com"
    phone: str = "(555) 123-4567"
    linkedin_name: str = "john_doe23"
    github_handle: str = "johndoe"
    company_name: str = "Acme Corp"
    skills: str = "Languages: Python, SQL, JavaScript\nTools: Docker, Git, AWS"


@dataclass
class ResumeTemplates:
    """
    Text templates used to render each section of the resume. Templates use
    `str.format()` placeholders such as `{name}` or `{skills}`.
    """
    contact_info: str = DUMMY_RESUME_BLOCKS["contact_info"][0]
    summary: str = DUMMY_RESUME_BLOCKS["summary"][0]
    experience: str = DUMMY_RESUME_BLOCKS["experience"][0]
    education: str = DUMMY_RESUME_BLOCKS["education"][0]
    projects: str = DUMMY_RESUME_BLOCKS["projects"][0]
    skills: str = DUMMY_RESUME_BLOCKS["skills"][0]
    other: Optional[str] = None  # optional, only used if provided


# -------------------------------------------------------------------------
# MOCK RESUME GENERATOR
# -------------------------------------------------------------------------
class MockResumeGenerator:
    """
    Generate realistic mock resumes for testing purposes.

    Builds a resume from block templates and values and returns the raw text
    (indentation and blank lines included, as a file parser would produce).

    Attributes:
        resume_values (ResumeValues): Fillable field values for substitution.
        resume_templates (ResumeTemplates): Templates for each resume section.
        section_order (List[str]): The sequence of sections to include.
    """

    def __init__(
        self,
        resume_values: Optional[ResumeValues] = None,
        resume_templates: Optional[ResumeTemplates] = None,
        section_order: Optional[List[str]] = None,
    ):
        self.resume_values = resume_values or ResumeValues()
        self.resume_templates = resume_templates or ResumeTemplates()
        self.section_order = DEFAULT_SECTION_ORDER if section_order is None else section_order

    def _render(self, section: str) -> str:
        template = getattr(self.resume_templates, section, None)
        if not template:
            return ""
        return template.format(**vars(self.resume_values))

    # ----------------------
    # Public interface
    # ----------------------
    def generate(self) -> str:
        """
        Build the resume and return it as raw text.

        Returns:
            str: Sections in `section_order`, separated by blank lines.
        """
        parts = [self._render(section) for section in self.section_order]
        return "\n\n".join(part for part in parts if part)

    def generate_resume_text(self) -> ResumeText:
        """Build the resume and return it normalized."""
        return ResumeText.from_text(self.generate())

    def clone(
        self,
        resume_values: Optional[ResumeValues] = None,
        resume_templates: Optional[ResumeTemplates] = None,
        section_order: Optional[List[str]] = None,
    ) -> "MockResumeGenerator":
        """
        Create a copy of this generator, optionally overriding specific attributes.

        Returns:
            MockResumeGenerator: A new generator with the requested overrides.
        """
        new_gen = copy.deepcopy(self)
        if resume_values is not None:
            new_gen.resume_values = resume_values
        if resume_templates is not None:
            new_gen.resume_templates = resume_templates
        if section_order is not None:
            new_gen.section_order = section_order
        return new_gen
