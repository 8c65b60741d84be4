"""test_resume_flattener.py
Tests for flatten_resume.
"""
from resume_engine.ats.resume_flattener import flatten_resume
from resume_engine.models import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    StructuredResume,
)


class TestFlattenResume:

    def test_fields_in_order(self):
        resume = StructuredResume(
            personal=PersonalInfo(full_name="Jane Doe", summary="Backend engineer"),
            skills=["Python", "SQL"],
            experience=[ExperienceEntry(company="Acme", role="Engineer", description="Built APIs")],
            projects=[ProjectEntry(title="Bot", description="Chat bot", tech_stack=["Redis", "Go"])],
            education=[EducationEntry(school="MIT", degree="B.S. Math")],
        )
        assert flatten_resume(resume) == (
            "Python SQL Acme Engineer Built APIs Bot Chat bot Redis Go MIT B.S. Math Backend engineer"
        )

    def test_name_and_contact_details_are_left_out(self):
        resume = StructuredResume(
            personal=PersonalInfo(full_name="Python Smith", email="py@example.com", github="python"),
        )
        assert flatten_resume(resume) == ""

    def test_empty_fields_add_no_spaces(self):
        resume = StructuredResume(
            skills=["Python"],
            experience=[ExperienceEntry(company="Acme")],
        )
        assert flatten_resume(resume) == "Python Acme"
