"""test_parsing_confidence.py
Tests for get_parsing_confidence.
"""
from dataclasses import replace

import pytest

from resume_engine.models import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    StructuredResume,
)
from resume_engine.parse_classes.parsing_confidence import (
    CONFIDENCE_WEIGHTS,
    get_parsing_confidence,
)

FULL_RESUME = StructuredResume(
    personal=PersonalInfo(full_name="Jane Doe", email="jane@example.com"),
    education=[EducationEntry(school="MIT")],
    skills=["Python", "SQL", "React"],
)


class TestParsingConfidence:

    def test_weights_sum_to_100(self):
        assert sum(CONFIDENCE_WEIGHTS.values()) == 100

    def test_full_resume_scores_100(self):
        confidence = get_parsing_confidence(FULL_RESUME)
        assert confidence.score == 100
        assert confidence.details == []

    def test_empty_resume_scores_0(self):
        confidence = get_parsing_confidence(StructuredResume())
        assert confidence.score == 0
        assert confidence.details == [
            "Could not detect name",
            "No email found",
            "No education, experience or project entries parsed",
            "No skills detected",
        ]

    @pytest.mark.parametrize("entries", [
        {"education": [EducationEntry(school="MIT")]},
        {"experience": [ExperienceEntry(company="Acme")]},
        {"projects": [ProjectEntry(title="Bot")]},
    ])
    def test_any_entry_type_counts(self, entries):
        assert get_parsing_confidence(StructuredResume(**entries)).score == CONFIDENCE_WEIGHTS["entries"]

    def test_few_skills_note(self):
        confidence = get_parsing_confidence(replace(FULL_RESUME, skills=["Python"]))
        assert confidence.score == 100
        assert confidence.details == ["Few skills detected - consider adding more"]

    def test_whitespace_name_is_missing(self):
        resume = replace(FULL_RESUME, personal=PersonalInfo(full_name="  ", email="jane@example.com"))
        assert get_parsing_confidence(resume).score == 100 - CONFIDENCE_WEIGHTS["name"]

    def test_adding_a_signal_never_lowers_the_score(self):
        steps = [
            StructuredResume(),
            StructuredResume(skills=["Python"]),
            StructuredResume(skills=["Python"], projects=[ProjectEntry(title="Bot")]),
            StructuredResume(
                skills=["Python"],
                projects=[ProjectEntry(title="Bot")],
                personal=PersonalInfo(email="a@b.co"),
            ),
            replace(FULL_RESUME, projects=[ProjectEntry(title="Bot")]),
        ]
        scores = [get_parsing_confidence(resume).score for resume in steps]
        assert scores == sorted(scores)
        assert scores[0] == 0 and scores[-1] == 100
