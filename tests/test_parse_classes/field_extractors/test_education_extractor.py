"""test_education_extractor.py
Tests for EducationExtractor.
"""
import pytest

from resume_engine.models import EducationEntry, SegmentedResume
from resume_engine.parse_classes.field_extractor.education_extractor import EducationExtractor

from resume_engine.test_helpers.dummy_variables.dummy_resume_texts import (
    MOCK_RESUME_GENERATOR_0,
    JANE_DOE_RESUME_TEXT,
)


@pytest.fixture(scope="module")
def extractor():
    return EducationExtractor()


class TestEducationExtractor:

    def test_school_pipe_degree(self, extractor, segment):
        education = extractor.extract(segment(MOCK_RESUME_GENERATOR_0.generate()))
        assert education == [
            EducationEntry(school="State University", degree="B.S. Computer Science", start="2014", end="2018")
        ]

    def test_school_comma_degree(self, extractor, segment):
        education = extractor.extract(segment(JANE_DOE_RESUME_TEXT))
        assert education == [
            EducationEntry(school="MIT", degree="B.S. Computer Science", start="2020", end="2024")
        ]

    def test_degree_before_school(self, extractor, segment):
        education = extractor.extract(segment("EDUCATION\nB.S. Physics, Ohio State University\n2010 - 2014"))
        assert education[0].school == "Ohio State University"
        assert education[0].degree == "B.S. Physics"

    def test_single_date_is_graduation_date(self, extractor, segment):
        education = extractor.extract(segment("EDUCATION\nMIT\nB.S. Computer Science\nExpected May 2025"))
        assert education == [
            EducationEntry(school="MIT", degree="B.S. Computer Science", start="", end="May 2025")
        ]

    def test_multiple_entries_in_document_order(self, extractor, segment):
        text = "\n".join([
            "EDUCATION",
            "Stanford University",
            "M.S. Computer Science",
            "2018 - 2020",
            "UC Berkeley",
            "B.A. Economics",
            "2014 - 2018",
        ])
        education = extractor.extract(segment(text))
        assert [(entry.school, entry.degree) for entry in education] == [
            ("Stanford University", "M.S. Computer Science"),
            ("UC Berkeley", "B.A. Economics"),
        ]
        assert [(entry.start, entry.end) for entry in education] == [("2018", "2020"), ("2014", "2018")]

    def test_detail_lines_stay_with_their_entry(self, extractor, segment):
        education = extractor.extract(segment("EDUCATION\nMIT\nB.S. Math\n2016 - 2020\nGPA: 3.9"))
        assert len(education) == 1
        assert education[0].school == "MIT"

    def test_empty_section(self, extractor, segment):
        assert extractor.extract(segment("SKILLS\nPython")) == []
        assert extractor.extract(SegmentedResume()) == []
