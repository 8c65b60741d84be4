"""test_skills_extractor.py
Tests for SkillsExtractor.
"""
import pytest

from resume_engine.models import SegmentedResume
from resume_engine.parse_classes.field_extractor.skills_extractor import SkillsExtractor

from resume_engine.test_helpers.dummy_variables.dummy_resume_texts import (
    MOCK_RESUME_GENERATOR_0,
    MOCK_RESUME_GENERATOR_1,
)

DICTIONARY_TEXT = "\n".join([
    "SKILLS",
    "Python",
    "EXPERIENCE",
    "Acme | Engineer",
    "2019 - 2020",
    "• Built services with PostgreSQL and Docker",
])


class TestSkillsExtractorRule:

    @pytest.fixture(scope="class")
    def extractor(self):
        return SkillsExtractor()

    def test_category_prefixes_are_stripped(self, extractor, segment):
        skills = extractor.extract(segment(MOCK_RESUME_GENERATOR_0.generate()))
        assert skills == ["Python", "SQL", "JavaScript", "Docker", "Git", "AWS"]

    def test_inline_skills_header(self, extractor, segment):
        skills = extractor.extract(segment(MOCK_RESUME_GENERATOR_1.generate()))
        assert skills == ["Go", "Kubernetes", "Terraform"]

    def test_sentences_are_rejected(self, extractor, segment):
        skills = extractor.extract(segment("SKILLS\nPython, SQL\nDeveloped dashboards using Tableau"))
        assert skills == ["Python", "SQL"]

    def test_case_insensitive_duplicates_keep_first_casing(self, extractor, segment):
        skills = extractor.extract(segment("SKILLS\nPython, python, PYTHON, SQL\nsql"))
        assert skills == ["Python", "SQL"]

    def test_bulleted_pipe_list(self, extractor, segment):
        assert extractor.extract(segment("SKILLS\n• Python | Go | Rust")) == ["Python", "Go", "Rust"]

    def test_only_skills_section_is_read(self, extractor, segment):
        assert extractor.extract(segment(DICTIONARY_TEXT)) == ["Python"]

    def test_empty_section(self, extractor, segment):
        assert extractor.extract(segment("EDUCATION\nMIT\n2020")) == []
        assert extractor.extract(SegmentedResume()) == []


class TestSplitSkillLine:

    def test_parentheses_and_conjunctions(self):
        assert SkillsExtractor.split_skill_line("Cloud: AWS (EC2, S3), and Docker.") == ["AWS", "EC2", "S3", "Docker"]

    def test_semicolons(self):
        assert SkillsExtractor.split_skill_line("Python; Java; C#") == ["Python", "Java", "C#"]

    @pytest.mark.parametrize("item, valid", [
        ("Python", True),
        ("Machine Learning", True),
        ("2020", False),
        ("etc", False),
        ("Proficient in many things", False),
        ("one two three four five", False),
        ("x" * 41, False),
    ])
    def test_is_valid_skill(self, item, valid):
        assert SkillsExtractor().is_valid_skill(item) is valid


class TestSkillsExtractorDictionary:

    def test_known_technologies_anywhere_are_added(self, segment):
        skills = SkillsExtractor(extraction_method="dictionary").extract(segment(DICTIONARY_TEXT))
        assert skills == ["Python", "PostgreSQL", "Docker"]

    def test_regex_is_not_supported(self):
        with pytest.raises(NotImplementedError):
            SkillsExtractor(extraction_method="regex")
