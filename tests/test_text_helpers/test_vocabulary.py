"""test_vocabulary.py
The lookup tables are immutable and internally consistent.
"""
import pytest

from resume_engine.text_helpers.vocabulary import (
    ATS_TECH_KEYWORDS,
    KEYWORD_ALIASES,
    OTHER_HEADERS,
    SECTION_HEADERS,
    STOP_WORDS,
    TECH_DICTIONARY,
)


class TestVocabulary:

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            SECTION_HEADERS["new header"] = "skills"
        with pytest.raises(TypeError):
            TECH_DICTIONARY["New Tech"] = ()
        with pytest.raises(AttributeError):
            STOP_WORDS.add("python")

    def test_required_header_synonyms(self):
        expected = {
            "education": "education",
            "academic": "education",
            "experience": "experience",
            "work": "experience",
            "employment": "experience",
            "projects": "projects",
            "portfolio": "projects",
            "skills": "skills",
            "technologies": "skills",
            "technical skills": "skills",
        }
        for header, section in expected.items():
            assert SECTION_HEADERS[header] == section

    def test_other_headers_do_not_overlap_section_headers(self):
        assert not OTHER_HEADERS & set(SECTION_HEADERS)

    def test_alias_targets_that_are_stop_words_are_tech_keywords(self):
        # "golang" -> "go" must survive stop-word filtering
        for target in set(KEYWORD_ALIASES.values()) & STOP_WORDS:
            assert target in ATS_TECH_KEYWORDS
