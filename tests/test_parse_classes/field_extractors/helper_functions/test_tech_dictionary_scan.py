"""test_tech_dictionary_scan.py
Tests for find_technologies.
"""
from resume_engine.parse_classes.field_extractor.helpers.tech_dictionary_scan import find_technologies


class TestFindTechnologies:

    def test_aliases_map_to_canonical_names(self):
        assert find_technologies("Built with react.js, nodejs and postgres") == ["React", "Node.js", "PostgreSQL"]

    def test_longest_spelling_wins(self):
        assert find_technologies("Shipped a React Native app") == ["React Native"]

    def test_first_mention_order_without_duplicates(self):
        assert find_technologies("Docker, Python, docker, PYTHON") == ["Docker", "Python"]

    def test_names_inside_words_are_ignored(self):
        assert find_technologies("Javanese gitter") == []

    def test_limit(self):
        assert find_technologies("Python Java Rust Kotlin", limit=2) == ["Python", "Java"]

    def test_symbols_in_names(self):
        assert find_technologies("C++ and C# services on .NET") == ["C++", "C#", ".NET"]
