"""test_text_file_parser.py
Test suite for TextFileParser.
"""
import pytest

from resume_engine.exceptions import FileEmptyError, FileNotSupportedError
from resume_engine.test_helpers.file_parsing import write_txt

from resume_engine.parse_classes.file_parser.text_file_parser import TextFileParser


class TestTextFileParser:

    def test_lines_are_normalized(self, tmp_path):
        """Blank lines dropped, whitespace collapsed, CRLF handled."""
        path = write_txt(tmp_path / "resume.txt", "  Jane   Doe \r\n\r\n\tjane@example.com\n\n")
        assert TextFileParser(str(path)).parse().lines == ("Jane Doe", "jane@example.com")

    def test_invalid_utf8_is_replaced_not_raised(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes("José Núñez".encode("latin-1"))
        lines = TextFileParser(str(path)).parse().lines
        assert len(lines) == 1
        assert lines[0].startswith("Jos")

    def test_whitespace_only_file_raises_file_empty_error(self, tmp_path):
        path = write_txt(tmp_path / "blank.txt", " \n \n")
        with pytest.raises(FileEmptyError):
            TextFileParser(str(path)).parse()

    def test_other_extension_raises(self, tmp_path):
        path = write_txt(tmp_path / "resume.md", "Jane Doe")
        with pytest.raises(FileNotSupportedError):
            TextFileParser(str(path))
