"""test_file_parser.py
Comprehensive test suite for:
  - FileParser (abstract base)
"""

import os
import pytest

from resume_engine.exceptions import (
    FileTooLargeError,
    FileEmptyError,
    FileNotSupportedError,
    NoFilePathError,
)
from resume_engine.models import ResumeText

from resume_engine.test_helpers.file_parsing import DummyTxtParser
from resume_engine.parse_classes.file_parser.file_parser import FileParser


class TestFileParser:
    """Unit tests for FileParser validation and abstract behavior."""

    def test_cannot_instantiate_directly(self):
        """Cannot instantiate abstract FileParser directly."""
        with pytest.raises(TypeError):
            FileParser("some_file.txt")

    @pytest.mark.parametrize("file_path", ["", None])
    def test_missing_file_path_raises(self, file_path):
        with pytest.raises(NoFilePathError):
            DummyTxtParser(file_path)

    def test_file_not_found_error(self):
        """Raises FileNotFoundError if file does not exist."""
        with pytest.raises(FileNotFoundError):
            DummyTxtParser("non_existent_file.txt")

    def test_file_too_large_error(self, tmp_path):
        """Raises FileTooLargeError if file exceeds max_file_size_mb."""
        test_file = tmp_path / "test.txt"
        test_file.write_text("small content")
        with pytest.raises(FileTooLargeError):
            DummyTxtParser(str(test_file), max_file_size_mb=0.000001)

    def test_unsupported_extension_error(self, tmp_path):
        """Raises FileNotSupportedError if file extension not in SUPPORTED_EXTENSIONS."""
        test_file = tmp_path / "test.pdf"
        test_file.write_text("content")
        with pytest.raises(FileNotSupportedError):
            DummyTxtParser(str(test_file))  # DummyTxtParser supports only .txt

    def test_valid_file_passes_validation(self, tmp_path):
        """Valid file with supported extension and size passes."""
        test_file = tmp_path / "test.txt"
        test_file.write_text("some content")
        parser = DummyTxtParser(str(test_file), max_file_size_mb=None)
        assert parser.file_path == str(test_file)
        assert parser.max_file_size_mb is None

    def test_pathlib_path_works(self, tmp_path):
        """Passing a Path object is allowed and stored correctly."""
        test_file = tmp_path / "test.txt"
        test_file.write_text("some content")
        parser = DummyTxtParser(test_file)  # Path object
        assert parser.file_path == test_file

    def test_parse_returns_resume_text(self, tmp_path):
        test_file = tmp_path / "test.txt"
        test_file.write_text("ignored")
        result = DummyTxtParser(str(test_file)).parse()
        assert isinstance(result, ResumeText)
        assert result.lines == ("dummy text",)

    def test_blank_raw_text_raises_file_empty_error(self, tmp_path, mocker):
        """parse() should raise FileEmptyError when the document holds only whitespace."""
        test_file = tmp_path / "test.txt"
        test_file.write_text("")
        parser = DummyTxtParser(str(test_file))
        mocker.patch.object(DummyTxtParser, "_read_raw_text", return_value="  \n\t\n ")

        with pytest.raises(FileEmptyError) as exc_info:
            parser.parse()

        assert exc_info.value.file_path == str(test_file)

    def test_max_file_size_edge_cases(self, tmp_path):
        """Edge cases for max_file_size_mb boundary conditions."""
        test_file = tmp_path / "test.txt"
        test_file.write_text("abc") # Bigger than 1 byte
        # Exactly equal to file size should pass
        size_mb = os.path.getsize(test_file) / (1024 * 1024)
        parser = DummyTxtParser(str(test_file), max_file_size_mb=size_mb)
        assert parser.file_path == str(test_file)
        # Slightly smaller than actual size triggers FileTooLargeError
        with pytest.raises(FileTooLargeError):
            DummyTxtParser(str(test_file), max_file_size_mb=size_mb - 1e-7)

    # ------------------------------------------
    # TEST _validate_file
    # ------------------------------------------

    def test_file_not_found_raises(self, tmp_path):
        """Should raise FileNotFoundError when file does not exist."""
        fake_path = tmp_path / "missing.txt"
        parser = DummyTxtParser.__new__(DummyTxtParser)
        parser.file_path = str(fake_path)
        parser.max_file_size_mb = None

        with pytest.raises(FileNotFoundError):
            parser._validate_file()

    def test_valid_file_no_size_limit(self, tmp_path):
        """Valid file with no size limit should pass without errors."""
        test_file = tmp_path / "small.txt"
        test_file.write_text("some content")

        parser = DummyTxtParser.__new__(DummyTxtParser)
        parser.file_path = str(test_file)
        parser.max_file_size_mb = None  # No size limit

        # Should not raise anything
        parser._validate_file()
