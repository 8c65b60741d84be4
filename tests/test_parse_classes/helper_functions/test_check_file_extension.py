"""test_check_file_extension.py
Test check_file_extension function.
"""
from pathlib import Path

import pytest

from resume_engine.exceptions import FileNotSupportedError

from resume_engine.parse_classes.file_parser.helpers.check_file_extension import check_file_extension

class TestCheckFileExtension:
    """Tests for the check_file_extension utility."""

    def test_valid_extension_returns_lowercase(self):
        """Return the lowercase file extension if it's supported."""
        assert check_file_extension("resume.PDF", [".pdf", ".docx"]) == ".pdf"

    def test_valid_extension_in_lowercase(self):
        assert check_file_extension("resume.docx", [".pdf", ".docx"]) == ".docx"

    def test_unsupported_extension_raises_error(self):
        """Raise FileNotSupportedError if extension is not supported."""
        supported = [".pdf", ".docx"]

        with pytest.raises(FileNotSupportedError) as exc_info:
            check_file_extension("resume.txt", supported)

        err = exc_info.value
        assert err.extension == ".txt"
        assert err.supported_extensions == supported

    def test_no_extension_raises_error(self):
        """Raise FileNotSupportedError when file has no extension."""
        with pytest.raises(FileNotSupportedError) as exc_info:
            check_file_extension("resume", [".pdf", ".docx"])
        assert exc_info.value.extension == ""

    def test_dot_in_filename_not_extension(self):
        """Ensure it extracts only the final extension."""
        assert check_file_extension("resume.v1.docx", [".pdf", ".docx"]) == ".docx"

    def test_txt_supported_when_listed(self):
        assert check_file_extension("document.txt", [".pdf", ".docx", ".txt"]) == ".txt"

    def test_pathlib_path_accepted(self):
        assert check_file_extension(Path("folder") / "cv.pdf", [".pdf"]) == ".pdf"
