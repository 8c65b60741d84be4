"""test_word_document_parser.py
Comprehensive test suite for:
  - WordDocumentParser
"""

import pytest

from resume_engine.test_helpers.file_parsing import (
    write_docx,
    write_pdf,
    assert_resume_text_is_readable,
)
from resume_engine.models import ResumeText
from resume_engine.exceptions import (
    FileOpenError,
    FileTooLargeError,
    FileNotSupportedError,
    FileEmptyError
)

from resume_engine.parse_classes.file_parser.word_document_parser import WordDocumentParser

RESUME_LINES = [
    "John Doe",
    "john.doe@example.com | (555) 123-4567",
    "EXPERIENCE",
    "Software Engineer at Acme Corp",
    "Jun 2020 - Present",
    "• Built REST APIs in Python",
]


class TestWordDocumentParser:
    """Tests for the WordDocumentParser class."""

    @pytest.fixture
    def resume_docx(self, tmp_path):
        return write_docx(tmp_path / "resume.docx", RESUME_LINES)

    def test_valid_docx_parsing(self, resume_docx):
        """Paragraphs come back as lines, blank separators removed."""
        resume_text = WordDocumentParser(str(resume_docx)).parse()

        assert isinstance(resume_text, ResumeText)
        assert list(resume_text.lines) == RESUME_LINES

    def test_docx_text_is_readable(self, resume_docx):
        assert_resume_text_is_readable(WordDocumentParser(str(resume_docx)).parse())

    def test_pdf_raises_filenotsupportederror(self, tmp_path):
        pdf_file = write_pdf(tmp_path / "resume.pdf", RESUME_LINES)
        with pytest.raises(FileNotSupportedError):
            WordDocumentParser(str(pdf_file))

    def test_file_too_large_raises_error(self, resume_docx):
        with pytest.raises(FileTooLargeError):
            WordDocumentParser(str(resume_docx), max_file_size_mb=0)

    def test_empty_docx_raises_error(self, tmp_path):
        empty_docx = str(write_docx(tmp_path / "empty.docx", []))
        with pytest.raises(FileEmptyError) as exc_info:
            WordDocumentParser(empty_docx).parse()
        assert exc_info.value.file_path == empty_docx

    def test_corrupted_docx_raises_file_open_error(self, tmp_path):
        """A .docx that is not a zip archive should raise FileOpenError."""
        docx_path = tmp_path / "corrupt.docx"
        docx_path.write_text("not a docx")
        with pytest.raises(FileOpenError):
            WordDocumentParser(str(docx_path)).parse()
