"""text_file_parser.py

Holds TextFileParser class for plain-text resumes.
"""
from resume_engine.exceptions import FileOpenError
from resume_engine.parse_classes.file_parser.file_parser import FileParser


class TextFileParser(FileParser):
    """Concrete parser for UTF-8 plain text resumes (.txt)."""

    SUPPORTED_EXTENSIONS = ['.txt']

    def _read_raw_text(self) -> str:
        try:
            with open(self.file_path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            raise FileOpenError(self.file_path, str(e))
