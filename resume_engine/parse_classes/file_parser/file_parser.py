"""file_parser.py

Holds the abstract FileParser class inherited by filetype-specific parsers.
A FileParser is the text-extraction front-end: it only turns a document into
normalized ResumeText and knows nothing about resume structure.
"""

import os
from abc import ABC, abstractmethod

from resume_engine.config import PARSER_DEFAULTS
from resume_engine.models import ResumeText
from resume_engine.exceptions import FileTooLargeError, FileEmptyError, NoFilePathError

from resume_engine.parse_classes.file_parser.helpers.check_file_extension import check_file_extension

class FileParser(ABC):
    """
    Abstract base class representing a generic resume file parser.

    All concrete parsers must implement `_read_raw_text`.

    Args:
        file_path (str): Path to the file to parse.
        max_file_size_mb (float | None, optional): Maximum allowed file size in megabytes.
            If None, no size limit is enforced.

    Attributes:
        file_path (str): Path to the file.
        max_file_size_mb (float | None): Maximum allowed file size.
    """
    # Extensions supported by at least one concrete class
    ALLOWED_EXTENSIONS = [".pdf", ".docx", ".txt"]

    # Extensions supported by a specific concrete class (overwritten by children)
    SUPPORTED_EXTENSIONS = []

    def __init__(
        self,
        file_path: str,
        max_file_size_mb: float | None = PARSER_DEFAULTS.MAX_FILE_SIZE_MB
    ):
        if not file_path:
            raise NoFilePathError()
        self.file_path = file_path
        self.max_file_size_mb = max_file_size_mb
        self._validate_file()
        check_file_extension(self.file_path, self.SUPPORTED_EXTENSIONS)

    def _validate_file(self):
        """Validate whether the file can be parsed by this parser.

        Raises:
            FileNotFoundError: Raised if the file cannot be found at file_path
            FileTooLargeError: Raised if the file exceeds the max_file_size_mb
        """
        if not os.path.exists(self.file_path):
            raise FileNotFoundError(f"File not found: {self.file_path}")

        if self.max_file_size_mb is not None:
            max_size_bytes = self.max_file_size_mb * 1024 * 1024
            actual_size_bytes = os.path.getsize(self.file_path)

            if actual_size_bytes > max_size_bytes:
                raise FileTooLargeError(
                    max_size=max_size_bytes,
                    actual_size=actual_size_bytes
                )

    def parse(self) -> ResumeText:
        """
        Read the file and return its content as normalized `ResumeText`.

        Returns:
            ResumeText: Ordered, trimmed, non-empty lines of the document.

        Raises:
            FileOpenError: If the file cannot be opened or read.
            FileEmptyError: If the file contains no readable text.
        """
        resume_text = ResumeText.from_text(self._read_raw_text())
        if not resume_text.lines:
            raise FileEmptyError(self.file_path)
        return resume_text

    @abstractmethod
    def _read_raw_text(self) -> str:
        """Return the raw text of the document, line breaks included."""
        pass
