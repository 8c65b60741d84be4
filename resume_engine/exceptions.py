"""exceptions.py
Defines custom exceptions for this project.
"""
from typing import Optional, List

# ------------------------ File Parser Errors ------------------------
class FileParserError(Exception):
    """Base exception for file parser errors."""
    pass

class FileNotSupportedError(FileParserError):
    """Raised when the current file path has an unsupported extension."""
    def __init__(
        self,
        extension: str,
        supported_extensions: List[str],
        context: Optional[str] = None
    ):
        self.extension = extension
        self.supported_extensions = list(supported_extensions)
        message = (
            f"File with extension '{extension}' is not supported. "
            f"Supported extensions: {self.supported_extensions}"
        )
        if context:
            message += f" Context: {context}"
        super().__init__(message)


class NoFilePathError(FileParserError):
    """Raised when no file path is provided but the FileParser attempts to access it."""
    def __init__(self):
        message = (
            "No file path was provided. This FileParser instance "
            "cannot access or parse a file without a valid 'file_path'."
        )
        super().__init__(message)

class FileTooLargeError(FileParserError):
    """Raised when a file exceeds the allowed file size."""
    def __init__(self, max_size: int, actual_size: int):
        super().__init__(
            f"File size is {actual_size} bytes, which exceeds the max allowed {max_size} bytes."
        )
        self.max_size = max_size
        self.actual_size = actual_size

class FileOpenError(FileParserError):
    """Raised when a file cannot be opened or read."""
    def __init__(self, file_path: str, original_error: str):
        super().__init__(
            f"Failed to open or read file: {file_path}. Original error: {original_error}"
        )
        self.file_path = file_path
        self.original_error = original_error

class FileEmptyError(FileParserError):
    """Raised when a file contains no parsable text."""
    def __init__(self, file_path: str, message: str | None = None):
        self.file_path = file_path
        if message is None:
            message = f"File `{file_path}` contains no parsable text."
        super().__init__(message)

# ------------------------ Input Boundary Errors ------------------------
class InvalidResumeTextError(TypeError):
    """
    Raised when the parser or matcher is handed something that is not resume text
    (e.g. ``None`` or a number). Sparse or malformed *text* never raises.
    """
    def __init__(self, received_type: str):
        self.received_type = received_type
        super().__init__(
            f"Resume text must be a string or a sequence of strings, got {received_type}."
        )

class InvalidJobDescriptionError(TypeError):
    """Raised when a job description is not a string."""
    def __init__(self, received_type: str):
        self.received_type = received_type
        super().__init__(f"Job description must be a string, got {received_type}.")

# ------------------------ Field Extraction Errors ------------------------

class FieldExtractionError(Exception):
    """
    Raised when a FieldExtractor fails unexpectedly while reading a resume.

    Attributes:
        field_name (str | None): The name of the field being extracted (optional).
        message (str): Human-readable description of the error.
        lines (list[str] | None): Optional resume lines, useful for debugging
            extraction failures.
    """

    def __init__(
        self,
        field_name: str | None = None,
        message: str = "Failed to extract field",
        lines: list[str] | None = None,
    ):
        self.field_name = field_name
        self.message = message
        self.lines = lines
        super().__init__(self.full_message)

    @property
    def full_message(self) -> str:
        """Construct the complete error message including optional lines."""
        base_message = (
            f"{self.message}: {self.field_name}" if self.field_name else self.message
        )
        if self.lines:
            lines_display = "\n".join(f"- {line}" for line in self.lines)
            base_message += f"\n\nResume Lines:\n{lines_display}"
        return base_message

class FieldExtractionConfigError(Exception):
    """
    Raised when a FieldExtractor instance is configured or called incorrectly.

    Attributes:
        field_name (str | None): The name of the field being extracted (optional).
        message (str): Human-readable description of the error.
    """
    def __init__(self, field_name: str | None = None, message: str = "Failed to extract field"):
        self.field_name = field_name
        self.message = message
        super().__init__(self.full_message)

    @property
    def full_message(self) -> str:
        if self.field_name:
            return f"{self.message}: {self.field_name}"
        return self.message

# ------------------------ ResumeParserFramework Errors ------------------------
class ResumeParserFrameworkError(Exception):
    """Base exception for resume parser framework."""
    pass

class ResumeParserFrameworkConfigError(ResumeParserFrameworkError):
    """
    Raised when the ResumeParserFramework configuration is invalid.
    """
    def __init__(self, message: str):
        super().__init__(f"ResumeParserFrameworkConfigError: {message}")

# ------------------------ Extractor Map Errors ------------------------
class ExtractorMapConfigError(Exception):
    """
    Raised when the extractor_map configuration is invalid.
    Provides a clear message about what went wrong.
    """
    def __init__(self, message: str):
        super().__init__(f"ExtractorMapConfigError: {message}")
