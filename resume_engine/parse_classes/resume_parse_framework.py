"""resume_parse_framework.py
Holds the framework that chains FileParser, SectionSegmenter and
ResumeExtractor and returns a StructuredResume.
"""

from typing import Dict, Iterable, List, Optional, Union

from resume_engine.config import PARSER_DEFAULTS
from resume_engine.exceptions import InvalidResumeTextError, ResumeParserFrameworkConfigError
from resume_engine.logging import logger_factory
from resume_engine.models import ParsingConfidence, ResumeText, StructuredResume

from resume_engine.parse_classes.file_parser.helpers.check_file_extension import check_file_extension
from resume_engine.parse_classes.file_parser.pdf_parser import PDFParser
from resume_engine.parse_classes.file_parser.word_document_parser import WordDocumentParser
from resume_engine.parse_classes.file_parser.text_file_parser import TextFileParser

from resume_engine.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_engine.parse_classes.parsing_confidence import get_parsing_confidence
from resume_engine.parse_classes.section_segmenter.section_segmenter import SectionSegmenter
from resume_engine.parse_classes.resume_extractor.helpers.extractor_map import (
    verify_extractor_map,
    build_default_extractor_map,
)
from resume_engine.parse_classes.resume_extractor.resume_extractor import ResumeExtractor

logger = logger_factory.get_logger(__name__)

RawResumeInput = Union[str, ResumeText, Iterable[str]]


def to_resume_text(raw_text: RawResumeInput) -> ResumeText:
    """
    Normalize any accepted parser input into ResumeText.

    Accepts a string, an iterable of strings (pre-split lines) or an existing
    ResumeText.

    Raises:
        InvalidResumeTextError: If `raw_text` is None, bytes, or holds non-strings.
    """
    if isinstance(raw_text, ResumeText):
        return raw_text
    if isinstance(raw_text, str):
        return ResumeText.from_text(raw_text)
    if raw_text is None or isinstance(raw_text, (bytes, bytearray)):
        raise InvalidResumeTextError(type(raw_text).__name__)

    try:
        lines = list(raw_text)
    except TypeError:
        raise InvalidResumeTextError(type(raw_text).__name__)

    for line in lines:
        if not isinstance(line, str):
            raise InvalidResumeTextError(f"sequence containing {type(line).__name__}")
    return ResumeText.from_lines(lines)


class ResumeParserFramework:
    """
    Orchestrates the complete resume parsing process, from raw file or text
    to a StructuredResume.

    Combines:
        - ``FileParser`` (:class:`PDFParser`, :class:`WordDocumentParser`, :class:`TextFileParser`)
        - ``SectionSegmenter``
        - ``ResumeExtractor`` (:class:`PersonalInfoExtractor`, :class:`SkillsExtractor`, ...)

    The framework holds configuration only, so one instance can parse many
    resumes, concurrently if needed.

    This class supports dependency overrides to simplify testing. During tests,
    you can inject:
        * ``forced_resume_text_output`` to bypass file parsing.

    Parameters
    ----------
    max_file_size_mb : float, optional
        The maximum file size (in megabytes) allowed for parsing.
        Defaults to ``PARSER_DEFAULTS.MAX_FILE_SIZE_MB``.
    extractor_map : dict[str, list[FieldExtractor]], optional
        A mapping of field names to lists of extractor instances used by the
        :class:`ResumeExtractor`. Enables fallback strategies for each field.
    max_threads : int, optional
        Maximum threads used to run field extractors. Defaults to 1.
    skills_extraction_method : str, optional
        "rule" or "dictionary" for the default skills extractor. Ignored when
        an ``extractor_map`` is given.
    segmenter : SectionSegmenter, optional
        Segmenter to use. Defaults to ``SectionSegmenter()``.
    forced_resume_text_output : ResumeText, optional
        When provided, overrides file parsing and directly supplies the text
        (useful for testing).

    Example
    -------
    >>> framework = ResumeParserFramework()
    >>> resume = framework.parse_resume("path/to/resume.pdf")
    >>> resume = framework.parse_text("Jane Doe\\njane@example.com")
    """

    FILETYPE_PARSER_MAP = {
        ".pdf": PDFParser,
        ".docx": WordDocumentParser,
        ".txt": TextFileParser,
    }

    def __init__(
        self,
        max_file_size_mb: Optional[float] = PARSER_DEFAULTS.MAX_FILE_SIZE_MB,
        extractor_map: Optional[Dict[str, List[FieldExtractor]]] = None,
        max_threads: int = PARSER_DEFAULTS.MAX_THREADS,
        skills_extraction_method: Optional[str] = None,
        segmenter: Optional[SectionSegmenter] = None,
        forced_resume_text_output: Optional[ResumeText] = None,
    ):
        self.max_file_size_mb = max_file_size_mb
        self.max_threads = max_threads
        self.segmenter = segmenter or SectionSegmenter()

        if extractor_map is not None:
            verify_extractor_map(extractor_map)
            self.extractor_map = extractor_map
        else:
            self.extractor_map = build_default_extractor_map(
                skills_extraction_method=skills_extraction_method
            )

        self.resume_extractor = ResumeExtractor(
            extractor_map=self.extractor_map,
            max_threads=self.max_threads,
        )

        # Testing hooks
        self.forced_resume_text_output = forced_resume_text_output

    def parse_resume(self, file_path: str) -> StructuredResume:
        """
        Full pipeline: parse file -> segment -> extract -> ``StructuredResume``.

        Args:
            file_path (str): Path to the resume file (.pdf, .docx or .txt).

        Returns:
            StructuredResume: Structured extracted data.

        Raises:
            FileParserError: (subclasses) if the file cannot be read.
            FileNotFoundError: If the file does not exist.
        """
        resume_text = self._parse_file(file_path)
        logger.debug(f"Parsed {len(resume_text.lines)} lines from '{file_path}'")
        return self.parse_text(resume_text)

    def parse_text(self, raw_text: RawResumeInput) -> StructuredResume:
        """
        Parse resume text that was already extracted from a document.

        Never raises for malformed or sparse text: undetected fields are empty.

        Args:
            raw_text (str | Iterable[str] | ResumeText): The resume text or its lines.

        Raises:
            InvalidResumeTextError: If `raw_text` is not text (e.g. None).
        """
        resume_text = to_resume_text(raw_text)
        segmented = self.segmenter.segment(resume_text)
        logger.debug(
            "Segmented resume: "
            + ", ".join(f"{name}={len(lines)}" for name, lines in segmented.sections.items())
        )
        return self.resume_extractor.extract(segmented)

    def _parse_file(self, file_path: str) -> ResumeText:
        """
        Select and execute the ``FileParser`` subclass for the file's extension.

        If ``self.forced_resume_text_output`` exists the parser output is
        replaced with it (the file is still validated).

        Raises:
            FileNotSupportedError: From check_file_extension if the extension is
                not in self.FILETYPE_PARSER_MAP
            ResumeParserFrameworkConfigError: If no compatible parser is found for
                the file type.
        """
        ext = check_file_extension(
            file_path=file_path,
            supported_extensions=list(self.FILETYPE_PARSER_MAP.keys())
        )
        parser_class = self.FILETYPE_PARSER_MAP.get(ext)
        if parser_class is None:
            raise ResumeParserFrameworkConfigError(
                message=(
                    f"Invalid extension '{ext}'. "
                    f"Supported extensions are: {list(self.FILETYPE_PARSER_MAP.keys())}. "
                    "Ensure that FILETYPE_PARSER_MAP in ResumeParserFramework contains your extension "
                    "and a matching FileParser, e.g., {'.pdf': PDFParser}."
                )
            )

        parser = parser_class(
            file_path=file_path,
            max_file_size_mb=self.max_file_size_mb,
        )

        if self.forced_resume_text_output is not None:
            return self.forced_resume_text_output
        return parser.parse()


_default_framework = ResumeParserFramework()


def parse_resume_text(raw_text: RawResumeInput) -> StructuredResume:
    """
    Parse resume text with the default configuration.

    Example:
        >>> resume = parse_resume_text("Jane Doe\\njane@example.com\\nSKILLS\\nPython, SQL")
        >>> resume.personal.email, resume.skills
        ('jane@example.com', ['Python', 'SQL'])
    """
    return _default_framework.parse_text(raw_text)


def parse_resume_with_confidence(raw_text: RawResumeInput) -> tuple[StructuredResume, ParsingConfidence]:
    resume = parse_resume_text(raw_text)
    return resume, get_parsing_confidence(resume)
