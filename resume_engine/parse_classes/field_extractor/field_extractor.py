"""field_extractor.py
Holds the abstract FieldExtractor class inherited by section-specific extractors.
"""
from abc import ABC, abstractmethod
from functools import wraps
from typing import Any, List, Literal, Optional

from resume_engine.exceptions import FieldExtractionConfigError, FieldExtractionError
from resume_engine.models import SegmentedResume, SectionName
from resume_engine.parse_classes.field_extractor.helpers.validate_segmented_resume import (
    validate_segmented_resume
)

# Define allowed extraction methods (if implemented)
EXTRACTION_METHODS = Literal[
    "regex",
    "rule",
    "dictionary",
]

class FieldExtractor(ABC):
    """
    Abstract base class for extracting one field of a StructuredResume.
    Concrete extractors must implement the `extract` method.

    Extractors hold configuration only. The resume is passed to `extract()`
    and never stored on the instance, so a single extractor can serve many
    resumes, including from several threads at once.

    Extraction Methods:
        - regex: Uses precompiled patterns to identify tokens in the text.
        - rule: Uses line-grouping rules, keyword tables and heuristics.
        - dictionary: Uses the static technology dictionary.

    Absence of data is an empty value ("" / []), never an exception.
    Exceptions signal an unexpected failure and are handled by ResumeExtractor.
    """
    # Define supported methods and a default method in each subclass
    SUPPORTED_EXTRACTION_METHODS: List[str] = []
    DEFAULT_EXTRACTION_METHOD: Optional[str] = None

    # StructuredResume field this extractor fills (define in each child)
    FIELD_NAME: str = ""

    def __init__(self, extraction_method: Optional[EXTRACTION_METHODS] = None):
        """
        Args:
            extraction_method (EXTRACTION_METHODS | None): Which extraction strategy to use.
                Defaults to the subclass's default method.
        """
        self.extraction_method = extraction_method
        self._validate_extraction_method()

    @staticmethod
    def _requires_segmented_resume(func):
        """
        Decorator to ensure `extract()` is handed a valid SegmentedResume.

        Errors raised while extracting are re-raised as FieldExtractionError
        carrying the field name and resume lines. Configuration errors and
        unsupported methods pass through unchanged.
        """
        @wraps(func)
        def wrapper(self, segmented, *args, **kwargs):
            validate_segmented_resume(segmented)
            try:
                return func(self, segmented, *args, **kwargs)
            except (FieldExtractionError, FieldExtractionConfigError, NotImplementedError):
                raise
            except Exception as e:
                raise FieldExtractionError(
                    field_name=self.FIELD_NAME,
                    message=f"{self.__class__.__name__} failed ({type(e).__name__}: {e})",
                    lines=list(segmented.lines),
                ) from e
        return wrapper

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "extract" in cls.__dict__:
            cls.extract = cls._requires_segmented_resume(cls.extract)

    def _validate_extraction_method(self) -> None:
        """
        Validate and set the extraction method for the FieldExtractor instance.

        If no method is provided, it defaults to the class's
        `DEFAULT_EXTRACTION_METHOD`.

        Raises:
            NotImplementedError: If `extraction_method` is not in
                `SUPPORTED_EXTRACTION_METHODS`.
            ValueError: If no `SUPPORTED_EXTRACTION_METHODS` are defined in the
                subclass.
        """
        if self.extraction_method:
            if self.extraction_method not in self.SUPPORTED_EXTRACTION_METHODS:
                raise NotImplementedError(
                    f"Unsupported extraction_method '{self.extraction_method}' for {self.__class__.__name__}"
                )
        else:
            if not self.SUPPORTED_EXTRACTION_METHODS:
                raise ValueError(f"{self.__class__.__name__} must define SUPPORTED_EXTRACTION_METHODS")
            self.extraction_method = self.DEFAULT_EXTRACTION_METHOD

    def _unsupported_method(self) -> NotImplementedError:
        return NotImplementedError(
            f"Extraction method '{self.extraction_method}' is not implemented for "
            f"{self.__class__.__name__}."
        )

    @staticmethod
    def _section_lines(segmented: SegmentedResume, section: SectionName) -> List[str]:
        """Return a copy of one section's line buffer."""
        return list(segmented.section(section))

    @abstractmethod
    def extract(self, segmented: SegmentedResume) -> Any:
        """
        Extract the field from a segmented resume using the chosen `extraction_method`.

        Args:
            segmented (SegmentedResume): Output of SectionSegmenter.

        Returns:
            Any: The extracted field value. Empty when nothing was found.

        Raises:
            NotImplementedError: If the extraction method is not implemented.
            FieldExtractionConfigError: If `segmented` is not a SegmentedResume.
            FieldExtractionError: If extraction fails unexpectedly.
        """
        pass
