"""resume_extractor.py
Runs FieldExtractor subclasses over a SegmentedResume and assembles the
StructuredResume.
"""
import warnings
import multiprocessing
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import fields, is_dataclass
from typing import Any, Dict, List, Optional

from resume_engine.logging import logger_factory, running_under_pytest
from resume_engine.models import SegmentedResume, StructuredResume
from resume_engine.config import PARSER_DEFAULTS

from resume_engine.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_engine.parse_classes.resume_extractor.helpers.extractor_map import (
    build_default_extractor_map,
)

extractor_failure_logger = logger_factory.get_logger(
    name="extractor_failures",
    logger_type="extractor",
    console=False,
)
logger = logger_factory.get_logger(__name__)


def is_empty_value(value: Any) -> bool:
    """True for "", [], None and dataclasses whose fields are all empty."""
    if value is None:
        return True
    if is_dataclass(value) and not isinstance(value, type):
        return all(is_empty_value(getattr(value, f.name)) for f in fields(value))
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


class ResumeExtractor:
    """
    Orchestrates extraction of resume fields using configurable field extractors.

    The extractor_map allows multiple "backup" extractors per field. An
    extractor that raises, or returns an empty value, hands over to the next
    one in the list. When none produces a value the StructuredResume default
    ("" or []) is used, so extraction never fails on resume content.

    Supports parallel extraction using threads. By default, extraction runs
    sequentially. Results are assembled by field name, so parallel and
    sequential runs produce identical output.

    Attributes:
        extractor_map (Dict[str, List[FieldExtractor]]):
            Maps field names to a list of extractor instances to try in order.
        max_threads (int): Maximum threads to use for parallel extraction.
    """
    def __init__(
        self,
        extractor_map: Optional[Dict[str, List[FieldExtractor]]] = None,
        max_threads: int = PARSER_DEFAULTS.MAX_THREADS,
    ):
        """
        Args:
            extractor_map (Optional[Dict[str, List[FieldExtractor]]]):
                Map of field names to lists of extractor instances. If None,
                the default map from `build_default_extractor_map` is used.

                Example:
                    {
                        "personal": [PersonalInfoExtractor()],
                        "skills": [SkillsExtractor("rule"), SkillsExtractor("dictionary")],
                    }
            max_threads (int): Maximum parallel extraction threads. Defaults to 1.
        """
        if extractor_map is None:
            extractor_map = build_default_extractor_map()

        # extractor_map is verified by ResumeParserFramework
        self.extractor_map = extractor_map

        self._determine_max_threads(max_threads)

    def _determine_max_threads(self, max_threads: int) -> None:
        """
        Validate and set `self.max_threads` for parallel extraction.

        Ensures that the requested `max_threads` does not exceed:
        - the number of available CPU cores,
        - the number of extraction fields in `self.extractor_map`.

        Warnings:
            - Issues a warning if `max_threads` is not positive.
            - Issues a warning if `max_threads` exceeds the available CPU cores.
            - Issues a warning if `max_threads` exceeds the number of extraction fields.
        """
        available_cores = multiprocessing.cpu_count()
        num_fields = max(len(self.extractor_map), 1)

        if max_threads <= 0:
            warnings.warn(f"Requested max_threads={max_threads} is invalid. Defaulting to 1 thread.")
            max_threads = 1

        if max_threads > available_cores:
            warnings.warn(
                f"Requested max_threads={max_threads} exceeds available cores "
                f"({available_cores}). Using {available_cores} instead."
            )
            max_threads = available_cores

        if max_threads > num_fields:
            warnings.warn(
                f"Requested max_threads={max_threads} exceeds the number of extraction fields "
                f"({num_fields}). Using {num_fields} instead."
            )
            max_threads = num_fields

        self.max_threads = max_threads

    def _extract_field_with_fallback(
        self,
        field_name: str,
        segmented: SegmentedResume,
    ) -> Any:
        """
        Extract a single field, trying every configured extractor in order.

        - The first non-empty result is returned immediately.
        - An exception is logged to the extractor-failure logger (unless running
          under pytest) and the next extractor is tried.
        - If no extractor yields a value, the last empty result is returned, or
          the StructuredResume default when every extractor raised.
        """
        extractors = self.extractor_map.get(field_name, [])
        empty_result = None

        for extractor in extractors:
            try:
                result = extractor.extract(segmented)
            except Exception as e:
                if not running_under_pytest():
                    extractor_failure_logger.warning(
                        f"Field '{field_name}' failed in extractor '{type(extractor).__name__}': {str(e)}"
                    )
                continue

            if not is_empty_value(result):
                return result
            empty_result = result

        if empty_result is not None:
            return empty_result
        return getattr(StructuredResume(), field_name)

    def extract(self, segmented: SegmentedResume) -> StructuredResume:
        """
        Extract all fields outlined in self.extractor_map and return a
        StructuredResume. Fields missing from the map keep their defaults.
        """
        resume = StructuredResume()

        if self.max_threads == 1:
            for extraction_field in self.extractor_map:
                setattr(
                    resume,
                    extraction_field,
                    self._extract_field_with_fallback(extraction_field, segmented),
                )
        else:
            with ThreadPoolExecutor(max_workers=self.max_threads) as executor:
                future_to_field = {
                    executor.submit(self._extract_field_with_fallback, field_name, segmented): field_name
                    for field_name in self.extractor_map
                }
                for future in as_completed(future_to_field):
                    setattr(resume, future_to_field[future], future.result())

        logger.debug(
            "Extracted resume: %d education, %d experience, %d projects, %d skills",
            len(resume.education), len(resume.experience), len(resume.projects), len(resume.skills),
        )
        return resume
