"""dummy_classes.py
Holds dummy classes for abstract classes to test with
"""
from typing import List

from resume_engine.exceptions import FieldExtractionError
from resume_engine.models import SegmentedResume
from resume_engine.parse_classes.field_extractor.field_extractor import FieldExtractor


# Dummy subclass for testing where needed
class DummyExtractor(FieldExtractor):
    """A dummy FieldExtractor subclass for testing."""
    SUPPORTED_EXTRACTION_METHODS = ["regex", "rule"]
    DEFAULT_EXTRACTION_METHOD = "regex"
    FIELD_NAME = "skills"

    def extract(self, segmented: SegmentedResume) -> List[str]:
        # Minimal implementation for testing
        return ["dummy"]


class EmptyExtractor(FieldExtractor):
    """Always finds nothing."""
    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"
    FIELD_NAME = "skills"

    def extract(self, segmented: SegmentedResume) -> List[str]:
        return []


class FailingExtractor(FieldExtractor):
    """Always raises FieldExtractionError."""
    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"
    FIELD_NAME = "skills"

    def extract(self, segmented: SegmentedResume) -> List[str]:
        raise FieldExtractionError(field_name=self.FIELD_NAME, message="Dummy failure")
