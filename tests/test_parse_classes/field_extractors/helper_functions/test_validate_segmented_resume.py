"""test_validate_segmented_resume.py
Tests for validate_segmented_resume.
"""
import pytest

from resume_engine.exceptions import FieldExtractionConfigError
from resume_engine.models import SegmentedResume
from resume_engine.parse_classes.field_extractor.helpers.validate_segmented_resume import (
    validate_segmented_resume
)


class TestValidateSegmentedResume:

    def test_valid_resume_passes(self, segment):
        validate_segmented_resume(segment("SKILLS\nPython"))

    def test_empty_resume_passes(self):
        validate_segmented_resume(SegmentedResume())

    @pytest.mark.parametrize("value", [None, "text", {"skills": ["Python"]}])
    def test_wrong_type_raises_config_error(self, value):
        with pytest.raises(FieldExtractionConfigError):
            validate_segmented_resume(value)

    def test_misaligned_labels_raise_value_error(self):
        with pytest.raises(ValueError):
            validate_segmented_resume(SegmentedResume(lines=("a",), line_sections=()))

    def test_unknown_section_raises_value_error(self):
        segmented = SegmentedResume(sections={"hobbies": ["chess"]})
        with pytest.raises(ValueError):
            validate_segmented_resume(segmented)

    def test_non_string_buffer_raises_type_error(self):
        segmented = SegmentedResume(sections={"skills": ["Python", 3]})
        with pytest.raises(TypeError):
            validate_segmented_resume(segmented)
