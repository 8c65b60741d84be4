"""validate_segmented_resume.py
Check that a SegmentedResume handed to a FieldExtractor is well formed.
"""
from resume_engine.models import SegmentedResume, SECTION_NAMES
from resume_engine.exceptions import FieldExtractionConfigError


def validate_segmented_resume(segmented: SegmentedResume) -> None:
    """
    Validate that `segmented` is a SegmentedResume whose per-line section
    labels line up with its lines and whose buffers hold only strings.

    An empty resume (no lines) is valid: extractors return empty values for it.

    Raises:
        FieldExtractionConfigError: If `segmented` is not a SegmentedResume.
        TypeError: If a line or section buffer holds a non-string value.
        ValueError: If `line_sections` and `lines` differ in length or a
            section name is unknown.
    """
    if not isinstance(segmented, SegmentedResume):
        raise FieldExtractionConfigError(
            message=(
                "extract() requires a SegmentedResume "
                f"(got {type(segmented).__name__})"
            )
        )

    if len(segmented.line_sections) != len(segmented.lines):
        raise ValueError(
            "SegmentedResume.line_sections must have one entry per line "
            f"({len(segmented.line_sections)} != {len(segmented.lines)})."
        )

    for idx, line in enumerate(segmented.lines):
        if not isinstance(line, str):
            raise TypeError(
                f"SegmentedResume.lines[{idx}] is not a string (got {type(line).__name__})."
            )

    for section, buffer in segmented.sections.items():
        if section not in SECTION_NAMES:
            raise ValueError(f"Unknown section name in SegmentedResume.sections: '{section}'")
        if not all(isinstance(line, str) for line in buffer):
            raise TypeError(f"SegmentedResume.sections['{section}'] must only hold strings.")
