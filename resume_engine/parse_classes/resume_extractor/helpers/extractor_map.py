"""extractor_map.py
Builds and verifies the "extractor_map" dictionary used by ResumeExtractor
to decide which extractors fill each StructuredResume field.
"""
from dataclasses import fields
from typing import Dict, List, Optional

from resume_engine.exceptions import ExtractorMapConfigError
from resume_engine.models import StructuredResume

from resume_engine.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_engine.parse_classes.field_extractor.personal_info_extractor import PersonalInfoExtractor
from resume_engine.parse_classes.field_extractor.education_extractor import EducationExtractor
from resume_engine.parse_classes.field_extractor.experience_extractor import ExperienceExtractor
from resume_engine.parse_classes.field_extractor.projects_extractor import ProjectsExtractor
from resume_engine.parse_classes.field_extractor.skills_extractor import SkillsExtractor

STRUCTURED_RESUME_FIELDS = tuple(f.name for f in fields(StructuredResume))

# Each field maps to the extractor classes to try, in order
DEFAULT_EXTRACTOR_CLASSES_MAP = {
    "personal": [
        {"model": PersonalInfoExtractor, "extraction_method": "regex"},
    ],
    "education": [
        {"model": EducationExtractor, "extraction_method": None},
    ],
    "experience": [
        {"model": ExperienceExtractor, "extraction_method": None},
    ],
    "projects": [
        {"model": ProjectsExtractor, "extraction_method": None},
    ],
    "skills": [
        {"model": SkillsExtractor, "extraction_method": "rule"},
    ],
}


def build_default_extractor_map(
    skills_extraction_method: Optional[str] = None,
) -> Dict[str, List[FieldExtractor]]:
    """
    Builds the default extractor map used by the resume parsing pipeline
    (i.e. ResumeExtractor).

    Args:
        skills_extraction_method (str | None): Override for the skills
            extractor ("rule" or "dictionary"). Defaults to the class default.

    Returns:
        dict: Mapping of field names -> list of extractor instances.

    Example:
        {
            "personal": [PersonalInfoExtractor()],
            "education": [EducationExtractor()],
            "experience": [ExperienceExtractor()],
            "projects": [ProjectsExtractor()],
            "skills": [SkillsExtractor(extraction_method="rule")],
        }
    """
    extractor_map = {}
    for field_name, entries in DEFAULT_EXTRACTOR_CLASSES_MAP.items():
        extractor_map[field_name] = []
        for entry in entries:
            model_cls = entry["model"]
            extraction_method = entry.get("extraction_method") or model_cls.DEFAULT_EXTRACTION_METHOD
            if field_name == "skills" and skills_extraction_method:
                extraction_method = skills_extraction_method
            extractor_map[field_name].append(model_cls(extraction_method=extraction_method))

    verify_extractor_map(extractor_map)

    return extractor_map


def verify_extractor_map(
    extractor_map: Optional[Dict[str, List[FieldExtractor]]]
):
    """
    Verifies the format and content of the extractor map.

    This method performs validation checks on the extractor_map dictionary to ensure:
    1. The extractor_map is a dictionary
    2. All keys (fields) are strings naming a StructuredResume field
    3. All values are lists
    4. All items in the lists are FieldExtractor instances

    Raises:
        TypeError: If the map, a key, a value or a list item has the wrong type.
        ExtractorMapConfigError: If a key is not a StructuredResume field.
    """
    if not isinstance(extractor_map, dict):
        raise TypeError(
            f"extractor_map must be a dictionary, got {type(extractor_map).__name__}"
        )
    for field_name, extractors in extractor_map.items():
        if not isinstance(field_name, str):
            raise TypeError(
                f"Field names in extractor_map must be strings, got {type(field_name).__name__}"
            )
        if field_name not in STRUCTURED_RESUME_FIELDS:
            raise ExtractorMapConfigError(
                f"Unknown field '{field_name}'. Expected one of {list(STRUCTURED_RESUME_FIELDS)}"
            )
        if not isinstance(extractors, list):
            raise TypeError(
                f"Value for field '{field_name}' must be a list, got {type(extractors).__name__}"
            )
        for extractor in extractors:
            if not isinstance(extractor, FieldExtractor):
                raise TypeError(
                    f"All items in extractor list for field '{field_name}' must be "
                    f"FieldExtractor instances, got {type(extractor).__name__}"
                )
