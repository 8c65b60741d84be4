"""test_resume_extractor.py
Run tests on ResumeExtractor
"""
import pytest

from resume_engine.models import PersonalInfo, SegmentedResume, StructuredResume
from resume_engine.parse_classes.field_extractor.skills_extractor import SkillsExtractor
from resume_engine.parse_classes.resume_extractor.resume_extractor import (
    ResumeExtractor,
    is_empty_value,
)

from resume_engine.test_helpers.dummy_classes import DummyExtractor, EmptyExtractor, FailingExtractor
from resume_engine.test_helpers.dummy_variables.dummy_resume_texts import (
    MOCK_RESUME_GENERATOR_0,
    JANE_DOE_RESUME_TEXT,
)

RESUME_EXTRACTOR_MODULE = "resume_engine.parse_classes.resume_extractor.resume_extractor"


class TestResumeExtractor:
    """Unit tests for ResumeExtractor."""
    # --------------------------------------
    # Basic Extraction Sanity Checks
    # --------------------------------------
    def test_default_map_fills_every_field(self, segment):
        resume = ResumeExtractor().extract(segment(JANE_DOE_RESUME_TEXT))

        assert isinstance(resume, StructuredResume)
        assert resume.personal.full_name == "Jane Doe"
        assert resume.education[0].school == "MIT"
        assert resume.skills == ["Python", "React", "SQL"]
        assert resume.experience == []
        assert resume.projects == []

    def test_fields_missing_from_map_keep_defaults(self, segment):
        resume = ResumeExtractor(extractor_map={"skills": [DummyExtractor()]}).extract(segment("SKILLS\nPython"))
        assert resume == StructuredResume(skills=["dummy"])

    def test_empty_resume(self):
        resume = ResumeExtractor().extract(SegmentedResume())
        assert resume == StructuredResume()

    # --------------------------------------
    # Fallback chain
    # --------------------------------------
    def test_failing_extractor_falls_back(self, segment):
        extractor = ResumeExtractor(extractor_map={"skills": [FailingExtractor(), DummyExtractor()]})
        assert extractor.extract(segment("SKILLS\nPython")).skills == ["dummy"]

    def test_empty_result_falls_back(self, segment):
        extractor = ResumeExtractor(extractor_map={"skills": [EmptyExtractor(), SkillsExtractor()]})
        assert extractor.extract(segment("SKILLS\nPython")).skills == ["Python"]

    def test_first_non_empty_result_wins(self, segment):
        extractor = ResumeExtractor(extractor_map={"skills": [SkillsExtractor(), DummyExtractor()]})
        assert extractor.extract(segment("SKILLS\nPython")).skills == ["Python"]

    def test_all_failing_gives_default(self, segment):
        extractor = ResumeExtractor(extractor_map={"skills": [FailingExtractor(), FailingExtractor()]})
        assert extractor.extract(segment("SKILLS\nPython")).skills == []

    def test_failures_are_logged_outside_pytest(self, segment, mocker):
        mocker.patch(f"{RESUME_EXTRACTOR_MODULE}.running_under_pytest", return_value=False)
        warning = mocker.patch(f"{RESUME_EXTRACTOR_MODULE}.extractor_failure_logger.warning")

        ResumeExtractor(extractor_map={"skills": [FailingExtractor()]}).extract(segment("SKILLS\nPython"))

        warning.assert_called_once()
        assert "FailingExtractor" in warning.call_args[0][0]

    def test_unexpected_error_in_real_extractor_is_reported_and_skipped(self, segment, mocker):
        mocker.patch(f"{RESUME_EXTRACTOR_MODULE}.running_under_pytest", return_value=False)
        warning = mocker.patch(f"{RESUME_EXTRACTOR_MODULE}.extractor_failure_logger.warning")
        mocker.patch.object(SkillsExtractor, "split_skill_line", side_effect=RuntimeError("boom"))

        extractor = ResumeExtractor(extractor_map={"skills": [SkillsExtractor(), DummyExtractor()]})
        assert extractor.extract(segment("SKILLS\nPython")).skills == ["dummy"]
        assert "SkillsExtractor failed (RuntimeError: boom)" in warning.call_args[0][0]

    def test_failures_are_not_logged_under_pytest(self, segment, mocker):
        warning = mocker.patch(f"{RESUME_EXTRACTOR_MODULE}.extractor_failure_logger.warning")
        ResumeExtractor(extractor_map={"skills": [FailingExtractor()]}).extract(segment("SKILLS\nPython"))
        warning.assert_not_called()

    # --------------------------------------
    # Threads
    # --------------------------------------
    def test_non_positive_max_threads_warns(self):
        with pytest.warns(UserWarning):
            extractor = ResumeExtractor(max_threads=0)
        assert extractor.max_threads == 1

    def test_max_threads_capped_by_field_count(self):
        with pytest.warns(UserWarning):
            extractor = ResumeExtractor(extractor_map={"skills": [DummyExtractor()]}, max_threads=64)
        assert extractor.max_threads == 1

    @pytest.mark.filterwarnings("ignore::UserWarning")
    def test_parallel_and_sequential_results_match(self, segment):
        segmented = segment(MOCK_RESUME_GENERATOR_0.generate())

        sequential = ResumeExtractor(max_threads=1).extract(segmented)
        parallel = ResumeExtractor(max_threads=5).extract(segmented)

        assert parallel == sequential

    def test_extractor_can_be_reused(self, segment):
        extractor = ResumeExtractor()
        first = extractor.extract(segment(JANE_DOE_RESUME_TEXT))
        extractor.extract(segment(MOCK_RESUME_GENERATOR_0.generate()))
        assert extractor.extract(segment(JANE_DOE_RESUME_TEXT)) == first


class TestIsEmptyValue:

    @pytest.mark.parametrize("value", [None, "", [], (), {}, PersonalInfo()])
    def test_empty(self, value):
        assert is_empty_value(value)

    @pytest.mark.parametrize("value", ["a", ["a"], PersonalInfo(email="a@b.co"), 0])
    def test_not_empty(self, value):
        assert not is_empty_value(value)
