"""conftest.py
Wire pytest events into the logger and share parser fixtures.
"""

import pytest

from resume_engine.logging import LoggerFactory
from resume_engine.models import ResumeText, SegmentedResume
from resume_engine.parse_classes.section_segmenter.section_segmenter import SectionSegmenter
from resume_engine.parse_classes.resume_parse_framework import ResumeParserFramework

# --------------------------------------------------------------
# SETUP TEST LOGGING
# --------------------------------------------------------------

# Integrate logger with pytest
logger = LoggerFactory().get_logger(
    name="pytest_logger",
    logger_type="pytest",
    console=True
)
current_class = None

@pytest.hookimpl(tryfirst=True)
def pytest_sessionstart(session):
    """Session start header."""
    logger.info("==== PYTEST SESSION START ====")

@pytest.hookimpl(tryfirst=True)
def pytest_runtest_logstart(nodeid, location):
    """Called at the start of each test."""
    global current_class
    class_name = location[0]
    if class_name != current_class:
        current_class = class_name
        logger.info(f"\n---- TestClass: {current_class} ----")

@pytest.hookimpl(tryfirst=True)
def pytest_runtest_logreport(report):
    """Called at the end of each test phase (setup/call/teardown)."""
    if report.when != "call":
        return  # only care about the main call, not setup/teardown

    status = report.outcome.upper()  # PASSED / FAILED / SKIPPED
    if status == "PASSED":
        logger.info(f"PASSED: {report.nodeid}")
    elif status == "FAILED":
        logger.error(f"FAILED: {report.nodeid}\n{report.longreprtext}")
    elif status == "SKIPPED":
        logger.warning(f"SKIPPED: {report.nodeid}\n{report.longreprtext}")

@pytest.hookimpl(tryfirst=True)
def pytest_sessionfinish(session, exitstatus):
    """Session finish footer."""
    logger.info(f"==== PYTEST SESSION END: exitstatus={exitstatus} ====")


# --------------------------------------------------------------
# SHARED FIXTURES
# --------------------------------------------------------------
@pytest.fixture(scope="session")
def framework() -> ResumeParserFramework:
    """One default framework shared by the whole session (it holds no resume state)."""
    return ResumeParserFramework()


@pytest.fixture(scope="session")
def segment():
    """
    Segment raw text with the default SectionSegmenter.

    Usage:
        def test_example(segment):
            segmented = segment("SKILLS\\nPython")
    """
    segmenter = SectionSegmenter()

    def _segment(raw_text: str) -> SegmentedResume:
        return segmenter.segment(ResumeText.from_text(raw_text))

    return _segment
