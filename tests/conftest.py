"""conftest.py
Shared pytest hooks and fixtures.
"""

import pytest

from cv_site.logging import LoggerFactory
from cv_site.models import Capabilities
from cv_site.test_helpers.mock_cv_generator import MockCvGenerator

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
        return

    status = report.outcome.upper()
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
@pytest.fixture
def ALL_CAPABILITIES() -> Capabilities:
    """Every optional backend declared present."""
    return Capabilities(pdf=True, word_document=True, web_page=True)


@pytest.fixture
def NO_CAPABILITIES() -> Capabilities:
    """Every optional backend declared absent."""
    return Capabilities(pdf=False, word_document=False, web_page=False)


@pytest.fixture
def mock_cv_text() -> str:
    """Default mock CV text (well above the viability threshold)."""
    return MockCvGenerator().generate()
