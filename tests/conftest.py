"""conftest.py
Shared fixtures, test run logging and the `--llm-mode` option.
"""
from collections import Counter

import pytest

from resume_architect.conftest_helpers import apply_mock_llm_patch
from resume_architect.ids import SequentialIdGenerator
from resume_architect.logging import LoggerFactory
from resume_architect.models import build_sample_resume
from resume_architect.test_helpers.dummy_classes import StubResumeAIService

LLM_MODES = ["mock_only", "basic_only", "full"]

# --------------------------------------------------------------
# TEST RUN LOGGING
# --------------------------------------------------------------
logger = LoggerFactory().get_logger(
    name="pytest_logger",
    logger_type="pytest",
    console=True
)
outcomes = Counter()
current_module = None


@pytest.hookimpl(tryfirst=True)
def pytest_sessionstart(session):
    logger.info("==== RESUME ARCHITECT TEST RUN ====")


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_logstart(nodeid, location):
    """Print a header whenever the run moves on to another test module."""
    global current_module
    module = location[0]
    if module != current_module:
        current_module = module
        logger.info(f"\n---- {current_module} ----")


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_logreport(report):
    # Setup/teardown phases only matter when they fail
    if report.when != "call" and not report.failed:
        return

    outcomes[report.outcome] += 1
    if report.passed:
        logger.info(f"PASSED: {report.nodeid}")
    elif report.failed:
        logger.error(f"FAILED ({report.when}): {report.nodeid}\n{report.longreprtext}")
    else:
        logger.warning(f"SKIPPED: {report.nodeid}\n{report.longreprtext}")


@pytest.hookimpl(tryfirst=True)
def pytest_sessionfinish(session, exitstatus):
    summary = ", ".join(f"{count} {outcome}" for outcome, count in sorted(outcomes.items())) or "no tests"
    logger.info(f"==== TEST RUN FINISHED ({summary}) exitstatus={exitstatus} ====")


# --------------------------------------------------------------
# LLM MODE
# --------------------------------------------------------------
def pytest_addoption(parser):
    """
    Choose how tests talk to the LLM.

        pytest                          # canned responses only (default)
        pytest --llm-mode=basic_only    # a few live calls
        pytest --llm-mode=full          # every adapter test goes live
    """
    parser.addoption(
        "--llm-mode",
        action="store",
        default="mock_only",
        choices=LLM_MODES,
        help="LLM test mode: 'mock_only' (default), 'basic_only' or 'full'.",
    )


@pytest.fixture(scope="session")
def LLM_TEST_MODE(request):
    """The `--llm-mode` of this run: 'mock_only', 'basic_only' or 'full'."""
    return request.config.getoption("--llm-mode")


@pytest.fixture(autouse=False)
def FORCE_MOCK_LLM_RESPONSES(monkeypatch):
    """
    Make every extraction/translation adapter return its canned response.

    Applies whatever the `--llm-mode`, so tests using it never make live calls.
    Use it per test (as an argument) or per class with
    `@pytest.mark.usefixtures("FORCE_MOCK_LLM_RESPONSES")`.
    """
    apply_mock_llm_patch(monkeypatch)
    yield


@pytest.fixture
def USE_MOCK_LLM_RESPONSE_SETTING(monkeypatch, LLM_TEST_MODE):
    """Like `FORCE_MOCK_LLM_RESPONSES`, unless the run uses `--llm-mode=full`."""
    if LLM_TEST_MODE != "full":
        apply_mock_llm_patch(monkeypatch)
    yield


# --------------------------------------------------------------
# SHARED FIXTURES
# --------------------------------------------------------------
@pytest.fixture
def FAKE_API_KEY(monkeypatch):
    """Set a placeholder Anthropic key so LLMClient can be constructed offline."""
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
    yield "test-key"


@pytest.fixture
def id_generator():
    """Deterministic ids: id-1, id-2, ..."""
    return SequentialIdGenerator()


@pytest.fixture
def sample_resume(id_generator):
    """
    The placeholder resume with known ids:
    experience id-1, id-2; project id-3; education id-4; skills id-5 .. id-11.
    """
    return build_sample_resume(id_generator)


@pytest.fixture
def stub_ai_service():
    return StubResumeAIService()
