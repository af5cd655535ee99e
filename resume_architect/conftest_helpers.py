"""conftest_helpers.py
Helper functions for `tests/conftest.py`
"""

from resume_architect.services.llm_resume_adapter import LLMResumeAdapter
from resume_architect.services.extraction_adapter import ResumeExtractionAdapter
from resume_architect.services.translation_adapter import ResumeTranslationAdapter
from resume_architect.test_helpers.llm_client_test_helpers import expected_test_responses


# --------------------------------------------------------------
# SETUP MONKEYPATCH FIXTURES
# --------------------------------------------------------------
def apply_mock_llm_patch(monkeypatch):
    """
    Core patching logic for LLMResumeAdapter and its subclasses.

    Forces all adapters to use mock LLM responses by default:
      - `force_mock_llm_response=True`
      - `llm_dummy_response` set per subclass:
        - ResumeExtractionAdapter -> expected_test_responses["extract_resume"]["success"]
        - ResumeTranslationAdapter -> expected_test_responses["translate_resume"]["success"]

    Notes:
      - Intended to be called from a fixture to control scope.
      - Does not yield; directly applies the monkeypatch.
    """
    original_init = LLMResumeAdapter.__init__

    def patched_init(self, *args, **kwargs):
        kwargs.setdefault("force_mock_llm_response", True)

        if isinstance(self, ResumeExtractionAdapter):
            kwargs.setdefault("llm_dummy_response", expected_test_responses["extract_resume"]["success"])
        elif isinstance(self, ResumeTranslationAdapter):
            kwargs.setdefault("llm_dummy_response", expected_test_responses["translate_resume"]["success"])

        original_init(self, *args, **kwargs)

    monkeypatch.setattr(LLMResumeAdapter, "__init__", patched_init)
