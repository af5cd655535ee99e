"""dummy_classes.py
Holds dummy classes for abstract classes to test with
"""
from dataclasses import replace
from typing import List, Optional, Tuple

from resume_architect.models import Language, ResumeData, UploadedDocument
from resume_architect.services.llm_resume_adapter import LLMResumeAdapter
from resume_architect.services.resume_ai_service import ResumeAIService


# Dummy subclass for testing where needed
class DummyAdapter(LLMResumeAdapter):
    """A dummy LLMResumeAdapter subclass for testing."""
    FUNCTION_NAME = "extract_resume"

    def run(self, user_prompt: str = "dummy prompt"):
        return self._query_llm(system_prompt=None, user_prompt=user_prompt)


class StubResumeAIService(ResumeAIService):
    """
    ResumeAIService returning preset results and recording every call.

    Args:
        extract_result: Returned by `extract` (None means "nothing extracted").
        translate_result: Returned by `translate`. Defaults to the input with its
            summary prefixed by the target language.
        extract_error / translate_error: Raised instead of returning when set.
    """

    def __init__(
        self,
        extract_result: Optional[ResumeData] = None,
        translate_result: Optional[ResumeData] = None,
        extract_error: Optional[Exception] = None,
        translate_error: Optional[Exception] = None,
    ):
        self.extract_result = extract_result
        self.translate_result = translate_result
        self.extract_error = extract_error
        self.translate_error = translate_error
        self.extract_calls: List[Tuple[UploadedDocument, Language]] = []
        self.translate_calls: List[Tuple[ResumeData, Language]] = []

    def extract(self, document: UploadedDocument, language: Language) -> Optional[ResumeData]:
        self.extract_calls.append((document, language))
        if self.extract_error:
            raise self.extract_error
        return self.extract_result

    def translate(self, data: ResumeData, target_language: Language) -> ResumeData:
        self.translate_calls.append((data, target_language))
        if self.translate_error:
            raise self.translate_error
        if self.translate_result is not None:
            return self.translate_result
        return replace(data, summary=f"[{target_language}] {data.summary}")
