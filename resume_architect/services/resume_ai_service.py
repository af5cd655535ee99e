"""resume_ai_service.py
The two AI operations the resume builder depends on, behind one interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from resume_architect.ids import IdGenerator, uuid_id_generator
from resume_architect.llm.llm_client import LLMClient
from resume_architect.models import Language, ResumeData, UploadedDocument
from resume_architect.services.extraction_adapter import ResumeExtractionAdapter
from resume_architect.services.translation_adapter import ResumeTranslationAdapter


class ResumeAIService(ABC):
    """
    Extraction and translation as seen by the session and CLI.

    Form editing, rendering and export never depend on this class, so they can
    be exercised with a stub implementation.
    """

    @abstractmethod
    def extract(self, document: UploadedDocument, language: Language) -> Optional[ResumeData]:
        """Return the resume found in `document`, or None if nothing could be extracted."""
        pass

    @abstractmethod
    def translate(self, data: ResumeData, target_language: Language) -> ResumeData:
        """Return a translated copy of `data`. Raises on any failure."""
        pass


class LLMResumeService(ResumeAIService):
    """
    ResumeAIService backed by the LLM adapters.

    Args:
        llm_client (LLMClient | None): Shared client. Each adapter builds its own
            lazily when omitted, so a missing API key only surfaces on first use.
        id_generator (IdGenerator): Source of ids for new list items.
    """

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        id_generator: IdGenerator = uuid_id_generator,
    ):
        self.extraction_adapter = ResumeExtractionAdapter(
            llm_client=llm_client,
            id_generator=id_generator,
        )
        self.translation_adapter = ResumeTranslationAdapter(
            llm_client=llm_client,
            id_generator=id_generator,
        )

    def extract(self, document: UploadedDocument, language: Language) -> Optional[ResumeData]:
        return self.extraction_adapter.extract(document, language)

    def translate(self, data: ResumeData, target_language: Language) -> ResumeData:
        return self.translation_adapter.translate(data, target_language)
