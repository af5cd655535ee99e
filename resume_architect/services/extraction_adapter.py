"""extraction_adapter.py
Turns an uploaded resume document into ResumeData using the LLM.
"""
from typing import Optional

from resume_architect.exceptions import LLMConfigError, LLMEmptyResponse, ResumeDataError
from resume_architect.llm.llm_client import build_attachment_block
from resume_architect.logging import LoggerFactory, running_under_pytest
from resume_architect.models import Language, ResumeData, UploadedDocument
from resume_architect.services.llm_resume_adapter import LLMResumeAdapter
from resume_architect.services.normalize import resume_from_extraction_payload
from resume_architect.services.prompts import (
    EXTRACTION_SYSTEM_PROMPT,
    build_text_extraction_prompt,
    get_extraction_prompt,
)

extraction_logger = LoggerFactory().get_logger(
    name="resume_extraction",
    logger_type="extraction"
)


class ResumeExtractionAdapter(LLMResumeAdapter):
    """
    Extracts structured resume fields from an UploadedDocument.

    - Images and PDFs are attached to the request as base64 content blocks.
    - Word documents are sent as their locally extracted text.

    Example:
        >>> document = get_file_parser("resume.pdf").parse()
        >>> resume = ResumeExtractionAdapter().extract(document, language="en")
    """
    FUNCTION_NAME = "extract_resume"

    def extract(self, document: UploadedDocument, language: Language = "en") -> Optional[ResumeData]:
        """
        Run the extraction request for `document`.

        Returns:
            Optional[ResumeData]: The extracted resume with fresh ids, or None when the
                API key is missing or the model returned nothing usable
                (including an empty answer).

        Raises:
            LLMInitializationError / LLMQueryError: On transport or client failures.
        """
        if document.is_text:
            user_prompt = build_text_extraction_prompt(document.text, language)
            attachments = None
        else:
            user_prompt = get_extraction_prompt(language)
            attachments = [build_attachment_block(document.data, document.mime_type)]

        try:
            response = self._query_llm(
                system_prompt=EXTRACTION_SYSTEM_PROMPT,
                user_prompt=user_prompt,
                attachments=attachments,
            )
        except LLMConfigError as e:
            extraction_logger.error(f"API key is missing, skipping extraction of `{document.file_name}`: {e}")
            return None
        except LLMEmptyResponse as e:
            self._log_unusable_response(document, e)
            return None

        if not isinstance(response, dict) or not response:
            self._log_unusable_response(document, response)
            return None

        try:
            return resume_from_extraction_payload(response, id_generator=self.id_generator)
        except ResumeDataError as e:
            self._log_unusable_response(document, e)
            return None

    def _log_unusable_response(self, document: UploadedDocument, detail: object) -> None:
        if not running_under_pytest():
            extraction_logger.warning(
                f"Extraction of `{document.file_name}` returned no usable resume data: {detail}"
            )
