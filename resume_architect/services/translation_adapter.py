"""translation_adapter.py
Translates the text of a ResumeData into another language using the LLM.
"""
from resume_architect.exceptions import LLMConfigError, ResumeDataError, TranslationError
from resume_architect.logging import LoggerFactory
from resume_architect.models import Language, ResumeData
from resume_architect.services.llm_resume_adapter import LLMResumeAdapter
from resume_architect.services.normalize import build_translation_payload, merge_translation
from resume_architect.services.prompts import build_translation_prompt

translation_logger = LoggerFactory().get_logger(
    name="resume_translation",
    logger_type="translation"
)


class ResumeTranslationAdapter(LLMResumeAdapter):
    """
    Produces a translated copy of a resume.

    Ids and the avatar never leave the process. They are re-attached to the
    response by position (see `normalize.merge_translation`).
    """
    FUNCTION_NAME = "translate_resume"

    def translate(self, data: ResumeData, target_language: Language) -> ResumeData:
        """
        Translate every text field of `data` into `target_language`.

        Returns:
            ResumeData: A new resume. `data` is never modified.

        Raises:
            TranslationError: If the API key is missing or the response is not a
                usable JSON object.
            LLMInitializationError / LLMQueryError / LLMEmptyResponse: On client failures.
        """
        payload = build_translation_payload(data)

        try:
            response = self._query_llm(
                system_prompt=None,
                user_prompt=build_translation_prompt(payload, target_language),
            )
        except LLMConfigError as e:
            translation_logger.error(f"API key is missing, cannot translate resume: {e}")
            raise TranslationError("API key missing", target_language=target_language)

        if not isinstance(response, dict) or not response:
            raise TranslationError(
                f"Translation response was not a non-empty JSON object: {str(response)[:200]}",
                target_language=target_language,
            )

        try:
            translated = merge_translation(data, response, id_generator=self.id_generator)
        except ResumeDataError as e:
            raise TranslationError(f"Malformed translation response: {e}", target_language=target_language)

        translation_logger.info(f"Translated resume into `{target_language}`")
        return translated
