"""session.py
Holds ResumeBuilderSession, the single owner of the editor's state.

The session wires the upload/extraction, translation and export operations to
the current resume, template and language. Each long-running operation has its
own busy flag and ignores calls made while it is already running. Failures are
turned into localized `error` / `alert` messages and never escape.
"""
import asyncio
import os
from typing import Any, Dict, Optional, Union

from resume_architect.config import BUILDER_DEFAULTS
from resume_architect.editor import form_editor
from resume_architect.export.pdf_exporter import ExportResult, PDFExporter
from resume_architect.file_reader.parser_map import get_file_parser
from resume_architect.i18n import APP_STRINGS, FORM_LABELS, TEMPLATE_NAMES, get_strings
from resume_architect.ids import IdGenerator, uuid_id_generator
from resume_architect.logging import LoggerFactory
from resume_architect.models import (
    SUPPORTED_LANGUAGES,
    Language,
    ResumeData,
    TemplateType,
    build_sample_resume,
)
from resume_architect.rendering.template_renderer import TemplateRenderer, default_renderer
from resume_architect.services.resume_ai_service import LLMResumeService, ResumeAIService

logger = LoggerFactory().get_logger(__name__)


def compute_preview_scale(available_width: float) -> float:
    """
    Scale factor for the A4 preview in a container `available_width` pixels wide.

    The page is only shrunk when the container is narrower than an A4 page plus
    padding, leaving a small gap at the edges.

    Example:
        >>> compute_preview_scale(1200)
        1
        >>> compute_preview_scale(417)
        0.5
    """
    a4_width = BUILDER_DEFAULTS.A4_WIDTH_PX
    if available_width < a4_width + BUILDER_DEFAULTS.PREVIEW_PADDING_PX:
        return (available_width - BUILDER_DEFAULTS.PREVIEW_EDGE_PX) / a4_width
    return 1


def other_language(language: Language) -> Language:
    return "zh" if language == "en" else "en"


class ResumeBuilderSession:
    """
    In-memory state of one resume builder user.

    Args:
        ai_service (ResumeAIService | None): Extraction/translation backend.
            Defaults to the LLM-backed service, which only needs an API key once
            an upload or translation is actually made.
        exporter (PDFExporter | None): Export pipeline.
        renderer (TemplateRenderer): Renders the preview.
        id_generator (IdGenerator): Source of ids for new list items.
        resume (ResumeData | None): Starting document (the sample resume by default).
        language (Language): Starting UI/document language.

    Example:
        >>> session = ResumeBuilderSession(ai_service=my_stub)
        >>> await session.handle_upload("cv.pdf")
        >>> session.resume.personal_info.full_name
        'Jane Smith'
    """

    def __init__(
        self,
        ai_service: Optional[ResumeAIService] = None,
        exporter: Optional[PDFExporter] = None,
        renderer: TemplateRenderer = default_renderer,
        id_generator: IdGenerator = uuid_id_generator,
        resume: Optional[ResumeData] = None,
        language: Language = BUILDER_DEFAULTS.DEFAULT_LANGUAGE,
        max_file_size_mb: float = BUILDER_DEFAULTS.MAX_FILE_SIZE_MB,
    ):
        self.id_generator = id_generator
        self.ai_service = ai_service or LLMResumeService(id_generator=id_generator)
        self.renderer = renderer
        self.exporter = exporter or PDFExporter(renderer=renderer)
        self.max_file_size_mb = max_file_size_mb

        self.resume: ResumeData = resume or build_sample_resume(id_generator)
        self.template: TemplateType = TemplateType(BUILDER_DEFAULTS.DEFAULT_TEMPLATE)
        self.language: Language = language

        self.is_parsing = False
        self.is_exporting = False
        self.is_translating = False

        # Inline message under the upload control
        self.error: Optional[str] = None
        # Blocking notification (failed translation or export)
        self.alert: Optional[str] = None

    @property
    def strings(self) -> Dict[str, str]:
        return get_strings(APP_STRINGS, self.language)

    # --------------------------------------------------------------
    # UPLOAD + EXTRACTION
    # --------------------------------------------------------------
    async def handle_upload(self, file_path: str, file_name: Optional[str] = None) -> None:
        """
        Read an uploaded file and replace the resume with what the AI service extracts.

        Files over the size limit are rejected before the busy flag is set and
        before anything is read. When nothing can be extracted, or any step
        fails, the current resume is kept and `error` explains why.
        """
        if self.is_parsing:
            return

        self.error = None
        try:
            file_size = os.path.getsize(file_path)
        except OSError as e:
            self.error = str(e) or self.strings["unexpectedError"]
            return

        if file_size > self.max_file_size_mb * 1024 * 1024:
            self.error = self.strings["fileSizeError"]
            return

        self.is_parsing = True
        try:
            parser = get_file_parser(file_path, self.max_file_size_mb, file_name=file_name)
            document = await asyncio.to_thread(parser.parse)
            extracted = await asyncio.to_thread(self.ai_service.extract, document, self.language)

            if extracted is None:
                self.error = self.strings["parseError"]
            else:
                self.resume = extracted
        except Exception as e:
            logger.error(f"Upload of `{file_name or file_path}` failed: {e}")
            self.error = str(e) or self.strings["unexpectedError"]
        finally:
            self.is_parsing = False

    # --------------------------------------------------------------
    # LANGUAGE + TRANSLATION
    # --------------------------------------------------------------
    async def toggle_language(self) -> None:
        """
        Switch the UI language and translate the resume into it.

        The language flips before the translation starts. If the translation
        fails the resume stays in the previous language and `alert` is set.
        """
        if self.is_translating:
            return

        new_language = other_language(self.language)
        self.language = new_language
        self.alert = None

        self.is_translating = True
        try:
            self.resume = await asyncio.to_thread(self.ai_service.translate, self.resume, new_language)
        except Exception as e:
            logger.error(f"Translation to `{new_language}` failed: {e}")
            self.alert = get_strings(APP_STRINGS, new_language)["translationFailed"]
        finally:
            self.is_translating = False

    def set_language(self, language: Language) -> None:
        """Switch the UI language without translating the resume."""
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language `{language}`. Choices are: {list(SUPPORTED_LANGUAGES)}")
        self.language = language

    # --------------------------------------------------------------
    # EXPORT
    # --------------------------------------------------------------
    async def export_pdf(self) -> Optional[ExportResult]:
        """
        Export the current resume with the current template.

        Returns None when an export is already running. When the PDF could not
        be produced, the result points at the print page and `alert` is set.
        """
        if self.is_exporting:
            return None

        self.is_exporting = True
        try:
            result = await asyncio.to_thread(self.exporter.export, self.resume, self.template, self.language)
        except Exception as e:
            logger.error(f"Export failed: {e}")
            self.alert = self.strings["exportFailed"]
            return None
        finally:
            self.is_exporting = False

        if result.method == "print":
            self.alert = self.strings["exportFailed"]
        return result

    # --------------------------------------------------------------
    # EDITING
    # --------------------------------------------------------------
    def select_template(self, template: Union[TemplateType, str]) -> None:
        """
        Raises:
            ValueError: If `template` is not a known variant.
        """
        self.template = TemplateType(template)

    def load_resume(self, data: ResumeData) -> None:
        """Replace the whole resume (e.g. a previously saved JSON export)."""
        self.resume = data

    def update_personal_info(self, field_name: str, value: str) -> None:
        self.resume = form_editor.update_personal_info(self.resume, field_name, value)

    def update_summary(self, text: str) -> None:
        self.resume = form_editor.update_summary(self.resume, text)

    def add_item(self, section: str) -> str:
        """Append an empty item to `section` and return its id."""
        self.resume = form_editor.add_item(self.resume, section, self.id_generator)
        return getattr(self.resume, section)[-1].id

    def update_item(self, section: str, item_id: str, field_name: str, value: Any) -> None:
        self.resume = form_editor.update_item(self.resume, section, item_id, field_name, value)

    def remove_item(self, section: str, item_id: str) -> None:
        self.resume = form_editor.remove_item(self.resume, section, item_id)

    def toggle_present(self, section: str, item_id: str, checked: bool) -> None:
        self.resume = form_editor.toggle_present(self.resume, section, item_id, checked, self.language)

    def set_avatar(self, image_bytes: bytes, mime_type: str) -> None:
        self.resume = form_editor.set_avatar(self.resume, image_bytes, mime_type)

    def remove_avatar(self) -> None:
        self.resume = form_editor.remove_avatar(self.resume)

    def dismiss_alert(self) -> None:
        self.alert = None

    # --------------------------------------------------------------
    # VIEW
    # --------------------------------------------------------------
    def render_preview(self) -> str:
        """Full A4 page with the resume in the selected template."""
        return self.renderer.render_document(self.resume, self.template, self.language)

    def to_state(self) -> Dict[str, Any]:
        """Snapshot for the UI in the camelCase wire shape."""
        return {
            "resume": self.resume.to_dict(),
            "template": self.template.value,
            "language": self.language,
            "isParsing": self.is_parsing,
            "isExporting": self.is_exporting,
            "isTranslating": self.is_translating,
            "error": self.error,
            "alert": self.alert,
            "strings": self.strings,
            "formLabels": get_strings(FORM_LABELS, self.language),
            "templateNames": get_strings(TEMPLATE_NAMES, self.language),
            "formTabs": list(form_editor.FORM_TABS),
        }
