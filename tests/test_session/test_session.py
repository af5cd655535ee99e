"""test_session.py
Test ResumeBuilderSession class.
"""
import asyncio
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from langchain_core.messages import AIMessage

from resume_architect.exceptions import TranslationError
from resume_architect.export.pdf_exporter import ExportResult
from resume_architect.i18n import APP_STRINGS
from resume_architect.ids import SequentialIdGenerator
from resume_architect.llm.llm_client import LLMClient
from resume_architect.models import ResumeData, TemplateType, build_sample_resume
from resume_architect.services.resume_ai_service import LLMResumeService
from resume_architect.session import ResumeBuilderSession, compute_preview_scale, other_language
from resume_architect.test_helpers.dummy_classes import StubResumeAIService
from resume_architect.test_helpers.file_parsing import write_docx, write_oversized_file, write_png


@pytest.fixture
def exporter():
    return MagicMock()


@pytest.fixture
def session(stub_ai_service, exporter):
    return ResumeBuilderSession(
        ai_service=stub_ai_service,
        exporter=exporter,
        id_generator=SequentialIdGenerator("new-"),
        resume=build_sample_resume(SequentialIdGenerator()),
        language="en",
    )


@pytest.mark.parametrize("width,expected", [
    (1200, 1),
    (834, 1),
    (833, (833 - 20) / 794),
    (417, 0.5),
])
def test_compute_preview_scale(width, expected):
    assert compute_preview_scale(width) == pytest.approx(expected)


def test_other_language():
    assert other_language("en") == "zh"
    assert other_language("zh") == "en"


def test_defaults():
    session = ResumeBuilderSession(ai_service=StubResumeAIService(), exporter=MagicMock())

    assert session.language == "zh"
    assert session.template is TemplateType.MODERN
    assert session.resume.personal_info.full_name == "Alex Doe"
    assert not (session.is_parsing or session.is_exporting or session.is_translating)


class TestUpload:
    """Tests for `handle_upload`."""

    def test_success_replaces_resume(self, tmp_path, session, stub_ai_service):
        extracted = ResumeData()
        stub_ai_service.extract_result = extracted
        path = write_png(tmp_path / "cv.png")

        asyncio.run(session.handle_upload(str(path)))

        assert session.resume is extracted
        assert session.error is None
        assert session.is_parsing is False
        document, language = stub_ai_service.extract_calls[0]
        assert document.mime_type == "image/png"
        assert language == "en"

    def test_word_document_sent_as_text(self, tmp_path, session, stub_ai_service):
        path = write_docx(tmp_path / "upload.tmp", ["Jane Smith", "Data Engineer"])

        asyncio.run(session.handle_upload(str(path), file_name="cv.docx"))

        document, _ = stub_ai_service.extract_calls[0]
        assert "Jane Smith" in document.text

    def test_oversized_file_rejected_before_parsing(self, tmp_path, session, stub_ai_service):
        path = write_oversized_file(tmp_path / "big.pdf")
        original = session.resume

        asyncio.run(session.handle_upload(str(path)))

        assert session.error == APP_STRINGS["en"]["fileSizeError"]
        assert session.is_parsing is False
        assert stub_ai_service.extract_calls == []
        assert session.resume is original

    def test_nothing_extracted_keeps_resume(self, tmp_path, session):
        path = write_png(tmp_path / "cv.png")
        original = session.resume

        asyncio.run(session.handle_upload(str(path)))

        assert session.error == APP_STRINGS["en"]["parseError"]
        assert session.resume is original

    def test_empty_model_answer_reports_parse_error(self, tmp_path, exporter, FAKE_API_KEY):
        llm_client = LLMClient(function_name="extract_resume")
        llm_client.client = MagicMock()
        llm_client.client.invoke.return_value = AIMessage(content="")
        session = ResumeBuilderSession(
            ai_service=LLMResumeService(llm_client=llm_client),
            exporter=exporter,
            resume=build_sample_resume(SequentialIdGenerator()),
            language="en",
        )
        original = session.resume

        asyncio.run(session.handle_upload(str(write_png(tmp_path / "cv.png"))))

        assert session.error == APP_STRINGS["en"]["parseError"]
        assert session.resume is original
        assert session.is_parsing is False

    def test_extraction_error_keeps_resume(self, tmp_path, session, stub_ai_service):
        stub_ai_service.extract_error = RuntimeError("model overloaded")
        path = write_png(tmp_path / "cv.png")
        original = session.resume

        asyncio.run(session.handle_upload(str(path)))

        assert session.error == "model overloaded"
        assert session.resume is original
        assert session.is_parsing is False

    def test_unsupported_extension(self, tmp_path, session, stub_ai_service):
        path = tmp_path / "notes.txt"
        path.write_text("hello", encoding="utf-8")

        asyncio.run(session.handle_upload(str(path)))

        assert "not supported" in session.error
        assert stub_ai_service.extract_calls == []

    def test_missing_file(self, tmp_path, session):
        asyncio.run(session.handle_upload(str(tmp_path / "missing.pdf")))
        assert session.error

    def test_ignored_while_parsing(self, tmp_path, session, stub_ai_service):
        session.is_parsing = True
        path = write_png(tmp_path / "cv.png")

        asyncio.run(session.handle_upload(str(path)))

        assert stub_ai_service.extract_calls == []

    def test_localized_error(self, tmp_path, session):
        session.language = "zh"
        asyncio.run(session.handle_upload(str(write_png(tmp_path / "cv.png"))))
        assert session.error == APP_STRINGS["zh"]["parseError"]


class TestToggleLanguage:
    """Tests for `toggle_language`."""

    def test_success_translates(self, session, stub_ai_service):
        asyncio.run(session.toggle_language())

        assert session.language == "zh"
        assert session.resume.summary.startswith("[zh] ")
        assert session.alert is None
        assert session.is_translating is False
        assert stub_ai_service.translate_calls[0][1] == "zh"

    def test_failure_switches_language_and_keeps_content(self, session, stub_ai_service):
        stub_ai_service.translate_error = TranslationError("API key missing", target_language="zh")
        original = session.resume

        asyncio.run(session.toggle_language())

        assert session.language == "zh"
        assert session.resume is original
        assert session.alert == APP_STRINGS["zh"]["translationFailed"]
        assert session.is_translating is False

    def test_ignored_while_translating(self, session, stub_ai_service):
        session.is_translating = True

        asyncio.run(session.toggle_language())

        assert session.language == "en"
        assert stub_ai_service.translate_calls == []

    def test_set_language(self, session):
        session.set_language("zh")
        assert session.strings == APP_STRINGS["zh"]
        with pytest.raises(ValueError):
            session.set_language("fr")


class TestExport:
    """Tests for `export_pdf`."""

    def test_pdf_result(self, session, exporter):
        exporter.export.return_value = ExportResult(method="pdf", path=Path("Alex_Doe_Resume.pdf"))
        session.select_template("CLASSIC")

        result = asyncio.run(session.export_pdf())

        assert result.method == "pdf"
        assert session.alert is None
        exporter.export.assert_called_once_with(session.resume, TemplateType.CLASSIC, "en")

    def test_print_fallback_sets_alert(self, session, exporter):
        exporter.export.return_value = ExportResult(method="print", path=Path("x.print.html"), message="boom")

        result = asyncio.run(session.export_pdf())

        assert result.method == "print"
        assert session.alert == APP_STRINGS["en"]["exportFailed"]
        assert session.is_exporting is False

    def test_exporter_error_sets_alert(self, session, exporter):
        exporter.export.side_effect = OSError("disk full")

        assert asyncio.run(session.export_pdf()) is None
        assert session.alert == APP_STRINGS["en"]["exportFailed"]
        assert session.is_exporting is False

    def test_ignored_while_exporting(self, session, exporter):
        session.is_exporting = True
        assert asyncio.run(session.export_pdf()) is None
        exporter.export.assert_not_called()

    def test_dismiss_alert(self, session):
        session.alert = "x"
        session.dismiss_alert()
        assert session.alert is None


class TestEditing:
    """Edit wrappers and view state."""

    def test_add_and_update_item(self, session):
        item_id = session.add_item("experience")
        session.update_item("experience", item_id, "title", "Staff Engineer")

        assert item_id == "new-1"
        assert session.resume.experience[-1].title == "Staff Engineer"

    def test_toggle_present_uses_session_language(self, session):
        session.language = "zh"
        session.toggle_present("experience", "id-2", True)
        assert session.resume.experience[1].end_date == "至今"

    def test_select_unknown_template_raises(self, session):
        with pytest.raises(ValueError):
            session.select_template("RETRO")

    def test_avatar(self, session):
        session.set_avatar(b"\x89PNG", "image/png")
        assert session.resume.personal_info.avatar.startswith("data:image/png;base64,")
        session.remove_avatar()
        assert session.resume.personal_info.avatar == ""

    def test_render_preview(self, session):
        session.select_template(TemplateType.MINIMAL)
        html = session.render_preview()
        assert "template-MINIMAL" in html
        assert html.startswith("<!DOCTYPE html>")

    def test_to_state(self, session):
        state = session.to_state()

        assert state["resume"]["personalInfo"]["fullName"] == "Alex Doe"
        assert state["template"] == "MODERN"
        assert state["language"] == "en"
        assert state["formTabs"] == ["personal", "summary", "experience", "projects", "education", "skills"]
        assert state["strings"] == APP_STRINGS["en"]
        assert set(state) >= {"isParsing", "isExporting", "isTranslating", "error", "alert", "formLabels", "templateNames"}
