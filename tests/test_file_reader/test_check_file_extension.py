"""test_check_file_extension.py
Test check_file_extension and mime_type_for_extension functions.
"""
import pytest

from resume_architect.exceptions import FileNotSupportedError

from resume_architect.file_reader.helpers.check_file_extension import (
    check_file_extension,
    mime_type_for_extension,
)


class TestCheckFileExtension:
    """Tests for the check_file_extension utility."""

    def test_valid_extension_returns_lowercase(self):
        """Return the lowercase file extension if it's supported."""
        supported = [".pdf", ".docx"]
        assert check_file_extension("resume.PDF", supported) == ".pdf"

    def test_unsupported_extension_raises_error(self):
        """Raise FileNotSupportedError if extension is not supported."""
        supported = [".pdf", ".docx"]

        with pytest.raises(FileNotSupportedError) as exc_info:
            check_file_extension("resume.txt", supported)

        err = exc_info.value
        assert err.extension == ".txt"
        assert err.supported_extensions == supported

    def test_no_extension_raises_error(self):
        """Raise FileNotSupportedError when file has no extension."""
        with pytest.raises(FileNotSupportedError) as exc_info:
            check_file_extension("resume", [".pdf"])
        assert exc_info.value.extension == ""

    def test_dot_in_filename_not_extension(self):
        """Ensure it extracts only the final extension."""
        assert check_file_extension("resume.v1.docx", [".pdf", ".docx"]) == ".docx"

    def test_docx_is_not_mistaken_for_doc(self):
        """`.doc` must not swallow `.docx` (and vice versa)."""
        supported = [".doc", ".docx"]
        assert check_file_extension("cv.docx", supported) == ".docx"
        assert check_file_extension("cv.doc", supported) == ".doc"


class TestMimeTypeForExtension:

    @pytest.mark.parametrize("extension,mime_type", [
        (".pdf", "application/pdf"),
        (".png", "image/png"),
        (".jpg", "image/jpeg"),
        (".JPEG", "image/jpeg"),
        (".docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
    ])
    def test_known_extensions(self, extension, mime_type):
        assert mime_type_for_extension(extension) == mime_type

    def test_unknown_extension(self):
        assert mime_type_for_extension(".xyz") == "application/octet-stream"
