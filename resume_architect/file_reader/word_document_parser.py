"""word_document_parser.py

Holds WordDocumentParser class using docx2txt for text extraction.
"""
import docx2txt

from resume_architect.models import UploadedDocument
from resume_architect.exceptions import (
    FileOpenError,
    FileEmptyError,
    TextExtractionUnavailableError,
)
from resume_architect.file_reader.file_parser import FileParser


class WordDocumentParser(FileParser):
    """
    Concrete parser for Microsoft Word documents (.docx, .doc).

    Word files are not sent to the extraction service as bytes. Their plain text
    is extracted locally with ``docx2txt`` (including textboxes) instead.
    ``.doc`` is accepted at upload but has no local extractor, so parsing it
    fails explicitly rather than producing empty text.

    Attributes:
        SUPPORTED_EXTENSIONS (List[str]): File extensions supported by this parser.
    """

    SUPPORTED_EXTENSIONS = ['.docx', '.doc']

    def parse(self) -> UploadedDocument:
        """
        Extract the Word document's text and return it as an ``UploadedDocument``.

        Raises:
            TextExtractionUnavailableError: If the file is a legacy ``.doc`` container.
            FileOpenError: If the file cannot be opened or read.
            FileEmptyError: If the document contains no readable text.
        """
        if self.extension == ".doc":
            raise TextExtractionUnavailableError(str(self.file_path), self.extension)

        full_text = self._get_docx_contents()
        if not full_text:
            raise FileEmptyError(str(self.file_path))

        return UploadedDocument(
            file_name=self.file_name,
            mime_type=self.mime_type,
            text=full_text,
        )

    def _get_docx_contents(self) -> str:
        """
        Opens the Word document using docx2txt and extracts all text content (including
        textboxes).

        Returns:
            str: The stripped extracted text from the document.

        Raises:
            FileOpenError: If the Word document cannot be opened or read.
        """
        try:
            full_text = docx2txt.process(self.file_path)
        except Exception as e:
            raise FileOpenError(str(self.file_path), str(e))

        return (full_text or "").strip()
