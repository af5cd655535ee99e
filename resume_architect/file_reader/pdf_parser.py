"""pdf_parser.py

Holds PDFParser class.
"""
import pymupdf

from resume_architect.exceptions import FileOpenError
from resume_architect.models import UploadedDocument

from resume_architect.file_reader.file_parser import FileParser


class PDFParser(FileParser):
    """
    Concrete parser for PDF documents (.pdf).

    The PDF itself is sent to the extraction service, so the parser only opens
    it with PyMuPDF to confirm it is readable and to count its pages.

    Attributes:
        SUPPORTED_EXTENSIONS (List[str]): List of file extensions supported by
            this parser (only ``.pdf``).
    """
    SUPPORTED_EXTENSIONS = ['.pdf']

    def parse(self) -> UploadedDocument:
        """
        Read the PDF and return it as an ``UploadedDocument``.

        Raises:
            FileOpenError: If the file cannot be opened or read by PyMuPDF.
        """
        data = self._read_bytes()
        page_count = self._get_page_count(data)
        return UploadedDocument(
            file_name=self.file_name,
            mime_type=self.mime_type,
            data=data,
            page_count=page_count,
        )

    def _get_page_count(self, data: bytes) -> int:
        """
        Opens the PDF bytes using PyMuPDF and returns the number of pages.

        Raises:
            FileOpenError: If the PDF cannot be opened or has no pages.
        """
        try:
            doc = pymupdf.open(stream=data, filetype="pdf")
        except Exception as e:
            raise FileOpenError(str(self.file_path), str(e))

        page_count = doc.page_count
        doc.close()

        if page_count == 0:
            raise FileOpenError(str(self.file_path), "PDF contains no pages")

        return page_count
