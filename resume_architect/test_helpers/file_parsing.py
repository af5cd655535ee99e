"""file_parsing.py
Helper functions to build upload files to test with.
"""

import base64
import zipfile
from pathlib import Path
from typing import List

import pymupdf

from resume_architect.file_reader.file_parser import FileParser
from resume_architect.models import UploadedDocument

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


# DummyTxtParser to test with
class DummyTxtParser(FileParser):
    """Simple subclass of FileParser to test _validate_file logic."""
    SUPPORTED_EXTENSIONS = [".txt"]

    def parse(self):
        return UploadedDocument(file_name=self.file_name, mime_type=self.mime_type, data=b"")


def write_docx(path: Path, paragraphs: List[str]) -> Path:
    """Write a minimal .docx whose body holds one paragraph per entry."""
    body = "".join(
        f"<w:p><w:r><w:t>{paragraph}</w:t></w:r></w:p>" for paragraph in paragraphs
    )
    document_xml = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{WORD_NAMESPACE}"><w:body>{body}</w:body></w:document>'
    )
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("word/document.xml", document_xml)
    return path


def write_pdf(path: Path, lines: List[str]) -> Path:
    """Write a one page PDF containing `lines` with PyMuPDF."""
    doc = pymupdf.open()
    page = doc.new_page()
    y = 72
    for line in lines:
        page.insert_text((72, y), line)
        y += 16
    doc.save(str(path))
    doc.close()
    return path


def write_png(path: Path) -> Path:
    path.write_bytes(PNG_BYTES)
    return path


def write_oversized_file(path: Path, size_mb: float = 5.0, extra_bytes: int = 1) -> Path:
    """Write a file `extra_bytes` larger than `size_mb` megabytes."""
    path.write_bytes(b"0" * (int(size_mb * 1024 * 1024) + extra_bytes))
    return path
