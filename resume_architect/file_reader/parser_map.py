"""parser_map.py
Maps upload extensions to the FileParser subclass that handles them.
"""
from typing import Dict, Type

from resume_architect.config import BUILDER_DEFAULTS
from resume_architect.file_reader.file_parser import FileParser
from resume_architect.file_reader.helpers.check_file_extension import check_file_extension
from resume_architect.file_reader.image_parser import ImageParser
from resume_architect.file_reader.pdf_parser import PDFParser
from resume_architect.file_reader.word_document_parser import WordDocumentParser

PARSER_MAP: Dict[str, Type[FileParser]] = {
    ext: parser_cls
    for parser_cls in (PDFParser, ImageParser, WordDocumentParser)
    for ext in parser_cls.SUPPORTED_EXTENSIONS
}


def get_file_parser(
    file_path: str,
    max_file_size_mb: float | None = BUILDER_DEFAULTS.MAX_FILE_SIZE_MB,
    file_name: str | None = None,
) -> FileParser:
    """
    Return a validated parser instance for `file_path`.

    The extension is checked against `file_name` when given (uploads are often
    saved under a temporary path without the original extension).

    Raises:
        FileNotSupportedError: If the extension has no parser.
        FileNotFoundError / FileTooLargeError: From the parser's own validation.
    """
    extension = check_file_extension(file_name or file_path, FileParser.ALLOWED_EXTENSIONS)
    parser_cls = PARSER_MAP[extension]
    return parser_cls(file_path, max_file_size_mb=max_file_size_mb, file_name=file_name)
