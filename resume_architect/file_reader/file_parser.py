"""file_parser.py

Holds abstract FileParser class inherited by filetype-specific parsers.
"""

import os
from abc import ABC, abstractmethod

from resume_architect.config import BUILDER_DEFAULTS
from resume_architect.models import UploadedDocument
from resume_architect.exceptions import FileOpenError, FileTooLargeError, NoFilePathError

from resume_architect.file_reader.helpers.check_file_extension import (
    check_file_extension,
    mime_type_for_extension,
)


class FileParser(ABC):
    """
    Abstract base class representing a generic upload parser.

    Validation (existence, size, extension) runs on construction so an
    oversized or unsupported upload is rejected before any work starts.
    All concrete parsers must implement the `parse` method.

    Args:
        file_path (str): Path to the file to parse.
        max_file_size_mb (float | None, optional): Maximum allowed file size in megabytes.
            If None, no size limit is enforced. Defaults to BUILDER_DEFAULTS.MAX_FILE_SIZE_MB.
        file_name (str | None, optional): Name to report for the upload (e.g. the name
            the browser sent). Defaults to the basename of `file_path`.

    Attributes:
        file_path (str): Path to the file.
        file_name (str): Display name of the upload.
        extension (str): Matched lowercase extension.
        mime_type (str): MIME type derived from `extension`.
        max_file_size_mb (float | None): Maximum allowed file size.
    """
    # Parent level allowance of file extensions supported in at least one concrete class
    ALLOWED_EXTENSIONS = [".pdf", ".png", ".jpg", ".jpeg", ".docx", ".doc"]

    # Extensions supported by a specific concreted class (to be overwritten by children)
    SUPPORTED_EXTENSIONS = []

    def __init__(
        self,
        file_path: str,
        max_file_size_mb: float | None = BUILDER_DEFAULTS.MAX_FILE_SIZE_MB,
        file_name: str | None = None,
    ):
        self.file_path = file_path
        self.max_file_size_mb = max_file_size_mb
        self.file_name = file_name or os.path.basename(str(file_path))
        self._validate_file()
        self.extension = check_file_extension(self.file_name, self.SUPPORTED_EXTENSIONS)
        self.mime_type = mime_type_for_extension(self.extension)

    def _validate_file(self):
        """Validate whether the file can be parsed by this parser.

        Raises:
            NoFilePathError: Raised if file_path is empty
            FileNotFoundError: Raised if the file cannot be found at file_path
            FileTooLargeError: Raised if the file exceeds the max_file_size_mb
        """
        if not self.file_path:
            raise NoFilePathError()

        # Confirm that the file exists in the given path
        if not os.path.exists(self.file_path):
            raise FileNotFoundError(f"File not found: {self.file_path}")

        # Check file size if a max size is specified
        if self.max_file_size_mb is not None:
            # Convert MB to bytes (1 MB = 1024 * 1024 bytes)
            max_size_bytes = self.max_file_size_mb * 1024 * 1024
            actual_size_bytes = os.path.getsize(self.file_path)

            if actual_size_bytes > max_size_bytes:
                raise FileTooLargeError(
                    max_size=max_size_bytes,
                    actual_size=actual_size_bytes
                )

    def _read_bytes(self) -> bytes:
        """
        Read the raw contents of the file.

        Raises:
            FileOpenError: If the file cannot be read.
        """
        try:
            with open(self.file_path, "rb") as f:
                return f.read()
        except OSError as e:
            raise FileOpenError(str(self.file_path), str(e))

    @abstractmethod
    def parse(self) -> UploadedDocument:
        """
        Parse the file located at `self.file_path` into an UploadedDocument ready for
        the extraction service.

        Returns:
            UploadedDocument: Either raw bytes + MIME type (images, PDFs) or locally
                extracted text (word-processor files).
        """
        pass
