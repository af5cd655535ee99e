"""check_file_extension.py
Checks file extension and confirms that it's supported by the resume uploader.
"""

import os

from resume_architect.exceptions import FileNotSupportedError

# MIME types sent alongside raw bytes to the extraction service
MIME_TYPES = {
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".doc": "application/msword",
}


def check_file_extension(file_path: str, supported_extensions: list[str]) -> str:
    """
    Validate and return the lowercase file extension for a given file path.
    Supports multi-dot extensions like '.tar.gz'.
    """
    file_name = os.path.basename(str(file_path)).lower()

    # Try to match the longest supported extension
    for ext in sorted(supported_extensions, key=len, reverse=True):
        if file_name.endswith(ext.lower()):
            return ext.lower()

    # If none matched
    ext = os.path.splitext(file_name)[1]
    raise FileNotSupportedError(
        extension=ext,
        supported_extensions=supported_extensions,
        context="Failed in check_file_extension() call."
    )


def mime_type_for_extension(extension: str) -> str:
    """Return the MIME type for a supported extension (octet-stream if unknown)."""
    return MIME_TYPES.get(extension.lower(), "application/octet-stream")
