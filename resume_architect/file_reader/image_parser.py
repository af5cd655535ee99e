"""image_parser.py

Holds ImageParser class.
"""
from resume_architect.exceptions import FileEmptyError
from resume_architect.models import UploadedDocument

from resume_architect.file_reader.file_parser import FileParser


class ImageParser(FileParser):
    """Concrete parser for resume photos and scans (.png, .jpg, .jpeg)."""
    SUPPORTED_EXTENSIONS = ['.png', '.jpg', '.jpeg']

    def parse(self) -> UploadedDocument:
        """
        Read the image bytes for the multimodal extraction request.

        Raises:
            FileOpenError: If the file cannot be read.
            FileEmptyError: If the file has no content.
        """
        data = self._read_bytes()
        if not data:
            raise FileEmptyError(str(self.file_path), f"Image `{self.file_path}` is empty.")

        return UploadedDocument(
            file_name=self.file_name,
            mime_type=self.mime_type,
            data=data,
        )
