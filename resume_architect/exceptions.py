"""exceptions.py
Exceptions raised by the resume builder.

Messages are built from " | "-separated parts so the context attached to an
error (provider, model, target language, wrapped exception...) reads the same
everywhere it is logged or shown.
"""
from typing import List, Optional


def _join(message: str, *details: Optional[str]) -> str:
    return " | ".join([message, *(d for d in details if d)])


# ------------------------ Upload / File Errors ------------------------
class FileParserError(Exception):
    """Base class for errors raised while validating or reading an upload."""


class FileNotSupportedError(FileParserError):
    """The upload's extension has no parser."""
    def __init__(
        self,
        extension: str,
        supported_extensions: List[str],
        context: Optional[str] = None
    ):
        self.extension = extension
        self.supported_extensions = supported_extensions
        super().__init__(_join(
            f"File with extension '{extension}' is not supported. "
            f"Supported extensions: {supported_extensions}",
            f"Context: {context}" if context else None,
        ))


class NoFilePathError(FileParserError):
    """A parser was given an empty path."""
    def __init__(self, message: str = "No file path was provided."):
        super().__init__(message)


class FileTooLargeError(FileParserError):
    """The upload is bigger than the configured limit."""
    def __init__(self, max_size: int, actual_size: int):
        self.max_size = max_size
        self.actual_size = actual_size
        super().__init__(f"File is {actual_size} bytes, the limit is {max_size} bytes.")


class FileOpenError(FileParserError):
    """The upload exists but could not be opened or decoded."""
    def __init__(self, file_path: str, original_error: str):
        self.file_path = file_path
        self.original_error = original_error
        super().__init__(_join(f"Could not read `{file_path}`", f"Original error: {original_error}"))


class FileEmptyError(FileParserError):
    """The upload has nothing to send to the extraction service."""
    def __init__(self, file_path: str, message: Optional[str] = None):
        self.file_path = file_path
        super().__init__(message or f"File `{file_path}` contains no parsable text.")


class TextExtractionUnavailableError(FileParserError):
    """A word-processor format was accepted but has no local text extractor."""
    def __init__(self, file_path: str, extension: str):
        self.file_path = file_path
        self.extension = extension
        super().__init__(
            f"No local text extractor is available for `{extension}` files ({file_path}). "
            "Save the document as .docx, .pdf or an image and upload it again."
        )


# ------------------------ Resume Data Errors ------------------------
class ResumeDataError(Exception):
    """A payload (LLM response or imported JSON) doesn't fit ResumeData."""
    def __init__(self, message: str, payload: Optional[object] = None):
        self.payload = payload
        super().__init__(message)


class TranslationError(Exception):
    """A resume translation could not be completed."""
    def __init__(self, message: str, target_language: Optional[str] = None):
        self.target_language = target_language
        super().__init__(_join(message, f"Target language: {target_language}" if target_language else None))


# ------------------------ Rendering / Export Errors ------------------------
class TemplateNotFoundError(Exception):
    """A template variant was registered against a file the renderer can't load."""
    def __init__(self, template_name: str, template_file: str):
        self.template_name = template_name
        self.template_file = template_file
        super().__init__(f"Template `{template_name}` points to `{template_file}`, which does not exist.")


class ExportError(Exception):
    """HTML to PDF conversion failed."""
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        self.original_exception = original_exception
        super().__init__(_join(
            message,
            f"Original Exception: {original_exception}" if original_exception else None,
        ))


# ------------------------ LLM Errors ------------------------
class LLMConfigError(Exception):
    """
    A setting LLMClient needs (API key, provider, model) is missing or invalid.

    Args:
        variable_name: The offending setting (usually an environment variable).
        message: Replaces the default "missing or invalid" message.
        extra_info: Appended to the message.
    """
    def __init__(
        self,
        variable_name: str,
        message: Optional[str] = None,
        extra_info: Optional[str] = None
    ):
        self.variable_name = variable_name
        self.extra_info = extra_info
        super().__init__(_join(
            message or f"Missing or invalid configuration: {variable_name}. Please set it in your .env file.",
            extra_info,
        ))

    def __str__(self):
        return f"[CONFIG ERROR] {super().__str__()} | Variable: {self.variable_name}"


class LLMError(Exception):
    """
    Base class for failures talking to the model.

    Subclasses set `base_message`; `additional_message` is appended to it after ": ".
    """
    base_message = "LLM error"

    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        additional_message: Optional[str] = None,
    ):
        self.provider = provider
        self.model = model
        self.original_exception = original_exception

        headline = f"{self.base_message}: {additional_message}" if additional_message else self.base_message
        super().__init__(_join(
            headline,
            f"Provider: {provider}" if provider else None,
            f"Model: {model}" if model else None,
            f"Original Exception: {original_exception}" if original_exception else None,
        ))


class LLMInitializationError(LLMError):
    """The chat model client could not be built or failed its connection test."""
    base_message = "Failed to initialize LLM client"


class LLMQueryError(LLMError):
    """A query failed in transport or was misconfigured."""
    base_message = "LLM query failed"


class LLMEmptyResponse(LLMError):
    """The model answered with no text."""
    base_message = "LLM returned an empty response"
