"""config.py
Holds various defaults for different resume builder settings.
"""

from dataclasses import dataclass, field

# --------------------------------------------------------------
# SETUP DEFAULT VALUES
# --------------------------------------------------------------
@dataclass
class BuilderDefaults:
    """
    Default settings for parameters used across the resume_architect repo.
    """
    # ---- Upload settings ----
    MAX_FILE_SIZE_MB: float = field(
        default = 5.0,
        metadata = {
            "description": "Maximum allowed upload size in MB"
    })

    # ---- Resume data settings ----
    DEFAULT_SKILL_LEVEL: int = field(
        default = 80,
        metadata = {
            "description": "Proficiency assigned to extracted or newly added skills (0-100)"
    })
    DEFAULT_LANGUAGE: str = field(
        default = "zh",
        metadata = {
            "description": 'UI/document language at startup: "en" or "zh"'
    })
    DEFAULT_TEMPLATE: str = field(
        default = "MODERN",
        metadata = {
            "description": "Template variant selected at startup"
    })

    # ---- LLMClient settings ----
    LLM_PROVIDER: str = field(
        default = "anthropic",
        metadata = {
            "description": 'LLM provider: "anthropic"'
    })
    ANTHROPIC_MODEL_ID: str = field(
        default = "claude-haiku-4-5",
        metadata = {
            "description": "Anthropic model ID (must accept image and PDF content blocks)"
    })
    LLM_TEMPERATURE: float = field(
        default = 0.2,
        metadata = {
            "description": "Sampling temperature for extraction and translation queries"
    })
    LLM_MAX_TOKENS: int = field(
        default = 8192,
        metadata = {
            "description": "Upper bound on tokens in a structured resume response"
    })

    # ---- Preview settings ----
    A4_WIDTH_PX: int = field(
        default = 794,
        metadata = {
            "description": "Width of an A4 page at 96 DPI"
    })
    PREVIEW_PADDING_PX: int = field(
        default = 40,
        metadata = {
            "description": "Horizontal padding kept around the preview before scaling down"
    })
    PREVIEW_EDGE_PX: int = field(
        default = 20,
        metadata = {
            "description": "Space kept free at the edges when the preview is scaled down"
    })

    # ---- Export settings ----
    PDF_FORMAT: str = field(
        default = "A4",
        metadata = {
            "description": "Paper format passed to the HTML-to-PDF converter"
    })
    PDF_SCALE_FACTOR: int = field(
        default = 2,
        metadata = {
            "description": "Raster scale used when rendering the page for export"
    })
    PDF_FILENAME_SUFFIX: str = field(
        default = "_Resume.pdf",
        metadata = {
            "description": "Suffix appended to the sanitized full name"
    })
    EXPORT_DIR: str = field(
        default = "exports",
        metadata = {
            "description": "Folder that exported PDFs and print pages are written to"
    })


# Import this where needed
BUILDER_DEFAULTS = BuilderDefaults()
