"""pdf_exporter.py
Exports a rendered resume to PDF, falling back to the browser's print dialog.
"""
import os
import re
import webbrowser
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal, Optional, Union

from resume_architect.config import BUILDER_DEFAULTS
from resume_architect.exceptions import ExportError
from resume_architect.logging import LoggerFactory
from resume_architect.models import Language, ResumeData, TemplateType
from resume_architect.rendering.template_renderer import TemplateRenderer, default_renderer

export_logger = LoggerFactory().get_logger(
    name="resume_export",
    logger_type="export"
)

# Everything except ASCII letters, digits and CJK ideographs
FILENAME_UNSAFE_REGEX = re.compile(r"[^a-zA-Z0-9一-龥]")


def sanitize_filename(full_name: str) -> str:
    """
    Replace every character outside [A-Za-z0-9] and CJK ideographs with "_".

    Example:
        >>> sanitize_filename("John O'Brien!")
        'John_O_Brien_'
    """
    return FILENAME_UNSAFE_REGEX.sub("_", full_name or "")


def export_title(full_name: str) -> str:
    """Document title used by the print fallback (the browser's suggested file name)."""
    return f"{sanitize_filename(full_name)}_Resume"


def export_filename(full_name: str) -> str:
    """File name of the exported PDF, e.g. "Jane_Doe_Resume.pdf"."""
    return f"{sanitize_filename(full_name)}{BUILDER_DEFAULTS.PDF_FILENAME_SUFFIX}"


@dataclass
class ExportResult:
    """
    Outcome of an export.

    Attributes:
        method: "pdf" when a PDF was written, "print" when the print page was opened instead.
        path: The PDF, or the print page for the fallback.
        message: Why the fallback was used ("" on success).
    """
    method: Literal["pdf", "print"]
    path: Optional[Path] = None
    message: str = ""


class PDFExporter:
    """
    Converts a rendered resume into an A4 PDF with headless Chromium (Playwright).

    When Playwright is not installed or the conversion fails, a print page is
    written instead and opened in the browser. Its title is the sanitized file
    name and it opens the print dialog on load. `export` never raises.

    Args:
        renderer (TemplateRenderer): Renders the resume document.
        output_dir (str | Path): Folder PDFs and print pages are written to.
        open_in_browser (Callable[[str], object]): Opens the print page URL.
    """

    def __init__(
        self,
        renderer: TemplateRenderer = default_renderer,
        output_dir: Union[str, Path] = BUILDER_DEFAULTS.EXPORT_DIR,
        open_in_browser: Callable[[str], object] = webbrowser.open,
    ):
        self.renderer = renderer
        self.output_dir = Path(output_dir)
        self.open_in_browser = open_in_browser

    def export(
        self,
        data: ResumeData,
        template: Union[TemplateType, str],
        language: Language,
    ) -> ExportResult:
        """
        Export `data` rendered with `template`.

        Returns:
            ExportResult: "pdf" with the written file, or "print" with the fallback page
                and the reason the PDF could not be produced.
        """
        os.makedirs(self.output_dir, exist_ok=True)
        full_name = data.personal_info.full_name
        pdf_path = self.output_dir / export_filename(full_name)
        html = self.renderer.render_document(data, template, language, title=export_title(full_name))

        try:
            self._html_to_pdf(html, pdf_path)
            export_logger.info(f"Exported resume to `{pdf_path}`")
            return ExportResult(method="pdf", path=pdf_path)
        except Exception as e:
            export_logger.warning(f"PDF export failed, falling back to browser print: {e}")
            return self._print_fallback(data, template, language, reason=str(e))

    def _html_to_pdf(self, html: str, pdf_path: Path) -> None:
        """
        Render `html` in headless Chromium and save it as an A4 PDF with zero margins.

        Raises:
            ExportError: If Playwright is missing or the conversion fails.
        """
        try:
            from playwright.sync_api import sync_playwright
        except ImportError as e:
            raise ExportError(
                "Playwright is required. Install with: pip install playwright && playwright install chromium",
                original_exception=e,
            )

        html_path = pdf_path.with_suffix(".html")
        html_path.write_text(html, encoding="utf-8")

        try:
            with sync_playwright() as p:
                browser = p.chromium.launch()
                page = browser.new_page(device_scale_factor=BUILDER_DEFAULTS.PDF_SCALE_FACTOR)
                page.goto(html_path.resolve().as_uri(), wait_until="networkidle")
                page.pdf(
                    path=str(pdf_path),
                    format=BUILDER_DEFAULTS.PDF_FORMAT,
                    print_background=True,
                    margin={"top": "0", "right": "0", "bottom": "0", "left": "0"},
                )
                browser.close()
        except Exception as e:
            raise ExportError("HTML to PDF conversion failed", original_exception=e)
        finally:
            html_path.unlink(missing_ok=True)

    def _print_fallback(
        self,
        data: ResumeData,
        template: Union[TemplateType, str],
        language: Language,
        reason: str,
    ) -> ExportResult:
        title = export_title(data.personal_info.full_name)
        print_path = self.output_dir / f"{title}.print.html"
        html = self.renderer.render_document(data, template, language, title=title, auto_print=True)
        print_path.write_text(html, encoding="utf-8")

        try:
            self.open_in_browser(print_path.resolve().as_uri())
        except Exception as e:
            export_logger.error(f"Could not open print page `{print_path}`: {e}")

        return ExportResult(method="print", path=print_path, message=reason)
