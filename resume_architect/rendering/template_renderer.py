"""template_renderer.py
Renders ResumeData into HTML with one of the registered template variants.
"""
from pathlib import Path
from typing import Dict, Optional, Union

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound

from resume_architect.exceptions import TemplateNotFoundError
from resume_architect.models import Language, ResumeData, TemplateType
from resume_architect.rendering.formatting import (
    bullet_lines,
    build_template_context,
    format_date,
    format_range,
)

TEMPLATES_DIR = Path(__file__).parent / "templates"

DEFAULT_TEMPLATE_FILES = {
    TemplateType.MODERN.value: "modern.html.j2",
    TemplateType.CLASSIC.value: "classic.html.j2",
    TemplateType.MINIMAL.value: "minimal.html.j2",
    TemplateType.SIDEBAR.value: "sidebar.html.j2",
    TemplateType.FRESH_GRAD.value: "fresh_grad.html.j2",
}

FALLBACK_TEMPLATE = TemplateType.MODERN.value


class TemplateRenderer:
    """
    Registry of resume layouts backed by a Jinja2 environment.

    Every variant receives the same context (see `build_template_context`), so
    new variants can be added with `register_template` without touching the
    data model. Unknown variant names render with the MODERN layout.

    Example:
        >>> renderer = TemplateRenderer()
        >>> html = renderer.render_resume(resume, TemplateType.SIDEBAR, "en")
    """

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        self.templates_dir = templates_dir
        self.template_files: Dict[str, str] = dict(DEFAULT_TEMPLATE_FILES)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["format_date"] = format_date
        self.env.filters["bullet_lines"] = bullet_lines
        self.env.globals["format_range"] = format_range

    @property
    def template_names(self) -> list:
        return list(self.template_files)

    def register_template(self, name: str, template_file: str) -> None:
        """
        Register (or replace) a layout variant.

        Raises:
            TemplateNotFoundError: If `template_file` cannot be loaded.
        """
        try:
            self.env.get_template(template_file)
        except TemplateNotFound:
            raise TemplateNotFoundError(name, template_file)

        self.template_files[name] = template_file
        self._cache.pop(name, None)

    def resolve_template_name(self, template: Union[TemplateType, str, None]) -> str:
        """Return the registered name for `template`, falling back to MODERN."""
        name = template.value if isinstance(template, TemplateType) else template
        if name in self.template_files:
            return name
        return FALLBACK_TEMPLATE

    def get_template(self, template: Union[TemplateType, str, None]) -> Template:
        name = self.resolve_template_name(template)
        if name not in self._cache:
            self._cache[name] = self.env.get_template(self.template_files[name])
        return self._cache[name]

    def render_resume(
        self,
        data: ResumeData,
        template: Union[TemplateType, str, None],
        language: Language,
    ) -> str:
        """Render the resume as an HTML fragment rooted at `<div id="resume-preview">`."""
        context = build_template_context(data, language)
        return self.get_template(template).render(**context)

    def render_document(
        self,
        data: ResumeData,
        template: Union[TemplateType, str, None],
        language: Language,
        title: Optional[str] = None,
        auto_print: bool = False,
    ) -> str:
        """
        Render a standalone A4 HTML page containing the resume.

        Args:
            title: Page title (used as the suggested file name when printing).
            auto_print: Open the print dialog as soon as the page loads.
        """
        resume_html = self.render_resume(data, template, language)
        return self.env.get_template("document.html.j2").render(
            resume_html=resume_html,
            language=language,
            title=title or data.personal_info.full_name or "Resume",
            auto_print=auto_print,
        )


# Shared instance for callers that don't register their own variants
default_renderer = TemplateRenderer()


def render_resume(data: ResumeData, template: Union[TemplateType, str, None], language: Language) -> str:
    return default_renderer.render_resume(data, template, language)


def render_document(
    data: ResumeData,
    template: Union[TemplateType, str, None],
    language: Language,
    title: Optional[str] = None,
    auto_print: bool = False,
) -> str:
    return default_renderer.render_document(data, template, language, title=title, auto_print=auto_print)
