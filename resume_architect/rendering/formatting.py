"""formatting.py
Formatting and data selection shared by every resume template.
"""
import re
from typing import Any, Dict, List, Optional

from resume_architect.i18n import (
    FIELD_LABELS,
    FRESH_GRAD_HEADERS,
    SECTION_HEADERS,
    get_strings,
)
from resume_architect.models import Language, ResumeData

LEADING_BULLET_REGEX = re.compile(r"^[•\-\*]\s*")


def format_date(value: Optional[str]) -> str:
    """
    Format a "YYYY-MM" token for display as "YYYY.MM".

    Values shorter than 5 characters or without a "-" (e.g. "Present", "至今")
    are returned unchanged. Only the first "-" is replaced.

    Example:
        >>> format_date("2023-01")
        '2023.01'
        >>> format_date("至今")
        '至今'
    """
    if not value:
        return ""
    if len(value) < 5 or "-" not in value:
        return value
    return value.replace("-", ".", 1)


def format_range(start: Optional[str], end: Optional[str], legacy_year: Optional[str] = "") -> str:
    """
    Format a date range, preferring start/end over the legacy free-text year.

    - both set: "<start> - <end>"
    - only start: "<start> - Present"
    - only end: "<end>"
    - neither: `legacy_year` or ""
    """
    if start or end:
        s = format_date(start)
        e = format_date(end)
        if s and e:
            return f"{s} - {e}"
        if s:
            return f"{s} - Present"
        return e
    return legacy_year or ""


def bullet_lines(description: Optional[str]) -> List[str]:
    """Split a description on newlines, stripping any leading •, - or * from each line."""
    return [LEADING_BULLET_REGEX.sub("", line) for line in (description or "").split("\n")]


def build_template_context(data: ResumeData, language: Language) -> Dict[str, Any]:
    """
    Select the data and localized labels a template needs.

    Conditional sections are decided here so every variant applies the same
    rules: summary, projects, avatar and links are only shown when non-empty.
    """
    info = data.personal_info
    first_title = data.experience[0].title if data.experience else ""
    labels = get_strings(FIELD_LABELS, language)
    fresh = get_strings(FRESH_GRAD_HEADERS, language)

    return {
        "data": data,
        "info": info,
        "language": language,
        "t": get_strings(SECTION_HEADERS, language),
        "labels": labels,
        "fresh": fresh,
        "show_summary": bool(data.summary),
        "show_projects": bool(data.projects),
        "show_avatar": bool(info.avatar),
        "show_links": bool(info.website),
        "first_education": data.education[0] if data.education else None,
        "initial": info.full_name[:1],
        "subtitle": first_title or labels["defaultTitle"],
        "objective": first_title or fresh["defaultObjective"],
        "skill_names": [skill.name for skill in data.skills],
    }
