"""test_formatting.py
Test the display helpers shared by the resume templates.
"""
import pytest

from resume_architect.rendering.formatting import (
    bullet_lines,
    build_template_context,
    format_date,
    format_range,
)


@pytest.mark.parametrize("value,expected", [
    ("2023-01", "2023.01"),
    ("2023-01-15", "2023.01-15"),
    ("Present", "Present"),
    ("至今", "至今"),
    ("2023", "2023"),
    ("", ""),
    (None, ""),
])
def test_format_date(value, expected):
    assert format_date(value) == expected


@pytest.mark.parametrize("start,end,legacy,expected", [
    ("2020-01", "2022-06", "", "2020.01 - 2022.06"),
    ("2020-01", "", "", "2020.01 - Present"),
    ("", "2022-06", "", "2022.06"),
    ("", "", "2018 - 2022", "2018 - 2022"),
    ("2018-09", "2022-06", "2018 - 2022", "2018.09 - 2022.06"),
    ("", "", "", ""),
])
def test_format_range(start, end, legacy, expected):
    assert format_range(start, end, legacy) == expected


def test_bullet_lines_strips_markers():
    assert bullet_lines("• Led a team\n- Shipped it\n* Won\nPlain") == [
        "Led a team", "Shipped it", "Won", "Plain",
    ]


def test_bullet_lines_empty():
    assert bullet_lines("") == [""]


class TestTemplateContext:
    """Tests for `build_template_context`."""

    def test_flags_for_sample(self, sample_resume):
        context = build_template_context(sample_resume, "en")

        assert context["show_summary"] is True
        assert context["show_projects"] is True
        assert context["show_avatar"] is False
        assert context["show_links"] is True
        assert context["initial"] == "A"
        assert context["subtitle"] == "Senior Software Engineer"
        assert context["skill_names"][:2] == ["React", "TypeScript"]

    def test_defaults_without_experience(self, sample_resume):
        from dataclasses import replace

        context = build_template_context(replace(sample_resume, experience=[]), "en")

        assert context["objective"] == "Fresh Graduate"
        assert context["subtitle"]

    def test_localized_headers(self, sample_resume):
        context = build_template_context(sample_resume, "zh")
        assert context["t"]["experience"] == "工作经历"
