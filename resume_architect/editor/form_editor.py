"""form_editor.py
Edit operations behind the resume form.

Every operation returns a new ResumeData and leaves its input untouched.
Unknown sections or fields raise ValueError. Unknown item ids are a no-op.
"""
import base64
import re
from dataclasses import fields, replace
from typing import Any, List

from resume_architect.config import BUILDER_DEFAULTS
from resume_architect.i18n import PRESENT_SENTINELS, PRESENT_VALUE
from resume_architect.ids import IdGenerator, uuid_id_generator
from resume_architect.models import (
    LIST_SECTIONS,
    SECTION_ITEM_TYPES,
    Language,
    PersonalInfo,
    ResumeData,
    SkillItem,
)

# Tabs of the editor form, in display order
FORM_TABS = ("personal", "summary", "experience", "projects", "education", "skills")

# Sections whose items carry an end date that can be "currently ongoing"
PRESENT_SECTIONS = ("experience", "projects", "education")

PERSONAL_FIELDS = tuple(f.name for f in fields(PersonalInfo))

LEADING_INT_REGEX = re.compile(r"^\s*[+-]?\d+")


def _check_section(section: str) -> None:
    if section not in LIST_SECTIONS:
        raise ValueError(f"Unknown section `{section}`. Choices are: {list(LIST_SECTIONS)}")


def _item_fields(section: str) -> List[str]:
    return [f.name for f in fields(SECTION_ITEM_TYPES[section]) if f.name != "id"]


def _text_value(value: Any) -> str:
    return "" if value is None else str(value)


def _skill_level(value: Any) -> int:
    """Leading integer of `value` clamped to 0..100, or 0 when there is none."""
    match = LEADING_INT_REGEX.match(_text_value(value))
    level = int(match.group()) if match else 0
    return max(0, min(100, level))


def is_present(value: str) -> bool:
    """Whether an end date is one of the "currently ongoing" sentinels."""
    return value in PRESENT_SENTINELS


def present_value(language: Language) -> str:
    """The sentinel written when the "currently ongoing" box is ticked."""
    return PRESENT_VALUE.get(language, PRESENT_VALUE["en"])


def update_personal_info(data: ResumeData, field_name: str, value: str) -> ResumeData:
    """Set one PersonalInfo field."""
    if field_name not in PERSONAL_FIELDS:
        raise ValueError(f"Unknown personal info field `{field_name}`")
    return replace(data, personal_info=replace(data.personal_info, **{field_name: _text_value(value)}))


def update_summary(data: ResumeData, text: str) -> ResumeData:
    return replace(data, summary=_text_value(text))


def add_item(
    data: ResumeData,
    section: str,
    id_generator: IdGenerator = uuid_id_generator,
) -> ResumeData:
    """
    Append an empty item with a fresh id to `section`.

    Text fields start empty and skills start at the default level.
    """
    _check_section(section)
    item_type = SECTION_ITEM_TYPES[section]
    if item_type is SkillItem:
        new_item = SkillItem(id=id_generator(), name="", level=BUILDER_DEFAULTS.DEFAULT_SKILL_LEVEL)
    else:
        new_item = item_type(id=id_generator())
    return replace(data, **{section: [*getattr(data, section), new_item]})


def update_item(data: ResumeData, section: str, item_id: str, field_name: str, value: Any) -> ResumeData:
    """
    Set `field_name` on the item of `section` whose id is `item_id`.

    Text fields are stored as str (None becomes ""). A skill level is read
    from the leading integer of `value`, 0 when there is none, clamped to 0..100.
    """
    _check_section(section)
    if field_name not in _item_fields(section):
        raise ValueError(f"Unknown field `{field_name}` for section `{section}`")
    if section == "skills" and field_name == "level":
        value = _skill_level(value)
    else:
        value = _text_value(value)

    items = [
        replace(item, **{field_name: value}) if item.id == item_id else item
        for item in getattr(data, section)
    ]
    return replace(data, **{section: items})


def remove_item(data: ResumeData, section: str, item_id: str) -> ResumeData:
    _check_section(section)
    items = [item for item in getattr(data, section) if item.id != item_id]
    return replace(data, **{section: items})


def toggle_present(
    data: ResumeData,
    section: str,
    item_id: str,
    checked: bool,
    language: Language,
) -> ResumeData:
    """
    Tick or untick "currently ongoing" for an item.

    Ticking writes the localized sentinel into the end date, unticking clears it.
    """
    if section not in PRESENT_SECTIONS:
        raise ValueError(f"Section `{section}` has no end date. Choices are: {list(PRESENT_SECTIONS)}")
    value = present_value(language) if checked else ""
    return update_item(data, section, item_id, "end_date", value)


def set_avatar(data: ResumeData, image_bytes: bytes, mime_type: str) -> ResumeData:
    """Embed an image as the avatar (stored as a base64 data URI)."""
    if not mime_type.startswith("image/"):
        raise ValueError(f"Avatar must be an image, got `{mime_type}`")
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return update_personal_info(data, "avatar", f"data:{mime_type};base64,{encoded}")


def remove_avatar(data: ResumeData) -> ResumeData:
    return update_personal_info(data, "avatar", "")
