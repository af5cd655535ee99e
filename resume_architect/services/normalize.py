"""normalize.py
Converts between ResumeData and the id-free JSON exchanged with the LLM.

Extraction responses carry no ids and list skills as bare strings.
Translation requests drop ids and the avatar, and translation responses get
both re-attached from the original resume.
"""
from dataclasses import fields
from typing import Any, Dict, List, Optional

from resume_architect.config import BUILDER_DEFAULTS
from resume_architect.exceptions import ResumeDataError
from resume_architect.ids import IdGenerator, uuid_id_generator
from resume_architect.models import (
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeData,
    SkillItem,
    to_camel_case,
)


def _text(value: Any) -> str:
    """Coerce a JSON scalar to str. ``None`` and missing values become ""."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any, key: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ResumeDataError(f"`{key}` must be a list, got {type(value).__name__}", payload=value)
    return value


def _record_from_payload(record_type, item: Any, item_id: str):
    """Build a flat record from an id-less item, coercing every text field."""
    item = _as_dict(item)
    values = {
        f.name: _text(item.get(to_camel_case(f.name)))
        for f in fields(record_type)
        if f.name != "id"
    }
    return record_type(id=item_id, **values)


def _skill_name(item: Any) -> str:
    # Tolerate {"name": ...} objects although the shape asks for bare strings
    if isinstance(item, dict):
        return _text(item.get("name"))
    return _text(item)


# --------------------------------------------------------------
# EXTRACTION
# --------------------------------------------------------------
def resume_from_extraction_payload(
    payload: Dict[str, Any],
    id_generator: IdGenerator = uuid_id_generator,
) -> ResumeData:
    """
    Map a parsed extraction response onto ResumeData.

    - every list item gets a fresh id
    - missing or ``null`` text fields become ""
    - skills (bare strings) become SkillItems at the default level
    - skills without a name (null, {} or blank) are dropped
    - the avatar is always empty

    Raises:
        ResumeDataError: If `payload` is not an object or a section is not a list.
    """
    if not isinstance(payload, dict):
        raise ResumeDataError("Extraction response must be a JSON object", payload=payload)

    personal = _as_dict(payload.get("personalInfo"))
    personal_info = PersonalInfo(**{
        f.name: _text(personal.get(to_camel_case(f.name)))
        for f in fields(PersonalInfo)
        if f.name != "avatar"
    })

    return ResumeData(
        personal_info=personal_info,
        summary=_text(payload.get("summary")),
        experience=[
            _record_from_payload(Experience, item, id_generator())
            for item in _as_list(payload.get("experience"), "experience")
        ],
        projects=[
            _record_from_payload(Project, item, id_generator())
            for item in _as_list(payload.get("projects"), "projects")
        ],
        education=[
            _record_from_payload(Education, item, id_generator())
            for item in _as_list(payload.get("education"), "education")
        ],
        skills=[
            SkillItem(id=id_generator(), name=name, level=BUILDER_DEFAULTS.DEFAULT_SKILL_LEVEL)
            for name in map(_skill_name, _as_list(payload.get("skills"), "skills"))
            if name.strip()
        ],
    )


# --------------------------------------------------------------
# TRANSLATION
# --------------------------------------------------------------
def build_translation_payload(data: ResumeData) -> Dict[str, Any]:
    """
    Snapshot `data` for translation: ids and the avatar are dropped and
    skills are flattened to their names.
    """
    wire = data.to_dict()
    personal_info = dict(wire["personalInfo"])
    personal_info.pop("avatar", None)

    def strip_ids(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [{k: v for k, v in item.items() if k != "id"} for item in items]

    return {
        "personalInfo": personal_info,
        "summary": wire["summary"],
        "experience": strip_ids(wire["experience"]),
        "projects": strip_ids(wire["projects"]),
        "education": strip_ids(wire["education"]),
        "skills": [skill.name for skill in data.skills],
    }


def _original_id(items: List[Any], index: int, id_generator: IdGenerator) -> str:
    if index < len(items):
        return items[index].id
    return id_generator()


def merge_translation(
    original: ResumeData,
    payload: Dict[str, Any],
    id_generator: IdGenerator = uuid_id_generator,
) -> ResumeData:
    """
    Merge a translated payload back into a new ResumeData.

    Ids are re-attached by position: the i-th translated entry of a list gets
    the id of the i-th original entry, or a fresh id when the response has
    more entries than the original. Skill levels follow the same rule
    (default level for extra entries) and skills without a name are dropped.
    The avatar is restored verbatim and age/gender fall back to the original
    values when the response omits them.

    Raises:
        ResumeDataError: If `payload` is not an object or a section is not a list.
    """
    if not isinstance(payload, dict):
        raise ResumeDataError("Translation response must be a JSON object", payload=payload)

    translated = _as_dict(payload.get("personalInfo"))
    personal_values = {
        f.name: _text(translated.get(to_camel_case(f.name)))
        for f in fields(PersonalInfo)
    }
    personal_values["avatar"] = original.personal_info.avatar
    personal_values["age"] = personal_values["age"] or original.personal_info.age
    personal_values["gender"] = personal_values["gender"] or original.personal_info.gender

    def merge_section(section: str, record_type) -> List[Any]:
        originals = getattr(original, section)
        return [
            _record_from_payload(record_type, item, _original_id(originals, index, id_generator))
            for index, item in enumerate(_as_list(payload.get(section), section))
        ]

    skills = []
    for index, item in enumerate(_as_list(payload.get("skills"), "skills")):
        name = _skill_name(item)
        if not name.strip():
            continue
        source: Optional[SkillItem] = original.skills[index] if index < len(original.skills) else None
        skills.append(SkillItem(
            id=source.id if source else id_generator(),
            name=name,
            level=source.level if source else BUILDER_DEFAULTS.DEFAULT_SKILL_LEVEL,
        ))

    return ResumeData(
        personal_info=PersonalInfo(**personal_values),
        summary=_text(payload.get("summary")),
        experience=merge_section("experience", Experience),
        projects=merge_section("projects", Project),
        education=merge_section("education", Education),
        skills=skills,
    )
