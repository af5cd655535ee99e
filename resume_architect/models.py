"""models.py
Holds standardized data models used across various functions.

Python attributes are snake_case. ``to_dict()`` / ``from_dict()`` convert to and
from the camelCase wire shape shared by the LLM boundary and the JSON API
(e.g. ``personalInfo.fullName``, ``startDate``).
"""
import re
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Type, TypeVar
from dataclasses import dataclass, field, fields

from resume_architect.config import BUILDER_DEFAULTS
from resume_architect.exceptions import ResumeDataError
from resume_architect.ids import IdGenerator, uuid_id_generator

Language = Literal["en", "zh"]
SUPPORTED_LANGUAGES = ("en", "zh")

# Sections of ResumeData holding lists of id-tagged items
LIST_SECTIONS = ("experience", "projects", "education", "skills")


class TemplateType(str, Enum):
    """Visual layout variants a resume can be rendered with."""
    MODERN = "MODERN"
    CLASSIC = "CLASSIC"
    MINIMAL = "MINIMAL"
    SIDEBAR = "SIDEBAR"
    FRESH_GRAD = "FRESH_GRAD"


def to_camel_case(name: str) -> str:
    """Convert a snake_case attribute name to its camelCase wire key."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_snake_case(name: str) -> str:
    """Convert a camelCase wire key to its snake_case attribute name."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


RecordT = TypeVar("RecordT", bound="WireRecord")


class WireRecord:
    """Mixin adding camelCase (de)serialization to flat dataclass records."""

    def to_dict(self) -> Dict[str, Any]:
        return {to_camel_case(f.name): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls: Type[RecordT], payload: Dict[str, Any]) -> RecordT:
        """
        Build a record from a camelCase dict. Unknown keys are ignored and
        missing or ``None`` values fall back to the field default.

        Raises:
            ResumeDataError: If the payload is not a dict or a required field
                (e.g. ``id``) is missing.
        """
        if not isinstance(payload, dict):
            raise ResumeDataError(
                f"{cls.__name__} payload must be an object, got {type(payload).__name__}",
                payload=payload,
            )
        kwargs = {}
        for f in fields(cls):
            value = payload.get(to_camel_case(f.name))
            if value is not None:
                kwargs[f.name] = value
        try:
            return cls(**kwargs)
        except TypeError as e:
            raise ResumeDataError(f"Invalid {cls.__name__} payload: {e}", payload=payload)


@dataclass
class PersonalInfo(WireRecord):
    """
    Contact details of the resume owner. Every field is an always-present string.

    Attributes:
        avatar (str): Embedded image as a ``data:<mime>;base64,...`` URI, or "".
    """
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""
    avatar: str = ""
    age: str = ""
    gender: str = ""


@dataclass
class Experience(WireRecord):
    """
    A single job.

    Attributes:
        start_date / end_date (str): "YYYY-MM" tokens, or for ``end_date`` a
            localized "present" sentinel (e.g. "Present", "至今").
        description (str): Newline-delimited bullet lines.
    """
    id: str
    title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""


@dataclass
class Project(WireRecord):
    id: str
    name: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    link: str = ""


@dataclass
class Education(WireRecord):
    """
    A school entry.

    Attributes:
        year (str): Legacy free-text range (e.g. "2018 - 2022") used when
            ``start_date`` and ``end_date`` are both empty.
        courses (str): Optional free-text list of main courses.
    """
    id: str
    degree: str = ""
    major: str = ""
    school: str = ""
    year: str = ""
    start_date: str = ""
    end_date: str = ""
    courses: str = ""


@dataclass
class SkillItem(WireRecord):
    """A named skill with a proficiency ``level`` between 0 and 100."""
    id: str
    name: str = ""
    level: int = BUILDER_DEFAULTS.DEFAULT_SKILL_LEVEL


SECTION_ITEM_TYPES = {
    "experience": Experience,
    "projects": Project,
    "education": Education,
    "skills": SkillItem,
}


@dataclass
class ResumeData:
    """
    The canonical in-memory resume document.

    List order is display order. Every item's ``id`` is unique within its list.
    """
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experience: List[Experience] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    skills: List[SkillItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "personalInfo": self.personal_info.to_dict(),
            "summary": self.summary,
            "experience": [item.to_dict() for item in self.experience],
            "projects": [item.to_dict() for item in self.projects],
            "education": [item.to_dict() for item in self.education],
            "skills": [item.to_dict() for item in self.skills],
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ResumeData":
        """
        Build ResumeData from its camelCase wire shape (ids must be present).

        Raises:
            ResumeDataError: If the payload or one of its items is malformed.
        """
        if not isinstance(payload, dict):
            raise ResumeDataError("ResumeData payload must be an object", payload=payload)

        sections = {}
        for section, item_type in SECTION_ITEM_TYPES.items():
            items = payload.get(section) or []
            if not isinstance(items, list):
                raise ResumeDataError(f"`{section}` must be a list", payload=payload)
            sections[section] = [item_type.from_dict(item) for item in items]

        return cls(
            personal_info=PersonalInfo.from_dict(payload.get("personalInfo") or {}),
            summary=payload.get("summary") or "",
            **sections,
        )


@dataclass
class UploadedDocument:
    """
    A validated upload ready to be sent to the extraction service.

    Attributes:
        file_name (str): Original file name.
        mime_type (str): MIME type derived from the extension.
        data (bytes): Raw file contents.
        text (Optional[str]): Locally extracted plain text. Set for
            word-processor files, which are sent as text instead of bytes.
        page_count (Optional[int]): Number of pages (PDF only).
    """
    file_name: str
    mime_type: str
    data: bytes = b""
    text: Optional[str] = None
    page_count: Optional[int] = None

    @property
    def is_text(self) -> bool:
        """Whether the document is sent to the model as extracted text."""
        return self.text is not None


def build_sample_resume(id_generator: IdGenerator = uuid_id_generator) -> ResumeData:
    """Return the placeholder resume shown before anything has been uploaded."""
    return ResumeData(
        personal_info=PersonalInfo(
            full_name="Alex Doe",
            email="alex.doe@example.com",
            phone="(555) 123-4567",
            location="San Francisco, CA",
            linkedin="linkedin.com/in/alexdoe",
            website="alexdoe.dev",
            avatar="",
            age="28",
            gender="Male",
        ),
        summary=(
            "Results-oriented software engineer with 5+ years of experience in full-stack "
            "development. Proven track record of delivering scalable web applications and "
            "optimizing backend performance."
        ),
        experience=[
            Experience(
                id=id_generator(),
                title="Senior Software Engineer",
                company="Tech Solutions Inc.",
                start_date="2021-03",
                end_date="Present",
                description=(
                    "• Led a team of 5 developers in rebuilding the core checkout payment microservice.\n"
                    "• Reduced API latency by 40% through caching strategies and database indexing.\n"
                    "• Mentored junior developers and conducted code reviews."
                ),
            ),
            Experience(
                id=id_generator(),
                title="Software Developer",
                company="Creative Startups LLC",
                start_date="2018-06",
                end_date="2021-02",
                description=(
                    "• Developed responsive UI components using React and Tailwind CSS.\n"
                    "• Integrated third-party APIs for map services and email notifications.\n"
                    "• Collaborated with designers to ensure pixel-perfect implementation."
                ),
            ),
        ],
        projects=[
            Project(
                id=id_generator(),
                name="E-commerce Analytics Dashboard",
                role="Frontend Lead",
                start_date="2020-01",
                end_date="2020-06",
                description=(
                    "• Built a real-time analytics dashboard using React, D3.js, and WebSocket.\n"
                    "• Optimized data visualization performance for large datasets."
                ),
                link="github.com/alexdoe/analytics",
            ),
        ],
        education=[
            Education(
                id=id_generator(),
                degree="B.S.",
                major="Computer Science",
                school="University of Technology",
                year="2018 - 2022",
                start_date="2018-09",
                end_date="2022-06",
            ),
        ],
        skills=[
            SkillItem(id=id_generator(), name=name, level=level)
            for name, level in [
                ("React", 90),
                ("TypeScript", 85),
                ("Node.js", 80),
                ("AWS", 75),
                ("Python", 70),
                ("GraphQL", 65),
                ("Docker", 60),
            ]
        ],
    )
