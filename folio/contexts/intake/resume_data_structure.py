"""
Resume Data Structures

Defines the immutable data model for résumé documents and the résumé index.
This structure is the interface between the Intake and Templating contexts.

Intake owns:
- Parsing raw JSON dicts into Resume / ResumeIndex instances
- Deciding which sections are complete enough to render

Templating only reads these instances; a section that is None is never rendered.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from folio.contexts.intake.exceptions import MissingFieldError
from folio.contexts.intake.logger import log_section_skipped

T = TypeVar("T")


# Field helpers


def _require_text(data: Dict[str, Any], key: str, path: str) -> str:
    """Get a required scalar field as text (JSON numbers are rendered via str())."""
    if not isinstance(data, dict) or data.get(key) is None:
        raise MissingFieldError(f"{path}.{key}" if path else key)
    value = data[key]
    if isinstance(value, (dict, list)):
        raise MissingFieldError(f"{path}.{key}" if path else key, reason="not a text value")
    return str(value)


def _optional_text(data: Dict[str, Any], key: str) -> Optional[str]:
    """Get an optional scalar field; absent, null and empty values all mean 'not present'."""
    value = data.get(key) if isinstance(data, dict) else None
    if value is None or value == "" or isinstance(value, (dict, list)):
        return None
    return str(value)


def _text_items(items: List[Any], path: str) -> Tuple[str, ...]:
    """Convert list members to text; nested objects, lists and nulls make the list malformed."""
    for i, item in enumerate(items):
        if item is None or isinstance(item, (dict, list)):
            raise MissingFieldError(f"{path}[{i}]", reason="not a text value")
    return tuple(str(item) for item in items)


def _require_text_list(data: Dict[str, Any], key: str, path: str) -> Tuple[str, ...]:
    """Get a required ordered sequence of strings."""
    field_path = f"{path}.{key}" if path else key
    if not isinstance(data, dict) or not isinstance(data.get(key), list):
        raise MissingFieldError(field_path, reason="missing or not a list")
    return _text_items(data[key], field_path)


def _require_list(data: Dict[str, Any], key: str, parse_item: Callable[[Any, str], T]) -> Tuple[T, ...]:
    """Parse a required list of objects, passing each item its indexed path."""
    if not isinstance(data.get(key), list):
        raise MissingFieldError(key, reason="missing or not a list")
    return tuple(parse_item(item, f"{key}[{i}]") for i, item in enumerate(data[key]))


@dataclass(frozen=True)
class ContactInfo:
    """Contact block shared by the main header and the sidebar."""

    email: str
    phone: str
    linkedin: str
    portfolio: str

    @classmethod
    def from_dict(cls, data: Any, path: str = "contact") -> "ContactInfo":
        return cls(
            email=_require_text(data, "email", path),
            phone=_require_text(data, "phone", path),
            linkedin=_require_text(data, "linkedin", path),
            portfolio=_require_text(data, "portfolio", path),
        )


@dataclass(frozen=True)
class Job:
    """
    Single work experience entry.

    Attributes:
        role: Job title
        company: Employer name
        location: Job location
        dates: Employment dates, verbatim (e.g., "2019 - Present")
        responsibilities: Key responsibilities, in display order
        achievements: Key achievements, in display order
    """

    role: str
    company: str
    location: str
    dates: str
    responsibilities: Tuple[str, ...]
    achievements: Tuple[str, ...]

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "Job":
        return cls(
            role=_require_text(data, "role", path),
            company=_require_text(data, "company", path),
            location=_require_text(data, "location", path),
            dates=_require_text(data, "dates", path),
            responsibilities=_require_text_list(data, "responsibilities", path),
            achievements=_require_text_list(data, "achievements", path),
        )


@dataclass(frozen=True)
class SkillSet:
    """
    Skills grouped into the four fixed categories.

    Each category is optional on its own: the skills grid needs all four,
    while the personal skills sidebar only uses `approach` (when present).
    """

    languages_frameworks: Optional[Tuple[str, ...]] = None
    backend_databases: Optional[Tuple[str, ...]] = None
    devops_tools: Optional[Tuple[str, ...]] = None
    approach: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "skills") -> "SkillSet":
        if not isinstance(data, dict):
            raise MissingFieldError(path, reason="not an object")

        def category(key: str) -> Optional[Tuple[str, ...]]:
            value = data.get(key)
            if not isinstance(value, list):
                return None
            return _text_items(value, f"{path}.{key}")

        return cls(
            languages_frameworks=category("languages_frameworks"),
            backend_databases=category("backend_databases"),
            devops_tools=category("devops_tools"),
            approach=category("approach"),
        )

    @property
    def is_complete(self) -> bool:
        """True when every category is present."""
        return None not in (
            self.languages_frameworks,
            self.backend_databases,
            self.devops_tools,
            self.approach,
        )


@dataclass(frozen=True)
class Education:
    """Single education entry. `specialization` is the only optional field."""

    degree: str
    institution: str
    location: str
    year_completed: str
    specialization: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "Education":
        return cls(
            degree=_require_text(data, "degree", path),
            institution=_require_text(data, "institution", path),
            location=_require_text(data, "location", path),
            year_completed=_require_text(data, "year_completed", path),
            specialization=_optional_text(data, "specialization"),
        )


@dataclass(frozen=True)
class Certification:
    name: str
    year_completed: str

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "Certification":
        return cls(
            name=_require_text(data, "name", path),
            year_completed=_require_text(data, "year_completed", path),
        )


@dataclass(frozen=True)
class Project:
    name: str
    description: str
    tech_stack: Tuple[str, ...]

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "Project":
        return cls(
            name=_require_text(data, "name", path),
            description=_require_text(data, "description", path),
            tech_stack=_require_text_list(data, "tech_stack", path),
        )


@dataclass(frozen=True)
class Resume:
    """
    Structured representation of a complete résumé document.

    Every section is Optional: None means the section was absent or incomplete in
    the source document, and every region fed by it is skipped. The names of
    sections dropped because of missing fields are kept in `skipped_sections`.
    """

    name: Optional[str] = None
    title: Optional[str] = None
    location: Optional[str] = None
    contact: Optional[ContactInfo] = None
    profile_summary: Optional[str] = None
    experience: Optional[Tuple[Job, ...]] = None
    skills: Optional[SkillSet] = None
    education: Optional[Tuple[Education, ...]] = None
    certifications: Optional[Tuple[Certification, ...]] = None
    projects: Optional[Tuple[Project, ...]] = None
    languages: Optional[Tuple[str, ...]] = None
    skipped_sections: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resume":
        """
        Build a Resume from a parsed JSON document.

        Sections that are absent are silently None. Sections that are present but
        missing a required sub-field are None as well, logged, and recorded in
        `skipped_sections`.

        Args:
            data: Parsed résumé JSON object

        Returns:
            Resume instance
        """
        skipped: List[str] = []

        def section(key: str, parse: Callable[[], T]) -> Optional[T]:
            if data.get(key) is None:
                return None
            try:
                return parse()
            except MissingFieldError as e:
                log_section_skipped(key, e)
                skipped.append(key)
                return None

        fields = dict(
            name=_optional_text(data, "name"),
            title=_optional_text(data, "title"),
            location=_optional_text(data, "location"),
            contact=section("contact", lambda: ContactInfo.from_dict(data["contact"])),
            profile_summary=_optional_text(data, "profile_summary"),
            experience=section("experience", lambda: _require_list(data, "experience", Job.from_dict)),
            skills=section("skills", lambda: SkillSet.from_dict(data["skills"])),
            education=section("education", lambda: _require_list(data, "education", Education.from_dict)),
            certifications=section(
                "certifications", lambda: _require_list(data, "certifications", Certification.from_dict)
            ),
            projects=section("projects", lambda: _require_list(data, "projects", Project.from_dict)),
            languages=section("languages", lambda: _require_text_list(data, "languages", "")),
        )
        return cls(**fields, skipped_sections=tuple(skipped))


@dataclass(frozen=True)
class ResumeIndexEntry:
    """Summary of one résumé as shown on the listing page."""

    name: str
    title: str
    location: str
    summary: str
    featured_skills: Tuple[str, ...]
    url: str

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "ResumeIndexEntry":
        return cls(
            name=_require_text(data, "name", path),
            title=_require_text(data, "title", path),
            location=_require_text(data, "location", path),
            summary=_require_text(data, "summary", path),
            featured_skills=_require_text_list(data, "featured_skills", path),
            url=_require_text(data, "url", path),
        )


@dataclass(frozen=True)
class ResumeIndex:
    """
    The listing page's index document: an ordered sequence of entries.

    Unlike Resume, the index is all-or-nothing: any missing field raises
    MissingFieldError and the whole listing falls back to its error view.
    """

    resumes: Tuple[ResumeIndexEntry, ...]

    @classmethod
    def from_dict(cls, data: Any) -> "ResumeIndex":
        if not isinstance(data, dict):
            raise MissingFieldError("resumes", reason="missing (document is not an object)")
        return cls(resumes=_require_list(data, "resumes", ResumeIndexEntry.from_dict))

    def __len__(self) -> int:
        return len(self.resumes)
