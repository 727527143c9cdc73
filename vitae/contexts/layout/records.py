"""
Resume Record Data Structures

Defines the typed records a résumé is composed from: skills, work experience,
degrees and projects, plus the ResumeContent container that groups them.
These records are consumed once per document build and are never mutated.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple


def _as_tuple(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        raise TypeError(f"Expected a list of strings, got a single string: {values!r}")
    return tuple(str(value) for value in values)


def _as_text(value: Any, field_name: str) -> str:
    # YAML types bare scalars (e.g., `year: 2020`)
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    raise TypeError(f"{field_name} must be text, got {type(value).__name__}")


def _coerce_text_fields(record: Any, names: Tuple[str, ...], optional: Tuple[str, ...] = ()) -> None:
    """Convert the named fields of a frozen record to text in place."""
    for name in names + optional:
        value = getattr(record, name)
        if value is None and name in optional:
            continue
        object.__setattr__(record, name, _as_text(value, name))


@dataclass(frozen=True)
class Skill:
    """
    One skill category line.

    Attributes:
        category: Category label (e.g., "Languages"), must be non-empty
        items: Skills in display order (may be empty)
    """

    category: str
    items: Tuple[str, ...] = ()

    def __post_init__(self):
        _coerce_text_fields(self, ("category",))
        if not self.category or not self.category.strip():
            raise ValueError("Skill category label must be non-empty")
        object.__setattr__(self, "items", _as_tuple(self.items))


@dataclass(frozen=True)
class WorkExperience:
    """
    One employment entry.

    Attributes:
        position: Job title
        company: Employer name
        location: City or "Remote"
        start_date: Free-form start date (e.g., "Oct 2021")
        end_date: Free-form end date (e.g., "Present")
        highlights: Bullet points in display order
    """

    position: str
    company: str
    location: str
    start_date: str
    end_date: str
    highlights: Tuple[str, ...] = ()

    def __post_init__(self):
        _coerce_text_fields(self, ("position", "company", "location", "start_date", "end_date"))
        object.__setattr__(self, "highlights", _as_tuple(self.highlights))


@dataclass(frozen=True)
class Degree:
    university: str
    location: str
    degree: str
    year: str
    description: str = ""

    def __post_init__(self):
        _coerce_text_fields(self, ("university", "location", "degree", "year", "description"))


@dataclass(frozen=True)
class Project:
    """
    One project grid cell.

    Attributes:
        title: Project title
        organization: Where the project was done
        year: Year string
        nickname: Optional short name shown italicized before the title
    """

    title: str
    organization: str
    year: str
    nickname: Optional[str] = None

    def __post_init__(self):
        _coerce_text_fields(self, ("title", "organization", "year"), optional=("nickname",))


@dataclass(frozen=True)
class ResumeContent:
    """
    Structured résumé data, as stored under the `resume` key of the settings file.

    Attributes:
        skills: Skill lines, in order
        employment: Work experience entries, in order
        education: Degrees, in order
        projects: Projects, in order (laid out three per row)
        summary: Optional summary paragraph; **double asterisks** mark bold runs
    """

    skills: Tuple[Skill, ...] = ()
    employment: Tuple[WorkExperience, ...] = ()
    education: Tuple[Degree, ...] = ()
    projects: Tuple[Project, ...] = ()
    summary: Optional[str] = None

    def __post_init__(self):
        for name in ("skills", "employment", "education", "projects"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        _coerce_text_fields(self, (), optional=("summary",))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeContent":
        """
        Build ResumeContent from a plain mapping (e.g., loaded from YAML).

        Raises:
            ValueError: If the mapping or one of its entries is malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"Resume data must be a mapping, got {type(data).__name__}")

        unknown = set(data) - {"skills", "employment", "education", "projects", "summary"}
        if unknown:
            raise ValueError(f"Unknown resume keys: {sorted(unknown)}")

        try:
            return cls(
                skills=tuple(Skill(**entry) for entry in data.get("skills") or []),
                employment=tuple(
                    WorkExperience(**entry) for entry in data.get("employment") or []
                ),
                education=tuple(Degree(**entry) for entry in data.get("education") or []),
                projects=tuple(Project(**entry) for entry in data.get("projects") or []),
                summary=data.get("summary"),
            )
        except TypeError as e:
            # Missing or unexpected fields in one of the entries
            raise ValueError(f"Malformed resume entry: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain, YAML-serializable containers."""
        return {
            "skills": [
                {"category": skill.category, "items": list(skill.items)} for skill in self.skills
            ],
            "employment": [
                {
                    "position": job.position,
                    "company": job.company,
                    "location": job.location,
                    "start_date": job.start_date,
                    "end_date": job.end_date,
                    "highlights": list(job.highlights),
                }
                for job in self.employment
            ],
            "education": [
                {
                    "university": deg.university,
                    "location": deg.location,
                    "degree": deg.degree,
                    "year": deg.year,
                    "description": deg.description,
                }
                for deg in self.education
            ],
            "projects": [
                {
                    "title": proj.title,
                    "organization": proj.organization,
                    "year": proj.year,
                    "nickname": proj.nickname,
                }
                for proj in self.projects
            ],
            "summary": self.summary,
        }
