"""
CV Record Structure

Defines the structured CV data consumed by the generator.

Records come from the editor as JSON with camelCase keys (fullName,
employmentType, isCurrent, ...) or from hand-written YAML with snake_case keys.
Both are accepted. Loading is tolerant: missing keys, None values and
malformed collection items fall back to empty values instead of raising, so
a half-filled form still renders.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

import yaml

from cvtex.contexts.templating.defaults import DEFAULT_TEMPLATE
from cvtex.contexts.templating.exceptions import InvalidCVStructureError

T = TypeVar("T", bound="_Record")

_TRUE_STRINGS = {"true", "yes", "1", "on"}


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _lookup(data: Mapping[str, Any], name: str) -> Any:
    """Fetch a field by its snake_case name, falling back to camelCase."""
    if name in data:
        return data[name]
    return data.get(_to_camel(name))


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ", ".join(_as_str(item) for item in value)
    return str(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


class _Record:
    """Shared conversion helpers for CV dataclasses."""

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Mapping[str, Any]]) -> T:
        """
        Build a record from a mapping, tolerating missing and malformed fields.

        Args:
            data: Mapping with snake_case or camelCase keys. None gives an empty record.

        Returns:
            Record instance with every field populated
        """
        if not isinstance(data, Mapping):
            data = {}

        values = {}
        for record_field in fields(cls):
            raw = _lookup(data, record_field.name)
            if record_field.type is bool:
                values[record_field.name] = _as_bool(raw)
            else:
                values[record_field.name] = _as_str(raw)
        return cls(**values)

    def to_dict(self, camel_case: bool = False) -> Dict[str, Any]:
        """Plain dict of this record, optionally with the editor's camelCase keys."""
        result = {}
        for record_field in fields(self):
            key = _to_camel(record_field.name) if camel_case else record_field.name
            result[key] = getattr(self, record_field.name)
        return result


@dataclass
class Experience(_Record):
    """One job. description holds one bullet point per line."""

    id: str = ""
    company: str = ""
    role: str = ""
    employment_type: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    technologies: str = ""
    description: str = ""


@dataclass
class Education(_Record):
    """One degree. year is used when no start/end range is given."""

    id: str = ""
    institution: str = ""
    degree: str = ""
    speciality: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    year: str = ""
    details: str = ""


@dataclass
class Certification(_Record):
    id: str = ""
    name: str = ""
    provider: str = ""
    date: str = ""
    details: str = ""


@dataclass
class Project(_Record):
    id: str = ""
    name: str = ""
    technologies: str = ""
    link: str = ""
    description: str = ""


@dataclass
class ExtracurricularActivity(_Record):
    id: str = ""
    organization: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    description: str = ""


@dataclass
class Language(_Record):
    """A spoken language. proficiency is one of Native, Fluent, Advanced,
    Intermediate or Basic in the editor, but any text is accepted."""

    id: str = ""
    name: str = ""
    proficiency: str = ""


# Collection field name -> entry type
COLLECTION_TYPES: Dict[str, Type[_Record]] = {
    "experience": Experience,
    "education": Education,
    "certifications": Certification,
    "projects": Project,
    "extracurricular_activities": ExtracurricularActivity,
    "languages": Language,
}


def _build_collection(entry_type: Type[T], raw: Any) -> List[T]:
    if not isinstance(raw, (list, tuple)):
        return []
    return [entry_type.from_dict(item) for item in raw if isinstance(item, Mapping)]


@dataclass
class CVRecord:
    """
    A complete CV as edited by the user.

    Attributes:
        full_name: Full name; the last whitespace-separated token is the family name
        title: Professional title shown under the name
        email, phone, website, linkedin, github: Contact fields (may be empty)
        summary: Profile paragraph
        skills: Comma-separated skills, rendered as one line
        template: Layout identifier (see defaults.TemplateId)
        experience ... languages: Ordered collections
    """

    full_name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    linkedin: str = ""
    github: str = ""
    summary: str = ""
    skills: str = ""
    template: str = DEFAULT_TEMPLATE.value
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    extracurricular_activities: List[ExtracurricularActivity] = field(default_factory=list)
    languages: List[Language] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "CVRecord":
        """
        Build a CVRecord from a mapping (editor JSON or YAML).

        Unknown keys are ignored. An empty or missing template falls back to
        the default layout.
        """
        if not isinstance(data, Mapping):
            data = {}

        values: Dict[str, Any] = {}
        for record_field in fields(cls):
            raw = _lookup(data, record_field.name)
            if record_field.name in COLLECTION_TYPES:
                values[record_field.name] = _build_collection(
                    COLLECTION_TYPES[record_field.name], raw
                )
            else:
                values[record_field.name] = _as_str(raw)

        if not values["template"].strip():
            values["template"] = DEFAULT_TEMPLATE.value

        return cls(**values)

    def to_dict(self, camel_case: bool = False) -> Dict[str, Any]:
        """
        Plain dict of the record, suitable for YAML/JSON serialization.

        Args:
            camel_case: Use the editor's camelCase keys instead of snake_case
        """
        result: Dict[str, Any] = {}
        for record_field in fields(self):
            key = _to_camel(record_field.name) if camel_case else record_field.name
            value = getattr(self, record_field.name)
            if record_field.name in COLLECTION_TYPES:
                value = [entry.to_dict(camel_case=camel_case) for entry in value]
            result[key] = value
        return result


def load_cv_record(path: Path) -> CVRecord:
    """
    Load a CV record from a YAML or JSON file.

    Records are read as plain data: CV text is never interpreted, so "${" in a
    summary or description stays literal text.

    Args:
        path: File to read

    Returns:
        Parsed CVRecord

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidCVStructureError: If the file is not valid YAML/JSON or its top
                                 level is not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CV file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise InvalidCVStructureError(f"CV file is not valid YAML or JSON: {path}\n{e}") from e

    # Empty file
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidCVStructureError(
            f"CV file must contain a mapping at the top level, got {type(data).__name__}: {path}"
        )

    # Editor exports sometimes wrap the record: {"name": ..., "cvData": {...}}
    for wrapper_key in ("cvData", "cv_data"):
        if isinstance(data.get(wrapper_key), dict):
            data = data[wrapper_key]
            break

    return CVRecord.from_dict(data)


__all__ = [
    "CVRecord",
    "Certification",
    "Education",
    "Experience",
    "ExtracurricularActivity",
    "Language",
    "Project",
    "COLLECTION_TYPES",
    "load_cv_record",
]
