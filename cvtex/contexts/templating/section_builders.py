"""
Section Builders

Build the body of each CV section from the record's collections and render
it through the entry templates of one markup family.

A section whose body comes out blank is never emitted: every layout goes
through emit_section_if_nonblank(), which is the only place that decides
whether a heading appears.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from cvtex.contexts.templating.defaults import (
    LINK_LABEL,
    NO_LANGUAGES_PLACEHOLDER,
    TECHNOLOGIES_LABEL,
)
from cvtex.contexts.templating.field_formatters import (
    bullet_items,
    flatten_description,
    format_period,
)
from cvtex.contexts.templating.logger import _log_debug
from cvtex.contexts.templating.registries import TemplateRegistry
from cvtex.contexts.templating.sanitizer import escape_url, sanitize_item


@dataclass(frozen=True)
class SectionContent:
    """
    Rendered body of one section, before the heading is added.

    Attributes:
        key: Builder key (e.g., "experience")
        title: Heading text, as LaTeX
        body: Rendered entries, possibly empty
    """

    key: str
    title: str
    body: str

    @property
    def has_content(self) -> bool:
        return bool(self.body.strip())


def emit_section_if_nonblank(
    section: SectionContent, registry: TemplateRegistry, markup: str
) -> str:
    """
    Wrap a section body with its heading, or return "" when the body is blank.

    Args:
        section: Built section
        registry: Template registry providing the section wrapper
        markup: Markup family of the document being assembled

    Returns:
        Section LaTeX, or an empty string
    """
    if not section.has_content:
        _log_debug(f"Omitting empty section '{section.key}'")
        return ""
    return registry.render(markup, "section", title=section.title, body=section.body)


def _join_nonblank(parts: List[str], separator: str = ", ") -> str:
    return separator.join(part for part in parts if part)


class SectionBuilder:
    """
    Builds section bodies for one markup family.

    Each builder method takes a CVRecord and returns the section body (an
    empty string when nothing in the source data survives sanitization).

    Args:
        registry: Template registry for entry templates
        markup: Markup family (e.g., 'moderncv')
        flat_projects: Render project descriptions as one sentence instead of
                       a bullet list
    """

    def __init__(self, registry: TemplateRegistry, markup: str, flat_projects: bool = False):
        self.registry = registry
        self.markup = markup
        self.flat_projects = flat_projects
        self._builders: Dict[str, Callable[[Any], str]] = {
            "profile": self.profile,
            "education": self.education,
            "experience": self.experience,
            "activities": self.activities,
            "certifications": self.certifications,
            "languages": self.languages,
            "skills": self.skills,
            "projects": self.projects,
        }

    @property
    def keys(self) -> List[str]:
        """Section keys this builder knows about."""
        return list(self._builders)

    def build(self, key: str, title: str, cv) -> SectionContent:
        """
        Build one section by key.

        Raises:
            KeyError: If no builder exists for key
        """
        if key not in self._builders:
            raise KeyError(f"Unknown section '{key}'. Valid sections: {self.keys}")
        return SectionContent(key=key, title=title, body=self._builders[key](cv))

    def _render_entries(self, type_name: str, contexts: List[Dict[str, Any]]) -> str:
        return "\n".join(self.registry.render(self.markup, type_name, **context) for context in contexts)

    def profile(self, cv) -> str:
        summary = sanitize_item(cv.summary)
        if not summary:
            return ""
        return self.registry.render(self.markup, "profile", summary=summary)

    def education(self, cv) -> str:
        contexts = []
        for entry in cv.education:
            has_range = bool((entry.start_date or "").strip()) and (
                bool((entry.end_date or "").strip()) or entry.is_current
            )
            if has_range:
                period = format_period(entry.start_date, entry.end_date, entry.is_current)
            else:
                period = sanitize_item(entry.year) or format_period(
                    entry.start_date, entry.end_date, entry.is_current
                )

            context = {
                "period": period,
                "degree": sanitize_item(entry.degree),
                "institution": sanitize_item(entry.institution),
                "location": sanitize_item(entry.location),
                "speciality": sanitize_item(entry.speciality),
                "details": sanitize_item(entry.details),
            }
            context["institution_line"] = _join_nonblank(
                [context["institution"], context["location"]]
            )
            if not any(
                context[name] for name in ("degree", "institution", "location", "speciality", "details")
            ):
                continue
            contexts.append(context)
        return self._render_entries("education", contexts)

    def experience(self, cv) -> str:
        contexts = []
        for entry in cv.experience:
            role = sanitize_item(entry.role)
            employment_type = sanitize_item(entry.employment_type)
            if employment_type:
                role = f"{role} ({employment_type})".strip()

            context = {
                "period": format_period(entry.start_date, entry.end_date, entry.is_current),
                "role": role,
                "company": sanitize_item(entry.company),
                "location": sanitize_item(entry.location),
                "bullets": bullet_items(entry.description),
                "technologies": sanitize_item(entry.technologies),
                "technologies_label": TECHNOLOGIES_LABEL,
            }
            context["employer_line"] = _join_nonblank([context["company"], context["location"]])
            # Dates alone do not make an entry
            if not any(
                context[name] for name in ("role", "company", "location", "bullets", "technologies")
            ):
                continue
            contexts.append(context)
        return self._render_entries("experience", contexts)

    def activities(self, cv) -> str:
        contexts = []
        for entry in cv.extracurricular_activities:
            context = {
                "period": format_period(entry.start_date, entry.end_date, entry.is_current),
                "organization": sanitize_item(entry.organization),
                "location": sanitize_item(entry.location),
                "bullets": bullet_items(entry.description),
            }
            if not any(context[name] for name in ("organization", "location", "bullets")):
                continue
            contexts.append(context)
        return self._render_entries("activity", contexts)

    def certifications(self, cv) -> str:
        contexts = []
        for entry in cv.certifications:
            context = {
                "date": sanitize_item(entry.date),
                "name": sanitize_item(entry.name),
                "provider": sanitize_item(entry.provider),
                "details": sanitize_item(entry.details),
            }
            if not any(context.values()):
                continue
            contexts.append(context)
        return self._render_entries("certification", contexts)

    def languages(self, cv) -> str:
        contexts = []
        for entry in cv.languages:
            name = sanitize_item(entry.name)
            proficiency = sanitize_item(entry.proficiency)
            if not name or not proficiency:
                continue
            contexts.append({"name": name, "proficiency": proficiency})

        if not contexts:
            contexts = [{"name": "", "proficiency": NO_LANGUAGES_PLACEHOLDER}]
        return self._render_entries("language", contexts)

    def skills(self, cv) -> str:
        skills = sanitize_item(cv.skills)
        if not skills:
            return ""
        return self.registry.render(self.markup, "skills", skills=skills)

    def projects(self, cv) -> str:
        contexts = []
        for entry in cv.projects:
            name = sanitize_item(entry.name)
            if self.flat_projects:
                bullets, description = [], flatten_description(entry.description)
            else:
                bullets, description = bullet_items(entry.description), ""

            context = {
                "name": name,
                "bullets": bullets,
                "description": description,
                "technologies": sanitize_item(entry.technologies),
                "link": escape_url(entry.link),
                "link_label": LINK_LABEL,
            }
            has_content = any(context[key] for key in ("bullets", "description", "technologies", "link"))
            if not name or not has_content:
                continue
            contexts.append(context)
        return self._render_entries("project", contexts)
