"""
Document Layouts

One layout class per template identifier. Every layout exposes the same
render(cv) -> str capability; which one runs is decided once, by
resolve_template_id() and get_layout_type().

Visual parameters and the ordered section list come from
template/layouts/{template_id}.yaml. Structural behavior (markup family,
project description form) is fixed per class.
"""

from typing import Any, Dict, List, Optional, Type

from cvtex.contexts.templating.defaults import (
    DEFAULT_TEMPLATE,
    MARKUP_EUROPASS,
    MARKUP_MODERNCV,
    TEMPLATE_ALIASES,
    TemplateId,
)
from cvtex.contexts.templating.exceptions import LayoutConfigError
from cvtex.contexts.templating.field_formatters import format_personal_info
from cvtex.contexts.templating.logger import _log_debug, _log_warning
from cvtex.contexts.templating.registries import LayoutConfigRegistry, TemplateRegistry
from cvtex.contexts.templating.section_builders import SectionBuilder, emit_section_if_nonblank
from cvtex.utils.text_processing import set_max_consecutive_blank_lines


class Layout:
    """
    Base class for whole-document layouts.

    Subclasses set template_id, markup and flat_projects. Assembly is shared:
    document template(preamble with personal info, non-empty sections in
    configured order, closing boilerplate).
    """

    template_id: TemplateId = None
    markup: str = None
    flat_projects: bool = False

    def __init__(
        self,
        template_registry: TemplateRegistry = None,
        layout_registry: LayoutConfigRegistry = None,
    ):
        self.template_registry = template_registry or TemplateRegistry()
        layout_registry = layout_registry or LayoutConfigRegistry()
        self.config: Dict[str, Any] = layout_registry.get_config(self.template_id.value)
        self.builder = SectionBuilder(
            self.template_registry, self.markup, flat_projects=self.flat_projects
        )
        self._validate_sections()

    def _validate_sections(self) -> None:
        for section in self.config["sections"]:
            if "key" not in section or "title" not in section:
                raise LayoutConfigError(
                    f"Section entries in layout '{self.template_id.value}' need 'key' and 'title': {section}"
                )
            if section["key"] not in self.builder.keys:
                raise LayoutConfigError(
                    f"Unknown section '{section['key']}' in layout '{self.template_id.value}'. "
                    f"Valid sections: {self.builder.keys}"
                )

    @property
    def section_titles(self) -> List[str]:
        return [section["title"] for section in self.config["sections"]]

    def render_sections(self, cv) -> List[str]:
        """Render every configured section, dropping the empty ones."""
        rendered = []
        for section_config in self.config["sections"]:
            section = self.builder.build(section_config["key"], section_config["title"], cv)
            latex = emit_section_if_nonblank(section, self.template_registry, self.markup)
            if latex:
                rendered.append(latex)
        return rendered

    def render(self, cv) -> str:
        """
        Render a complete LaTeX document for a CV record.

        Args:
            cv: CVRecord

        Returns:
            LaTeX document source ending with a newline
        """
        personal = format_personal_info(cv)
        sections = self.render_sections(cv)
        _log_debug(
            f"Rendering '{self.template_id.value}' layout with {len(sections)} of "
            f"{len(self.config['sections'])} sections"
        )

        document = self.template_registry.render(
            self.markup,
            "document",
            config=self.config,
            personal=personal,
            sections=sections,
        )
        return set_max_consecutive_blank_lines(document, max_consecutive=1) + "\n"


class ClassicLayout(Layout):
    """moderncv, classic style, full section set with bulleted projects."""

    template_id = TemplateId.CLASSIC
    markup = MARKUP_MODERNCV


class CompactLayout(ClassicLayout):
    """moderncv, banking style, same sections with one-line project descriptions."""

    template_id = TemplateId.COMPACT
    flat_projects = True


class EuropeanLayout(Layout):
    """europasscv document with work experience, education, languages and skills."""

    template_id = TemplateId.EUROPEAN
    markup = MARKUP_EUROPASS


LAYOUT_TYPES: Dict[TemplateId, Type[Layout]] = {
    TemplateId.CLASSIC: ClassicLayout,
    TemplateId.COMPACT: CompactLayout,
    TemplateId.EUROPEAN: EuropeanLayout,
}


def resolve_template_id(value: Optional[str]) -> TemplateId:
    """
    Map a template selector to a TemplateId.

    Accepts identifiers and their aliases, case-insensitively. Unset values
    give the default layout; unknown values log a warning and give the
    default layout.

    Example:
        >>> resolve_template_id("Banking")
        <TemplateId.COMPACT: 'compact'>
        >>> resolve_template_id(None)
        <TemplateId.CLASSIC: 'classic'>
    """
    if isinstance(value, TemplateId):
        return value

    normalized = str(value or "").strip().lower()
    if not normalized:
        return DEFAULT_TEMPLATE

    for template_id in TemplateId:
        if template_id.value == normalized:
            return template_id

    if normalized in TEMPLATE_ALIASES:
        return TEMPLATE_ALIASES[normalized]

    _log_warning(
        f"Unknown template '{value}', falling back to '{DEFAULT_TEMPLATE.value}'"
    )
    return DEFAULT_TEMPLATE


def get_layout_type(template: Optional[str]) -> Type[Layout]:
    """Layout class for a template selector."""
    return LAYOUT_TYPES[resolve_template_id(template)]
