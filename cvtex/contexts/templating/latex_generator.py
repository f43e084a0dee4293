"""
LaTeX Generator

Converts CV records to LaTeX documents. This module is the single dispatch
point between a template selector and the layout that renders it.
"""

from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Union

from cvtex.contexts.templating.cv_data_structure import CVRecord
from cvtex.contexts.templating.defaults import TemplateId
from cvtex.contexts.templating.layouts import Layout, get_layout_type, resolve_template_id
from cvtex.contexts.templating.logger import _log_debug
from cvtex.contexts.templating.registries import LayoutConfigRegistry, TemplateRegistry


class CVToLaTeXConverter:
    """
    Converts CV records to LaTeX.

    Holds the template and layout-config registries and one layout instance
    per template identifier, created on first use.
    """

    def __init__(
        self,
        template_registry: TemplateRegistry = None,
        layout_registry: LayoutConfigRegistry = None,
    ):
        self.template_registry = template_registry or TemplateRegistry()
        self.layout_registry = layout_registry or LayoutConfigRegistry()
        self._layouts: Dict[TemplateId, Layout] = {}

    def get_layout(self, template: Optional[str] = None) -> Layout:
        """
        Get the layout for a template selector.

        Args:
            template: Identifier or alias. Unset or unknown selects the default layout.

        Returns:
            Layout instance
        """
        template_id = resolve_template_id(template)
        if template_id not in self._layouts:
            self._layouts[template_id] = get_layout_type(template_id)(
                template_registry=self.template_registry,
                layout_registry=self.layout_registry,
            )
        return self._layouts[template_id]

    def generate_document(
        self, cv: Union[CVRecord, Mapping[str, Any]], template: Optional[str] = None
    ) -> str:
        """
        Generate a complete LaTeX document from a CV record.

        Args:
            cv: CVRecord, or a mapping in editor/YAML form
            template: Overrides cv.template when given

        Returns:
            LaTeX document string
        """
        if not isinstance(cv, CVRecord):
            cv = CVRecord.from_dict(cv)

        layout = self.get_layout(template or cv.template)
        _log_debug(f"Generating document with '{layout.template_id.value}' layout")
        return layout.render(cv)


@lru_cache(maxsize=1)
def _default_converter() -> CVToLaTeXConverter:
    return CVToLaTeXConverter()


def generate_cv_latex(
    cv: Union[CVRecord, Mapping[str, Any]], template: Optional[str] = None
) -> str:
    """
    Generate a LaTeX document for a CV record with the bundled templates.

    Pure with respect to its input: the record is read, never modified.

    Args:
        cv: CVRecord, or a mapping in editor (camelCase) or snake_case form
        template: Template identifier or alias; defaults to cv.template

    Returns:
        LaTeX document string

    Example:
        >>> latex = generate_cv_latex({"fullName": "Jane Doe", "skills": "Python, SQL"})
        >>> latex.startswith(r"\\documentclass")
        True
    """
    return _default_converter().generate_document(cv, template=template)
