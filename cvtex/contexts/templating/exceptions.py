"""Custom exceptions for templating context with template references."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when an entry, section or document template fails to render.

    CV data never causes this (missing fields render as empty), so it points
    at a broken template file or a template expecting a variable its builder
    does not pass.

    Attributes:
        message: Error description
        type_name: Markup family and type of the template (e.g., 'moderncv/experience')
        template_path: Path to the template file
        original_error: The Jinja2 error
    """

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.type_name = type_name
        self.template_path = template_path
        self.original_error = original_error

        lines = [message]
        if type_name:
            lines.append(f"Type: {type_name}")
        if template_path:
            lines.append(f"Template: {template_path}")
        if original_error:
            lines.append(f"Cause: {original_error}")

        super().__init__("\n".join(lines))


class InvalidCVStructureError(ValueError):
    """
    Exception raised when a CV file cannot be read as a CV record.

    Only the top level is checked (it must be a mapping). Missing or malformed
    fields inside it are tolerated and render as empty.
    """


class LayoutConfigError(ValueError):
    """Exception raised when a layout config lacks required keys or names an unknown section."""
