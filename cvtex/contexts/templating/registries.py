"""
Templating Registries

Centralized registries for loading and caching LaTeX templates and layout configs.
"""

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from jinja2.exceptions import TemplateError
from omegaconf import OmegaConf

from cvtex.contexts.templating.exceptions import LayoutConfigError, TemplateRenderError

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("CV_TEMPLATES_PATH") or Path(__file__).parent / "template")

REQUIRED_LAYOUT_KEYS = ("document_class", "sections")


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for LaTeX generation.

    Templates are stored in template/types/{markup}/{type_name}/template.tex.jinja,
    one directory per markup family (document class), and use custom delimiters
    to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """

    def __init__(self, types_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            types_base_path: Base path for markup directories. Defaults to
                           template/types under CV_TEMPLATES_PATH
        """
        if types_base_path is None:
            types_base_path = TEMPLATES_PATH / "types"

        self.types_base_path = Path(types_base_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.types_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Custom delimiters to avoid LaTeX brace conflicts
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            # Block tags on their own line leave no blank line behind; a blank
            # line inside a command argument would end the paragraph
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    @staticmethod
    def _key(markup: str, type_name: str) -> str:
        return f"{markup}/{type_name}"

    def get_template(self, markup: str, type_name: str) -> Template:
        """
        Get a template by markup family and type name, loading and caching it if necessary.

        Args:
            markup: Markup family (e.g., 'moderncv', 'europasscv')
            type_name: Name of the type (e.g., 'experience')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        key = self._key(markup, type_name)
        if key in self._cache:
            return self._cache[key]

        template_path = f"{key}/template.tex.jinja"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for type '{key}' at {self.types_base_path / template_path}"
            ) from e

        self._cache[key] = template
        return template

    def render(self, markup: str, type_name: str, **context: Any) -> str:
        """
        Render a template and strip surrounding whitespace.

        Args:
            markup: Markup family
            type_name: Name of the type
            **context: Template variables

        Returns:
            Rendered LaTeX

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateRenderError: If rendering fails (e.g. undefined variable)
        """
        template = self.get_template(markup, type_name)
        try:
            return template.render(**context).strip()
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render template",
                type_name=self._key(markup, type_name),
                template_path=self.get_template_path(markup, type_name),
                original_error=e,
            ) from e

    def get_template_path(self, markup: str, type_name: str) -> Path:
        """
        Get the file path for a type's template.

        Args:
            markup: Markup family
            type_name: Name of the type (e.g., 'experience')

        Returns:
            Path to template file
        """
        return self.types_base_path / markup / type_name / "template.tex.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, markup: str, type_name: str) -> bool:
        """Check if a template is in the cache."""
        return self._key(markup, type_name) in self._cache


class LayoutConfigRegistry:
    """
    Registry for loading and caching layout configurations.

    Layout configs are stored in template/layouts/{template_id}.yaml and define
    the document class, markup family, visual style and ordered section list of
    one whole-document layout.
    """

    def __init__(self, layouts_base_path: Path = None):
        """
        Initialize the layout config registry.

        Args:
            layouts_base_path: Directory holding layout YAML files. Defaults to
                             template/layouts under CV_TEMPLATES_PATH
        """
        if layouts_base_path is None:
            layouts_base_path = TEMPLATES_PATH / "layouts"

        self.layouts_base_path = Path(layouts_base_path)
        self._cache: Dict[str, Dict[str, Any]] = {}

    def get_config(self, template_id: str) -> Dict[str, Any]:
        """
        Get a layout config by template identifier, loading and caching it if necessary.

        Args:
            template_id: Layout identifier (e.g., 'classic')

        Returns:
            Dict containing the layout configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            LayoutConfigError: If required keys are missing
        """
        if template_id in self._cache:
            return self._cache[template_id]

        config_path = self.get_config_path(template_id)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Layout config not found for template '{template_id}' at {config_path}"
            )

        config = OmegaConf.load(config_path)
        config_dict = OmegaConf.to_container(config, resolve=True)

        missing = [key for key in REQUIRED_LAYOUT_KEYS if key not in config_dict]
        if missing:
            raise LayoutConfigError(
                f"Layout config {config_path} is missing required keys: {', '.join(missing)}"
            )

        self._cache[template_id] = config_dict
        return config_dict

    def get_config_path(self, template_id: str) -> Path:
        """Get the file path for a layout's config."""
        return self.layouts_base_path / f"{template_id}.yaml"

    def available(self) -> List[str]:
        """Identifiers of all layout configs on disk, sorted."""
        return sorted(path.stem for path in self.layouts_base_path.glob("*.yaml"))

    def clear_cache(self):
        """Clear the layout config cache."""
        self._cache.clear()

    def is_cached(self, template_id: str) -> bool:
        """Check if a layout config is in the cache."""
        return template_id in self._cache
