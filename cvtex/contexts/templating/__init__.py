"""
Templating Context

Responsibilities:
- Represents CV records (personal fields and ordered collections)
- Escapes user text for LaTeX and formats fields for display
- Builds document sections and drops the empty ones
- Dispatches a template identifier to one whole-document layout

Owns: CV record structure, LaTeX escaping, section and layout templates
Never: Compiles PDFs, stores CVs, or calls external services
"""

from cvtex.contexts.templating.converter import (
    GenerationResult,
    cv_to_latex,
    generate_cv_file,
)
from cvtex.contexts.templating.cv_data_structure import (
    Certification,
    CVRecord,
    Education,
    Experience,
    ExtracurricularActivity,
    Language,
    Project,
    load_cv_record,
)
from cvtex.contexts.templating.defaults import TemplateId
from cvtex.contexts.templating.latex_generator import CVToLaTeXConverter, generate_cv_latex
from cvtex.contexts.templating.layouts import resolve_template_id
from cvtex.contexts.templating.sanitizer import escape_url, sanitize, sanitize_item

__all__ = [
    # Generation entry points
    "generate_cv_latex",
    "CVToLaTeXConverter",
    "resolve_template_id",
    "TemplateId",
    # File orchestration
    "cv_to_latex",
    "generate_cv_file",
    "GenerationResult",
    # Data structure classes
    "CVRecord",
    "Experience",
    "Education",
    "Certification",
    "Project",
    "ExtracurricularActivity",
    "Language",
    "load_cv_record",
    # Escaping
    "sanitize",
    "sanitize_item",
    "escape_url",
]
