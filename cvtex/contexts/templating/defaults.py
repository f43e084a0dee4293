"""
Default values for CVTeX document generation.

Provides shared defaults used by:
- layouts.py (template identifiers and dispatch)
- section_builders.py (fixed labels and placeholder text)
- cv_data_structure.py (default template for new records)
"""

from enum import Enum
from typing import Dict


class TemplateId(str, Enum):
    """Whole-document layouts a CV record can be rendered with."""

    CLASSIC = "classic"
    COMPACT = "compact"
    EUROPEAN = "european"


DEFAULT_TEMPLATE = TemplateId.CLASSIC

# Alternative names accepted for each layout (editor labels, older records)
TEMPLATE_ALIASES: Dict[str, TemplateId] = {
    "professional": TemplateId.CLASSIC,
    "moderncv": TemplateId.CLASSIC,
    "banking": TemplateId.COMPACT,
    "europass": TemplateId.EUROPEAN,
    "europasscv": TemplateId.EUROPEAN,
    "standardized": TemplateId.EUROPEAN,
}

# Markup families: one directory of entry templates per document class
MARKUP_MODERNCV = "moderncv"
MARKUP_EUROPASS = "europasscv"

# Fixed labels rendered inside entries
TECHNOLOGIES_LABEL = r"Technologies \& Skills:"
LINK_LABEL = "[Link]"
PRESENT_LABEL = "Present"
NO_LANGUAGES_PLACEHOLDER = "No languages specified"

# Leading bullet markers stripped from description lines
BULLET_MARKERS = ("•", "-")
