"""
LaTeX Sanitizer

Escapes free text entered by the user so it can be placed inside the braces
of a LaTeX command argument.

All substitutions happen in a single regex pass over the input, so the output
of one rule (e.g. the braces of \\textbackslash{}) is never seen by another.
The tables are built once at import time and are not exported.
"""

import re
from typing import Dict, Optional

from cvtex.utils.text_processing import collapse_whitespace

_TEXT_ESCAPES: Dict[str, str] = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "<": r"\textless{}",
    ">": r"\textgreater{}",
}

# hyperref reads \href targets verbatim apart from these escapes; characters
# that are not legal in a URL anyway are percent-encoded.
_URL_ESCAPES: Dict[str, str] = {
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "\\": r"\%5C",
    "{": r"\%7B",
    "}": r"\%7D",
    "~": r"\%7E",
    "^": r"\%5E",
    " ": r"\%20",
}

_TEXT_PATTERN = re.compile("|".join(re.escape(char) for char in _TEXT_ESCAPES))
_URL_PATTERN = re.compile("|".join(re.escape(char) for char in _URL_ESCAPES))


def _escape(text: str) -> str:
    return _TEXT_PATTERN.sub(lambda match: _TEXT_ESCAPES[match.group(0)], text)


def sanitize(text: Optional[str]) -> str:
    """
    Escape LaTeX special characters in free text.

    Conversions:
    - \\ → \\textbackslash{}
    - & % $ # _ { } → \\& \\% \\$ \\# \\_ \\{ \\}
    - ~ → \\textasciitilde{}, ^ → \\textasciicircum{}
    - < → \\textless{}, > → \\textgreater{}

    Runs of spaces and tabs collapse to one space and every line is trimmed.
    Newlines are kept; use sanitize_item() for single-line fields.

    Not idempotent: sanitizing already escaped text escapes it again.

    Args:
        text: Raw user text. None is treated as empty.

    Returns:
        LaTeX-safe text

    Example:
        >>> sanitize("R&D ~ 50%")
        'R\\\\&D \\\\textasciitilde{} 50\\\\%'
    """
    if not text:
        return ""
    return collapse_whitespace(_escape(str(text)), keep_newlines=True)


def sanitize_item(text: Optional[str]) -> str:
    """
    Escape a short field and fold it onto a single line.

    Same escapes as sanitize(), then newlines become spaces and every
    whitespace run collapses to one space.

    Example:
        >>> sanitize_item("Senior Engineer\\n  & Lead")
        'Senior Engineer \\\\& Lead'
    """
    if not text:
        return ""
    return collapse_whitespace(_escape(str(text)))


def escape_url(url: Optional[str]) -> str:
    """
    Escape a URL for use as an \\href target or a link-building command argument.

    Args:
        url: Raw URL or handle

    Returns:
        URL with LaTeX specials backslash-escaped and illegal characters
        percent-encoded

    Example:
        >>> escape_url("https://example.com/a_b#top")
        'https://example.com/a\\\\_b\\\\#top'
    """
    if not url:
        return ""
    return _URL_PATTERN.sub(lambda match: _URL_ESCAPES[match.group(0)], str(url).strip())
