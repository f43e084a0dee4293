"""
Text processing utilities for whitespace normalization.
"""

import re

_HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")
_ANY_WHITESPACE = re.compile(r"\s+")
_BLANK_LINE_RUN = re.compile(r"\n(?:[^\S\n]*\n)+")


def collapse_whitespace(text: str, keep_newlines: bool = False) -> str:
    """
    Collapse runs of whitespace to a single space and trim.

    Args:
        text: Text to normalize
        keep_newlines: If True, only spaces and tabs are collapsed. Each line is
                       trimmed and newlines are preserved.

    Returns:
        Normalized text

    Example:
        >>> collapse_whitespace("  Led   the\\t team ")
        'Led the team'
        >>> collapse_whitespace(" a  b \\n  c ", keep_newlines=True)
        'a b\\nc'
    """
    if not text:
        return ""

    if not keep_newlines:
        return _ANY_WHITESPACE.sub(" ", text).strip()

    lines = [_HORIZONTAL_WHITESPACE.sub(" ", line).strip() for line in text.split("\n")]
    return "\n".join(lines).strip()


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Squeeze runs of blank (or whitespace-only) lines down to max_consecutive.

    Example:
        >>> set_max_consecutive_blank_lines("a\\n\\n\\n\\nb")
        'a\\n\\nb'
        >>> set_max_consecutive_blank_lines("a\\n \\n\\nb", max_consecutive=0)
        'a\\nb'
    """
    return _BLANK_LINE_RUN.sub(lambda match: _squeeze(match, max_consecutive), content)


def _squeeze(match: "re.Match", max_consecutive: int) -> str:
    blank_lines = match.group(0).count("\n") - 1
    return "\n" * (min(blank_lines, max_consecutive) + 1)
