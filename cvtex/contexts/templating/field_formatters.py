"""
Field Formatters

Derive presentation-ready fragments from raw CV fields: name parts, social
handles, homepage display text, date periods and bullet lists.

Every formatter returns sanitized LaTeX text (or plain parts that the caller
sanitizes exactly once) and treats missing input as empty.
"""

import re
from dataclasses import dataclass
from typing import List, NamedTuple, Optional

from cvtex.contexts.templating.defaults import BULLET_MARKERS, PRESENT_LABEL
from cvtex.contexts.templating.sanitizer import escape_url, sanitize, sanitize_item

_SCHEME = re.compile(r"^https?://", re.IGNORECASE)
_BULLET_MARKER = re.compile(
    r"^(?:" + "|".join(re.escape(marker) for marker in BULLET_MARKERS) + r")\s*"
)


class NameParts(NamedTuple):
    first: str
    last: str


def split_name(full_name: Optional[str]) -> NameParts:
    """
    Split a full name into first and last name on whitespace.

    The last token is the last name; every preceding token, joined by single
    spaces, is the first name.

    Example:
        >>> split_name("John Michael Doe")
        NameParts(first='John Michael', last='Doe')
        >>> split_name("Doe")
        NameParts(first='', last='Doe')
    """
    tokens = (full_name or "").split()
    if not tokens:
        return NameParts("", "")
    return NameParts(" ".join(tokens[:-1]), tokens[-1])


def extract_handle(url: Optional[str]) -> str:
    """
    Reduce a profile URL to its final path segment.

    Example:
        >>> extract_handle("https://www.linkedin.com/in/jane-obrien/")
        'jane-obrien'
        >>> extract_handle("janeob")
        'janeob'
    """
    stripped = (url or "").strip().rstrip("/")
    if not stripped:
        return ""
    return stripped.rsplit("/", 1)[-1]


def clean_url(url: Optional[str]) -> str:
    """
    Strip the http(s) scheme and trailing slashes for display.

    Example:
        >>> clean_url("https://janeobrien.dev/")
        'janeobrien.dev'
    """
    return _SCHEME.sub("", (url or "").strip()).rstrip("/")


def format_period(
    start: Optional[str],
    end: Optional[str],
    is_current: bool = False,
    separator: str = "--",
) -> str:
    """
    Format a sanitized date range.

    An entry marked current with a blank end date ends at "Present". When only
    one side of the range is known that side is returned alone.

    Example:
        >>> format_period("Jan 2020", "", is_current=True)
        'Jan 2020--Present'
        >>> format_period("", "2019")
        '2019'
    """
    start_text = sanitize_item(start)
    end_text = sanitize_item(end)
    if is_current and not end_text:
        end_text = PRESENT_LABEL

    if start_text and end_text:
        return f"{start_text}{separator}{end_text}"
    return start_text or end_text


def reflow_bullets(description: Optional[str]) -> List[str]:
    """
    Split a newline-delimited description into sanitized bullet texts.

    Lines are trimmed, blank lines dropped, and one leading bullet marker
    ("•" or "-", plus following whitespace) is removed before sanitizing.

    Example:
        >>> reflow_bullets("• Led team\\n- Shipped feature\\n\\n")
        ['Led team', 'Shipped feature']
    """
    bullets = []
    for line in (description or "").split("\n"):
        line = line.strip()
        if not line:
            continue
        text = sanitize(_BULLET_MARKER.sub("", line, count=1))
        if text:
            bullets.append(text)
    return bullets


def bullet_items(description: Optional[str]) -> List[str]:
    """Long form: one list item per description line."""
    return reflow_bullets(description)


def flatten_description(description: Optional[str]) -> str:
    """
    Compact form: every description line joined into one sentence.

    Example:
        >>> flatten_description("• Built X\\n• Led Y")
        'Built X Led Y'
    """
    return " ".join(reflow_bullets(description))


@dataclass(frozen=True)
class PersonalInfo:
    """
    Sanitized personal fields shared by every layout's preamble.

    Empty strings mean "omit the command".
    """

    first_name: str
    last_name: str
    full_name: str
    title: str
    email: str
    phone: str
    linkedin: str
    github: str
    homepage: str
    homepage_url: str


def format_personal_info(cv) -> PersonalInfo:
    """
    Build the personal-info block from a CV record.

    Social links are reduced to handles; the homepage keeps a display form
    without scheme plus an escaped URL for link targets.

    Args:
        cv: CVRecord

    Returns:
        PersonalInfo with every field sanitized exactly once
    """
    name = split_name(cv.full_name)
    website = (cv.website or "").strip()

    return PersonalInfo(
        first_name=sanitize_item(name.first),
        last_name=sanitize_item(name.last),
        full_name=sanitize_item(cv.full_name),
        title=sanitize_item(cv.title),
        email=sanitize_item(cv.email),
        phone=sanitize_item(cv.phone),
        linkedin=escape_url(extract_handle(cv.linkedin)),
        github=escape_url(extract_handle(cv.github)),
        homepage=escape_url(clean_url(website)),
        homepage_url=escape_url(website),
    )
