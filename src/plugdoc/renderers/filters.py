"""Jinja2 filters used by the page template.

This module provides filters that format plugin metadata and tidy the
composed manual body before it is embedded in a page.
"""

import re
from collections.abc import Sequence

_BLANK_RUN_RE = re.compile(r"\n[ \t]*(?:\n[ \t]*)+\n")


def format_version(version: Sequence[int] | str | None) -> str:
    """Format a (major, minor, micro) version for display.

    Examples:
        >>> format_version((1, 0, 0))
        '1.0.0'
        >>> format_version(None)
        'N/A'
    """
    if version is None:
        return "N/A"
    if isinstance(version, str):
        return version or "N/A"
    return ".".join(str(part) for part in version)


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of blank lines into a single blank line.

    Omitted variant sections can leave the separators around them adjacent;
    this keeps the page source tidy without touching the markup.

    Examples:
        >>> collapse_blank_lines("a\\n\\n\\n\\nb")
        'a\\n\\nb'
    """
    if not text:
        return ""
    return _BLANK_RUN_RE.sub("\n\n", text)
