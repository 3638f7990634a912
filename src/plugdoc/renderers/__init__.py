"""Jinja2 filters for page rendering."""

from plugdoc.renderers.filters import collapse_blank_lines, format_version

__all__ = ["collapse_blank_lines", "format_version"]
