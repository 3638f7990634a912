"""plugdoc page rendering (Principle: Reproducibility).

This module provides Jinja2-based page assembly around composed manuals.
Pages are designed to be identical for identical template and mode.
"""

from plugdoc.templates.renderer import PageRenderer

__all__ = ["PageRenderer"]
