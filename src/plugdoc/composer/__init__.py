"""plugdoc variant composer (Principle: Single Source).

This module resolves variant-conditional templates into markup, one mode per
render, with deterministic and well-formed output.
"""

from plugdoc.composer.composer import VariantComposer, render
from plugdoc.composer.markup import check_balanced, is_balanced, parse_markup, visible_text

__all__ = [
    "VariantComposer",
    "render",
    "check_balanced",
    "is_balanced",
    "parse_markup",
    "visible_text",
]
