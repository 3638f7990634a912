"""Authored manual templates.

Manuals are static Documents built at import time and never mutated.
"""

from plugdoc.content.referencer import REFERENCER_MANUAL
from plugdoc.models.nodes import Document

MANUALS: dict[str, Document] = {
    "referencer": REFERENCER_MANUAL,
}


def get_manual(name: str) -> Document:
    """Get a manual template by name.

    Raises:
        ValueError: If no manual with this name exists
    """
    try:
        return MANUALS[name]
    except KeyError:
        raise ValueError(f"Manual not found: {name}. Available: {sorted(MANUALS)}") from None


__all__ = ["MANUALS", "REFERENCER_MANUAL", "get_manual"]
