"""Build variant selector.

A plugin manual is rendered for exactly one Mode at a time. The mode is
resolved once, before rendering, and passed explicitly through the traversal.
"""

from enum import Enum
from typing import Any

from plugdoc.errors import UnknownMode


class Mode(Enum):
    """Channel variant of a plugin build.

    Values are the single-letter flags used by the plugin page ids.
    """

    MONO = "m"
    STEREO = "s"

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def label(self) -> str:
        """Human-readable name (e.g. "Mono")."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: Any) -> "Mode":
        """Resolve a mode from a Mode, a flag ("m"/"s") or a name ("mono"/"stereo").

        Args:
            value: Value to resolve

        Returns:
            The matching Mode

        Raises:
            UnknownMode: If the value does not name a recognized variant
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            key = value.strip().lower()
            for mode in cls:
                if key in (mode.value, mode.name.lower()):
                    return mode

        raise UnknownMode(value)


# Page ids of the published manual pages
PAGE_MODES: dict[str, Mode] = {
    "referencer_mono": Mode.MONO,
    "referencer_stereo": Mode.STEREO,
}


def mode_from_page(page_id: str) -> Mode:
    """Resolve the mode of a manual page from its page id.

    Args:
        page_id: Page identifier (e.g. "referencer_mono")

    Returns:
        Mode for the page

    Raises:
        UnknownMode: If the page id is not a known variant page
    """
    try:
        return PAGE_MODES[page_id]
    except KeyError:
        raise UnknownMode(page_id, f"Unknown manual page: {page_id!r}") from None
