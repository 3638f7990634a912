"""Content model for the HTML subset a manual template may use.

Each supported element declares which child elements it accepts, whether it
accepts non-blank text, and the layout whitespace emitted after its opening
and closing markers. Conditionals are transparent to this model: only the
nodes that survive resolution for a mode are checked.

Only the blankness of Text nodes is inspected here; inline markup inside a
Text must balance on its own, which the composer checks while rendering.
"""

from dataclasses import dataclass

PHRASING: frozenset[str] = frozenset({"a", "b", "i", "em", "strong", "code", "span", "sub", "sup"})
BLOCK: frozenset[str] = frozenset({"p", "ul", "ol", "div", "h2", "h3"})
FLOW: frozenset[str] = PHRASING | BLOCK


@dataclass(frozen=True)
class ElementRule:
    """Content rule of a single element.

    Attributes:
        children: Element names accepted as direct children
        text: Whether non-blank text is accepted as a direct child
        after_open: Whitespace emitted after the opening marker
        after_close: Whitespace emitted after the closing marker
    """

    children: frozenset[str]
    text: bool = True
    after_open: str = ""
    after_close: str = ""

    def accepts(self, tag: str) -> bool:
        return tag in self.children


_LIST = ElementRule(frozenset({"li"}), text=False, after_open="\n", after_close="\n")
_HEADING = ElementRule(PHRASING, after_close="\n")

RULES: dict[str, ElementRule] = {
    "ul": _LIST,
    "ol": _LIST,
    "li": ElementRule(FLOW, after_close="\n"),
    "p": ElementRule(PHRASING, after_close="\n"),
    "div": ElementRule(FLOW, after_open="\n", after_close="\n"),
    "h2": _HEADING,
    "h3": _HEADING,
    **{tag: ElementRule(PHRASING) for tag in PHRASING},
}

# Rule applied to the children of a Document
ROOT = ElementRule(FLOW)


def rule_for(tag: str) -> ElementRule | None:
    """Get the content rule of an element, or None if the element is unsupported."""
    return RULES.get(tag)


def is_blank(content: str) -> bool:
    return not content.strip()
