"""Template node types.

A Document is an immutable tree of nodes:
- Text: literal markup emitted verbatim
- Conditional: children emitted only when a predicate over Mode holds
- Container: structural element that always emits its opening/closing markers

Nodes are frozen dataclasses holding tuples, so a Document can be shared
between concurrent renders without copying.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Union

from plugdoc.models.mode import Mode

Predicate = Callable[[Mode], bool]


@dataclass(frozen=True)
class Text:
    """Literal markup or content.

    Attributes:
        content: Text emitted as-is
    """

    content: str


@dataclass(frozen=True)
class ModeIn:
    """Predicate that holds for a fixed set of modes."""

    modes: frozenset[Mode]

    def __call__(self, mode: Mode) -> bool:
        return mode in self.modes

    def __str__(self) -> str:
        names = sorted(str(m) for m in self.modes)
        return "only " + "|".join(names) if names else "never"


@dataclass(frozen=True)
class Conditional:
    """Children guarded by a predicate over the render mode.

    Attributes:
        predicate: Pure function of Mode deciding whether children render
        children: Ordered child nodes
        label: Optional name used in error messages and debugging
    """

    predicate: Predicate
    children: tuple["Node", ...] = ()
    label: str = ""


@dataclass(frozen=True)
class Container:
    """Structural element wrapping its children.

    Attributes:
        tag: Element name (e.g. "ul", "li", "p", "b")
        children: Ordered child nodes (may include Conditionals)
        attrs: Element attributes as (name, value) pairs, in emission order
    """

    tag: str
    children: tuple["Node", ...] = ()
    attrs: tuple[tuple[str, str], ...] = field(default=())


Node = Union[Text, Conditional, Container]


@dataclass(frozen=True)
class Document:
    """Root of a template: an ordered sequence of nodes.

    Attributes:
        children: Top-level nodes
        name: Document name, used in logs
    """

    children: tuple[Node, ...] = ()
    name: str = "document"


# =============================================================================
# Builders
# =============================================================================

Content = Union[Node, str]


def _nodes(children: Iterable[Content]) -> tuple[Node, ...]:
    """Normalize builder arguments, wrapping plain strings in Text."""
    return tuple(Text(c) if isinstance(c, str) else c for c in children)


def text(content: str) -> Text:
    """Build a Text node."""
    return Text(content)


def when(*modes: Mode, children: Iterable[Content] = (), label: str = "") -> Conditional:
    """Build a Conditional that renders for any of the given modes."""
    return Conditional(ModeIn(frozenset(modes)), _nodes(children), label)


def only(mode: Mode, *children: Content, label: str = "") -> Conditional:
    """Build a Conditional that renders for a single mode."""
    return when(mode, children=children, label=label)


def mono(*children: Content, label: str = "") -> Conditional:
    """Content present only in the mono variant."""
    return only(Mode.MONO, *children, label=label)


def stereo(*children: Content, label: str = "") -> Conditional:
    """Content present only in the stereo variant."""
    return only(Mode.STEREO, *children, label=label)


def element(tag: str, *children: Content, **attrs: str) -> Container:
    """Build a Container for an arbitrary element.

    Attribute names ending in an underscore (``class_``) have it stripped.
    """
    pairs = tuple((name.rstrip("_"), value) for name, value in attrs.items())
    return Container(tag, _nodes(children), pairs)


def p(*children: Content, **attrs: str) -> Container:
    return element("p", *children, **attrs)


def ul(*children: Content, **attrs: str) -> Container:
    return element("ul", *children, **attrs)


def li(*children: Content, **attrs: str) -> Container:
    return element("li", *children, **attrs)


def b(*children: Content) -> Container:
    return element("b", *children)


def i(*children: Content) -> Container:
    return element("i", *children)


def code(*children: Content) -> Container:
    return element("code", *children)


def document(*children: Content, name: str = "document") -> Document:
    """Build a Document from top-level nodes."""
    return Document(_nodes(children), name)
