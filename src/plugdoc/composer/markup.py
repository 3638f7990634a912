"""Structural checks and re-parsing of composed markup.

- check_balanced: stack-balance check of opening/closing markers
- parse_markup: parse composer output back into a (conditional-free) Document
- visible_text: whitespace-normalized text content, for comparing renders
"""

import re
from html.parser import HTMLParser

from plugdoc.composer.grammar import rule_for
from plugdoc.errors import MalformedTemplate
from plugdoc.models.nodes import Container, Document, Node, Text

# Elements that never take a closing marker
VOID_ELEMENTS: frozenset[str] = frozenset({"br", "hr", "img", "input", "meta", "link", "wbr"})

_WHITESPACE_RE = re.compile(r"\s+")


class _BalanceChecker(HTMLParser):
    """Tracks open elements and records the first nesting violation."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.stack: list[str] = []
        self.problem: str | None = None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag not in VOID_ELEMENTS:
            self.stack.append(tag)

    def handle_endtag(self, tag: str) -> None:
        if self.problem or tag in VOID_ELEMENTS:
            return
        if not self.stack:
            self.problem = f"orphaned closing marker </{tag}>"
        elif self.stack[-1] != tag:
            self.problem = f"</{tag}> closes <{self.stack[-1]}>"
        else:
            self.stack.pop()


def find_unbalanced(markup: str) -> str | None:
    """Find the first structural nesting problem in markup.

    Returns:
        Description of the problem, or None if every opened element is closed
        in order
    """
    checker = _BalanceChecker()
    checker.feed(markup)
    checker.close()

    if checker.problem:
        return checker.problem
    if checker.stack:
        return "unclosed elements: " + ", ".join(f"<{t}>" for t in checker.stack)
    return None


def check_balanced(markup: str) -> None:
    """Raise MalformedTemplate if markup is not stack-balanced."""
    problem = find_unbalanced(markup)
    if problem:
        raise MalformedTemplate(problem, path="output")


def is_balanced(markup: str) -> bool:
    return find_unbalanced(markup) is None


class _TreeBuilder(HTMLParser):
    """Builds Text/Container nodes from markup.

    Layout whitespace the composer adds after markers is dropped again, so
    re-rendering the parsed tree reproduces the composer's output.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.stack: list[tuple[str, tuple[tuple[str, str], ...], list[Node]]] = [
            ("document", (), [])
        ]
        self._layout = ""

    def _append(self, node: Node) -> None:
        self.stack[-1][2].append(node)

    def _data(self, data: str) -> None:
        if self._layout and data.startswith(self._layout):
            data = data[len(self._layout):]
        self._layout = ""
        if data:
            self._append(Text(data))

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in VOID_ELEMENTS:
            self._append(Text(self.get_starttag_text() or f"<{tag}>"))
            self._layout = ""
            return
        pairs = tuple((name, value or "") for name, value in attrs)
        self.stack.append((tag, pairs, []))
        rule = rule_for(tag)
        self._layout = rule.after_open if rule else ""

    def handle_endtag(self, tag: str) -> None:
        if tag in VOID_ELEMENTS:
            self._append(Text(f"</{tag}>"))
            self._layout = ""
            return
        if len(self.stack) == 1 or self.stack[-1][0] != tag:
            raise MalformedTemplate(f"unexpected closing marker </{tag}>", path="output")
        name, attrs, children = self.stack.pop()
        self._append(Container(name, tuple(children), attrs))
        rule = rule_for(tag)
        self._layout = rule.after_close if rule else ""

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in VOID_ELEMENTS:
            self.handle_starttag(tag, attrs)
            return
        super().handle_startendtag(tag, attrs)

    def handle_data(self, data: str) -> None:
        self._data(data)

    def handle_entityref(self, name: str) -> None:
        self._data(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self._data(f"&#{name};")

    def handle_comment(self, data: str) -> None:
        self._data(f"<!--{data}-->")


def parse_markup(markup: str, name: str = "document") -> Document:
    """Parse composer output into a Document.

    Args:
        markup: Markup produced by VariantComposer.render
        name: Name of the resulting document

    Returns:
        Document made of Text and Container nodes only

    Raises:
        MalformedTemplate: If the markup is not balanced
    """
    builder = _TreeBuilder()
    builder.feed(markup)
    builder.close()

    if len(builder.stack) != 1:
        open_tags = ", ".join(f"<{entry[0]}>" for entry in builder.stack[1:])
        raise MalformedTemplate(f"unclosed elements: {open_tags}", path="output")

    return Document(tuple(builder.stack[0][2]), name)


class _TextCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []

    def handle_data(self, data: str) -> None:
        self.parts.append(data)


def visible_text(markup: str) -> str:
    """Extract whitespace-normalized visible text from markup."""
    collector = _TextCollector()
    collector.feed(markup)
    collector.close()
    return _WHITESPACE_RE.sub(" ", "".join(collector.parts)).strip()
