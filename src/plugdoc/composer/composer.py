"""Variant-conditional document composer (Principle: Single Source).

Resolves a template Document against one Mode and serializes it to markup.
Rendering is a pure function of (document, mode): no state is kept between
calls and the document is never modified, so one template can be rendered
for every variant, concurrently if desired.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from html import escape

from plugdoc.composer.grammar import ROOT, ElementRule, is_blank, rule_for
from plugdoc.composer.markup import find_unbalanced
from plugdoc.errors import MalformedTemplate
from plugdoc.models.mode import Mode
from plugdoc.models.nodes import Conditional, Container, Document, Node, Text

logger = logging.getLogger(__name__)


def open_marker(node: Container) -> str:
    """Build the opening marker of a container (e.g. ``<ul class="x">``)."""
    attrs = "".join(f' {name}="{escape(value, quote=True)}"' for name, value in node.attrs)
    return f"<{node.tag}{attrs}>"


def close_marker(node: Container) -> str:
    return f"</{node.tag}>"


class VariantComposer:
    """Renders a template Document for a single build variant.

    Traversal is depth-first, pre-order. Text is appended verbatim,
    Conditionals contribute their children only when their predicate holds,
    Containers always wrap their resolved children in opening and closing
    markers. Output is buffered and joined only when the whole tree has been
    resolved, so a failed render produces no output at all.

    Usage:
        composer = VariantComposer()
        html = composer.render(document, Mode.STEREO)
    """

    def __init__(self, max_workers: int | None = None) -> None:
        """Initialize the composer.

        Args:
            max_workers: Thread pool size for render_all (None = one per mode)
        """
        self.max_workers = max_workers

    def render(self, document: Document, mode: Mode | str) -> str:
        """Render a document for one mode.

        Args:
            document: Template to render
            mode: Build variant (a Mode or a value accepted by Mode.parse)

        Returns:
            Serialized markup

        Raises:
            UnknownMode: If the mode is not a recognized variant
            MalformedTemplate: If the resolved template breaks the content model
        """
        resolved = Mode.parse(mode)
        buffer: list[str] = []

        for index, node in enumerate(document.children):
            self._emit(node, resolved, ROOT, "document", document.name, index, buffer)

        rendered = "".join(buffer)
        logger.debug(
            "Rendered %s for %s mode (%d characters)",
            document.name,
            resolved,
            len(rendered),
        )
        return rendered

    def render_all(self, document: Document) -> dict[Mode, str]:
        """Render a document for every mode.

        Renders share no mutable state and run on a thread pool.

        Returns:
            Mapping of mode to markup, in Mode declaration order
        """
        modes = list(Mode)
        workers = self.max_workers or len(modes)

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {mode: executor.submit(self.render, document, mode) for mode in modes}
            return {mode: futures[mode].result() for mode in modes}

    def validate(self, document: Document) -> dict[Mode, int]:
        """Check that a document renders well-formed markup for every mode.

        Args:
            document: Template to validate

        Returns:
            Rendered size in characters per mode

        Raises:
            MalformedTemplate: On the first violation found
        """
        sizes: dict[Mode, int] = {}
        for mode in Mode:
            sizes[mode] = len(self.render(document, mode))

        logger.info(
            "Template %s is valid for %s",
            document.name,
            ", ".join(str(m) for m in sizes),
        )
        return sizes

    def _emit(
        self,
        node: Node,
        mode: Mode,
        parent: ElementRule,
        parent_tag: str,
        parent_path: str,
        index: int,
        buffer: list[str],
    ) -> None:
        """Resolve one node into the buffer.

        Conditionals are transparent: their children are checked against the
        rule of the nearest enclosing container.
        """
        if isinstance(node, Text):
            if not parent.text and not is_blank(node.content):
                raise MalformedTemplate(
                    f"text is not allowed inside <{parent_tag}>: {node.content.strip()[:40]!r}",
                    node=node,
                    path=f"{parent_path}/text[{index}]",
                    mode=mode,
                )
            problem = find_unbalanced(node.content)
            if problem:
                raise MalformedTemplate(
                    problem, node=node, path=f"{parent_path}/text[{index}]", mode=mode
                )
            buffer.append(node.content)

        elif isinstance(node, Conditional):
            path = f"{parent_path}/{node.label or 'if'}[{index}]"
            if not node.predicate(mode):
                return
            for child_index, child in enumerate(node.children):
                self._emit(child, mode, parent, parent_tag, path, child_index, buffer)

        elif isinstance(node, Container):
            path = f"{parent_path}/{node.tag}[{index}]"
            rule = rule_for(node.tag)
            if rule is None:
                raise MalformedTemplate(
                    f"unsupported element <{node.tag}>", node=node, path=path, mode=mode
                )
            if not parent.accepts(node.tag):
                raise MalformedTemplate(
                    f"<{node.tag}> is not allowed inside <{parent_tag}>",
                    node=node,
                    path=path,
                    mode=mode,
                )

            buffer.append(open_marker(node) + rule.after_open)
            start = len(buffer)
            for child_index, child in enumerate(node.children):
                self._emit(child, mode, rule, node.tag, path, child_index, buffer)
            if len(buffer) == start:
                logger.debug("Container %s is empty in %s mode", path, mode)
            buffer.append(close_marker(node) + rule.after_close)

        else:
            raise MalformedTemplate(
                f"unsupported node type {type(node).__name__}",
                node=node,
                path=f"{parent_path}[{index}]",
                mode=mode,
            )


_default_composer = VariantComposer()


def render(document: Document, mode: Mode | str) -> str:
    """Render a document for one mode with a shared default composer."""
    return _default_composer.render(document, mode)
