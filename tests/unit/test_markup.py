"""Unit tests for markup balance checks and re-parsing."""

import pytest

from plugdoc.composer import VariantComposer, check_balanced, is_balanced, parse_markup, visible_text
from plugdoc.composer.markup import find_unbalanced
from plugdoc.content import REFERENCER_MANUAL
from plugdoc.errors import MalformedTemplate
from plugdoc.models import Conditional, Container, Document, Mode, Text
from plugdoc.models.nodes import document, li, p, stereo, ul


class TestBalance:
    """Tests for the stack-balance checker."""

    def test_balanced(self) -> None:
        assert is_balanced("<ul>\n<li>a <b>b</b></li>\n</ul>\n")

    def test_void_elements_ignored(self) -> None:
        assert is_balanced("<p>a<br>b</p>")

    def test_orphaned_closer(self) -> None:
        assert find_unbalanced("<p>a</p></ul>") == "orphaned closing marker </ul>"

    def test_misordered_closers(self) -> None:
        assert find_unbalanced("<ul><li>a</ul></li>") == "</ul> closes <li>"

    def test_unclosed(self) -> None:
        assert find_unbalanced("<ul><li>a") == "unclosed elements: <ul>, <li>"

    def test_check_balanced_raises(self) -> None:
        with pytest.raises(MalformedTemplate, match="unclosed elements"):
            check_balanced("<p>open")


class TestParseMarkup:
    """Tests for parse_markup."""

    def test_parses_containers_and_text(self) -> None:
        doc = parse_markup("<p>a <b>b</b></p>\n<ul>\n<li>c</li>\n</ul>\n")

        assert doc == Document(
            (
                Container("p", (Text("a "), Container("b", (Text("b"),)))),
                Container("ul", (Container("li", (Text("c"),)),)),
            )
        )

    def test_keeps_attributes_and_entities(self) -> None:
        doc = parse_markup('<div class="x">\nA &amp; B</div>\n')

        container = doc.children[0]
        assert isinstance(container, Container)
        assert container.attrs == (("class", "x"),)
        assert "".join(t.content for t in container.children if isinstance(t, Text)) == "A &amp; B"

    def test_unexpected_closer_raises(self) -> None:
        with pytest.raises(MalformedTemplate, match="unexpected closing marker"):
            parse_markup("<p>a</b>")

    def test_unclosed_raises(self) -> None:
        with pytest.raises(MalformedTemplate, match="unclosed elements: <ul>"):
            parse_markup("<ul><li>a</li>")

    def test_result_has_no_conditionals(self, composer: VariantComposer, tagged_document: Document) -> None:
        parsed = parse_markup(composer.render(tagged_document, Mode.STEREO))

        def walk(nodes: tuple) -> None:
            for node in nodes:
                assert not isinstance(node, Conditional)
                if isinstance(node, Container):
                    walk(node.children)

        walk(parsed.children)

    @pytest.mark.parametrize("mode", list(Mode))
    def test_round_trip_tagged(
        self, composer: VariantComposer, tagged_document: Document, mode: Mode
    ) -> None:
        """Test re-rendering the parsed output reproduces it."""
        output = composer.render(tagged_document, mode)

        assert composer.render(parse_markup(output), mode) == output

    @pytest.mark.parametrize("mode", list(Mode))
    def test_round_trip_manual(self, composer: VariantComposer, mode: Mode) -> None:
        """Test the full manual keeps its visible content through a re-parse."""
        output = composer.render(REFERENCER_MANUAL, mode)
        reparsed = composer.render(parse_markup(output), mode)

        assert visible_text(reparsed) == visible_text(output)
        assert reparsed == output

    @pytest.mark.parametrize("line_break", ["<br>", "<br/>", "<br />"])
    def test_round_trip_void_elements(self, composer: VariantComposer, line_break: str) -> None:
        doc = document(p(f"a{line_break}b"), ul(li("c", stereo("<hr>"))))
        output = composer.render(doc, Mode.STEREO)
        check_balanced(output)

        parsed = parse_markup(output)

        assert parsed.children[0] == Container("p", (Text("a"), Text(line_break), Text("b")))
        assert composer.render(parsed, Mode.STEREO) == output


class TestVisibleText:
    """Tests for visible_text."""

    def test_strips_markup_and_normalizes_whitespace(self) -> None:
        assert visible_text("<ul>\n<li><b>Mix</b> - the  button</li>\n</ul>\n") == "Mix - the button"

    def test_decodes_entities(self) -> None:
        assert visible_text("<p>A &amp; B</p>") == "A & B"
