"""Tests for HtmlRenderer on hand-built ASTs."""

import pytest

from marklet.errors import UnknownNodeError
from marklet.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Header,
    Hr,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    Root,
    Text,
)
from marklet.renderers import HtmlRenderer


def render(*blocks) -> str:
    return HtmlRenderer().render(Root(tuple(blocks)))


class TestBlocks:
    def test_empty_root(self) -> None:
        assert render() == ""

    def test_header(self) -> None:
        assert render(Header(2, (Text("x", bold=True),))) == "<h2><b>x</b></h2>"

    def test_empty_header(self) -> None:
        assert render(Header(3)) == "<h3></h3>"

    def test_code_block_is_verbatim(self) -> None:
        assert render(CodeBlock("c", "<a>&\n")) == "<pre><code class='c'><a>&\n</code></pre>"

    def test_hr(self) -> None:
        assert render(Hr(), Hr()) == "<hr><hr>"

    def test_paragraph(self) -> None:
        assert render(Paragraph((Text("a"), Text(" "), Link("t", "h")))) == (
            "<p>a <a href='h'>t</a></p>"
        )

    def test_top_level_inline_nodes_render_bare(self) -> None:
        assert render(Image("a", "s"), Link("t", "h"), Code("", "c")) == (
            "<img alt='a' src='s'/><a href='h'>t</a><code class=''>c</code>"
        )


class TestContainers:
    def test_nested_list(self) -> None:
        inner = List(ordered=True, children=(ListItem((Text("b"),)),))
        outer = List(ordered=False, children=(ListItem((Text("a"), inner)),))
        assert render(outer) == "<ul><li>a<ol><li>b</li></ol></li></ul>"

    def test_list_item_inline_has_no_paragraph(self) -> None:
        lst = List(children=(ListItem((Text("a"), Text(" "), Text("b", italic=True))),))
        assert render(lst) == "<ul><li>a <i>b</i></li></ul>"

    def test_quote_children_get_paragraphs(self) -> None:
        quote = BlockQuote((Text("a"), Code("py", "x"), BlockQuote((Text("b"),))))
        assert render(quote) == (
            "<blockquote><p>a</p><p><code class='py'>x</code></p>"
            "<blockquote><p>b</p></blockquote></blockquote>"
        )


class TestInline:
    @pytest.mark.parametrize(
        ("node", "html"),
        [
            (Text("t"), "t"),
            (Text("t", italic=True), "<i>t</i>"),
            (Text("t", bold=True), "<b>t</b>"),
            (Text("t", bold=True, italic=True), "<b><i>t</i></b>"),
            (Code("rb", "x"), "<code class='rb'>x</code>"),
            (Link("t", "h"), "<a href='h'>t</a>"),
            (Image("a", "s"), "<img alt='a' src='s'/>"),
        ],
    )
    def test_templates(self, node, html: str) -> None:
        assert render(Paragraph((node,))) == f"<p>{html}</p>"

    def test_nothing_is_escaped(self) -> None:
        assert render(Paragraph((Link("<x>", "a'b"),))) == "<p><a href='a'b'><x></a></p>"


class TestUnknownNodes:
    def test_top_level_text(self) -> None:
        with pytest.raises(UnknownNodeError) as exc_info:
            render(Text("a"))
        assert exc_info.value.node == Text("a")
        assert str(exc_info.value).startswith("Invalid node: ")

    def test_block_inside_list_item(self) -> None:
        lst = List(children=(ListItem((Paragraph((Text("a"),)),)),))
        with pytest.raises(UnknownNodeError):
            render(lst)

    def test_non_item_inside_list(self) -> None:
        with pytest.raises(UnknownNodeError):
            render(List(children=(Text("a"),)))

    def test_block_inside_paragraph(self) -> None:
        with pytest.raises(UnknownNodeError):
            render(Paragraph((Hr(),)))
