"""HTML renderer using StringBuilder pattern.

Walks the AST depth-first and emits a fixed template per node kind. Content
and attribute values are inserted verbatim: nothing is escaped.

Thread Safety:
HtmlRenderer holds no per-render state; each render() call uses its own
StringBuilder. A single instance can be shared across threads.
"""

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
    Node,
    Paragraph,
    Root,
    Text,
)
from marklet.stringbuilder import StringBuilder
from marklet.utils.logger import get_logger

logger = get_logger(__name__)


class HtmlRenderer:
    """Render a marklet AST to an HTML fragment.

    Usage:
        >>> from marklet.nodes import Header, Root, Text
        >>> HtmlRenderer().render(Root((Header(1, (Text("Hi"),)),)))
        '<h1>Hi</h1>'

    """

    __slots__ = ()

    def render(self, node: Root) -> str:
        """Render a Root node to an HTML string.

        Raises:
            UnknownNodeError: A node kind has no HTML template.
        """
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb)
        html = sb.build()
        logger.debug("Rendered %d blocks into %d chars", len(node.children), len(html))
        return html

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, node: Node, sb: StringBuilder) -> None:
        match node:
            case Header():
                sb.append(f"<h{node.size}>")
                self._render_inlines(node.children, sb)
                sb.append(f"</h{node.size}>")
            case CodeBlock():
                sb.append(f"<pre><code class='{node.lang}'>{node.code}</code></pre>")
            case BlockQuote():
                self._render_blockquote(node, sb)
            case List():
                self._render_list(node, sb)
            case Hr():
                sb.append("<hr>")
            case Paragraph():
                sb.append("<p>")
                self._render_inlines(node.children, sb)
                sb.append("</p>")
            case Image() | Link() | Code():
                self._render_inline(node, sb)
            case _:
                raise UnknownNodeError(node)

    def _render_blockquote(self, quote: BlockQuote, sb: StringBuilder) -> None:
        """Nested quotes render in place; every other child gets its own <p>."""
        sb.append("<blockquote>")
        for child in quote.children:
            if isinstance(child, BlockQuote):
                self._render_blockquote(child, sb)
            else:
                sb.append("<p>")
                self._render_inline(child, sb)
                sb.append("</p>")
        sb.append("</blockquote>")

    def _render_list(self, lst: List, sb: StringBuilder) -> None:
        tag = "ol" if lst.ordered else "ul"
        sb.append(f"<{tag}>")
        for item in lst.children:
            if not isinstance(item, ListItem):
                raise UnknownNodeError(item)
            self._render_list_item(item, sb)
        sb.append(f"</{tag}>")

    def _render_list_item(self, item: ListItem, sb: StringBuilder) -> None:
        """Inline content renders bare (no <p>); nested lists recurse."""
        sb.append("<li>")
        for child in item.children:
            if isinstance(child, List):
                self._render_list(child, sb)
            else:
                self._render_inline(child, sb)
        sb.append("</li>")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, nodes: tuple[Node, ...], sb: StringBuilder) -> None:
        for node in nodes:
            self._render_inline(node, sb)

    def _render_inline(self, node: Node, sb: StringBuilder) -> None:
        match node:
            case Text():
                html = node.text
                if node.italic:
                    html = f"<i>{html}</i>"
                if node.bold:
                    html = f"<b>{html}</b>"
                sb.append(html)
            case Code():
                sb.append(f"<code class='{node.lang}'>{node.code}</code>")
            case Link():
                sb.append(f"<a href='{node.href}'>{node.text}</a>")
            case Image():
                sb.append(f"<img alt='{node.alt}' src='{node.src}'/>")
            case _:
                raise UnknownNodeError(node)
